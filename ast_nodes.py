"""AST node definitions for the small imperative language.

This module defines the AST node dataclasses produced by the parser. Each
node is a frozen dataclass carrying the relevant information (an operator,
child nodes, names). The `NodeType` enum identifies node kinds and is used by
the pretty-printer, the JSON exporter and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the source `line`/`column` of the token that
    started the node. Positions do not take part in equality, so trees built
    by hand compare equal to parsed ones.
- Nodes are immutable and own their children exclusively; sequences of
    parameters and statements are tuples.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple, Union


class NodeType(Enum):
    NUMBER_LITERAL = auto()
    VARIABLE = auto()
    BINARY_OP = auto()
    ASSIGNMENT = auto()
    FUNC_DECL = auto()
    IF_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


# Expression Nodes
@dataclass(frozen=True)
class NumberLiteralNode(ASTNode):
    type: NodeType = NodeType.NUMBER_LITERAL
    value: int = 0


@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: str = ""


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    operator: str = ""
    right: ASTNode = field(default_factory=lambda: NumberLiteralNode())


# Statement Nodes
@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    name: str = ""
    value: ASTNode = field(default_factory=lambda: NumberLiteralNode())


@dataclass(frozen=True)
class FunctionDeclarationNode(ASTNode):
    type: NodeType = NodeType.FUNC_DECL
    name: str = ""
    parameters: Tuple[str, ...] = ()
    body: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class IfStatementNode(ASTNode):
    type: NodeType = NodeType.IF_STMT
    condition: ASTNode = field(default_factory=lambda: NumberLiteralNode())
    body: Tuple[ASTNode, ...] = ()


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: Tuple[ASTNode, ...] = ()


Expression = Union[NumberLiteralNode, VariableNode, BinaryOpNode]
Statement = Union[AssignmentNode, FunctionDeclarationNode, IfStatementNode]

EXPRESSION_TYPES = (NodeType.NUMBER_LITERAL, NodeType.VARIABLE, NodeType.BINARY_OP)
STATEMENT_TYPES = (NodeType.ASSIGNMENT, NodeType.FUNC_DECL, NodeType.IF_STMT)

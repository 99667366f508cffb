"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. Every node carries a
`node_type` tag plus its fields; source positions are included as `line`
and `column`.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def _pos(node: ASTNode) -> Dict[str, int]:
    return {"line": node.line, "column": node.column}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    # A bare statement list, as returned by Parser.parse()
    if isinstance(node, (list, tuple)):
        return [ast_to_json(s) for s in node]

    t = node.type
    # expressions
    if t == NodeType.NUMBER_LITERAL and isinstance(node, NumberLiteralNode):
        return {"node_type": "NumberLiteral", "value": node.value, **_pos(node)}
    if t == NodeType.VARIABLE and isinstance(node, VariableNode):
        return {"node_type": "Variable", "name": node.name, **_pos(node)}
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": node.operator,
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **_pos(node),
        }
    # statements and higher-level nodes
    if t == NodeType.ASSIGNMENT and isinstance(node, AssignmentNode):
        return {
            "node_type": "Assignment",
            "name": node.name,
            "value": ast_to_json(node.value),
            **_pos(node),
        }
    if t == NodeType.FUNC_DECL and isinstance(node, FunctionDeclarationNode):
        return {
            "node_type": "FunctionDecl",
            "name": node.name,
            "parameters": list(node.parameters),
            "body": [ast_to_json(s) for s in node.body],
            **_pos(node),
        }
    if t == NodeType.IF_STMT and isinstance(node, IfStatementNode):
        return {
            "node_type": "If",
            "condition": ast_to_json(node.condition),
            "body": [ast_to_json(s) for s in node.body],
            **_pos(node),
        }
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {
            "node_type": "Program",
            "statements": [ast_to_json(s) for s in node.statements],
            **_pos(node),
        }

    raise TypeError(f"Cannot serialize AST node of type {type(node).__name__}")

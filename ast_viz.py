"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Tree layout: every AST node becomes one graph node labelled with its kind and
payload (operator, name, value). Edges run from parent to child and are
labelled with the field that holds the child (`left`, `value`, `body[0]`).
Statement nodes are drawn as boxes and expression nodes as ellipses.
"""

from typing import List, Tuple
from graphviz import Digraph
from ast_nodes import *


def _label(node: ASTNode) -> str:
    match node:
        case NumberLiteralNode(value=v):
            text = f"NumberLiteral\\n{v}"
        case VariableNode(name=n):
            text = f"Variable\\n{n}"
        case BinaryOpNode(operator=op):
            text = f"BinaryOp\\n{op}"
        case AssignmentNode(name=n):
            text = f"Assignment\\n{n}"
        case FunctionDeclarationNode(name=n, parameters=params):
            text = f"FunctionDecl\\n{n}({', '.join(params)})"
        case IfStatementNode():
            text = "If"
        case ProgramNode():
            text = "Program"
        case _:
            text = type(node).__name__
    return text


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    match node:
        case BinaryOpNode(left=left, right=right):
            return [("left", left), ("right", right)]
        case AssignmentNode(value=value):
            return [("value", value)]
        case FunctionDeclarationNode(body=body):
            return [(f"body[{i}]", s) for i, s in enumerate(body)]
        case IfStatementNode(condition=cond, body=body):
            return [("condition", cond)] + [
                (f"body[{i}]", s) for i, s in enumerate(body)
            ]
        case ProgramNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case _:
            return []


def render_ast_dot(node) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    `node` may be a `ProgramNode`, a single node, or the statement list
    returned by `Parser.parse()` (wrapped in a program node for drawing).
    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    if isinstance(node, (list, tuple)):
        node = ProgramNode(statements=tuple(node))

    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", fontsize="10")

    # Iterative walk; ids are assigned in pre-order.
    counter = 0
    stack: List[Tuple[ASTNode, str, str]] = [(node, "", "")]
    while stack:
        current, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        shape = "ellipse" if current.type in EXPRESSION_TYPES else "box"
        dot.node(node_id, label=_label(current), shape=shape)
        if parent_id:
            dot.edge(parent_id, node_id, label=edge_label)

        # Push in reverse so children are numbered left to right.
        for field_name, child in reversed(_children(current)):
            stack.append((child, node_id, field_name))

    return dot


def write_and_render(node, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)

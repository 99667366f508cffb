"""Pretty-printer for tokens and the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, `print_surface(node)` which renders a
compact source-like one-liner, and `print_tokens(tokens)` for token dumps.
The printer is intended for debugging, tests and the command-line driver
rather than for producing final source code.

Examples:
    PrettyPrinter.print_ast(program_node)
    PrettyPrinter.print_surface(assignment_node)  # "x = 1 + 2"
"""

from __future__ import annotations
from typing import List, Optional
from ast_nodes import *
from tokens import Token


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token], limit: Optional[int] = None) -> str:
        """Return one line per token: index, token and source position."""
        lines = []
        shown = tokens if limit is None else tokens[:limit]
        for i, token in enumerate(shown):
            lines.append(f"{i:3}: {token!r} @ {token.line}:{token.column}")
        if limit is not None and len(tokens) > limit:
            lines.append(f"... and {len(tokens) - limit} more")
        return "\n".join(lines)

    @staticmethod
    def print_ast(node, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string.

        `node` may also be a list or tuple of statements, as returned by
        `Parser.parse()`.
        """
        lines = []
        indent_str = " " * indent

        if isinstance(node, (list, tuple)):
            for i, stmt in enumerate(node):
                lines.append(PrettyPrinter.print_ast(stmt, indent, f"stmt[{i}]: "))
            return "\n".join(line for line in lines if line)

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberLiteralNode(value=v):
                lines.append(f"{indent_str}{prefix}NumberLiteral({v})")

            case VariableNode(name=n):
                lines.append(f"{indent_str}{prefix}Variable({n})")

            case BinaryOpNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case AssignmentNode(name=name, value=value):
                lines.append(f"{indent_str}{prefix}Assignment({name})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case FunctionDeclarationNode(name=name, parameters=params, body=body):
                lines.append(
                    f"{indent_str}{prefix}FunctionDecl({name}, params=[{', '.join(params)}])"
                )
                for i, stmt in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"body[{i}]: "))

            case IfStatementNode(condition=cond, body=body):
                lines.append(f"{indent_str}{prefix}IfStatement")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                for i, stmt in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"body[{i}]: "))

            case ProgramNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node.

        Nested binary operations are parenthesized on either side, so the
        printed text re-parses to the same tree (`1 + (2 + 3)`, `(a + b) * 2`).
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n) if isinstance(n, ASTNode) else str(n)

        def _operand(n: ASTNode) -> str:
            if isinstance(n, BinaryOpNode):
                return f"({_p(n)})"
            return _p(n)

        match node:
            case NumberLiteralNode(value=v):
                return str(v)
            case VariableNode(name=n):
                return n
            case BinaryOpNode(left=l, operator=op, right=r):
                return f"{_operand(l)} {op} {_operand(r)}"
            case AssignmentNode(name=name, value=value):
                return f"{name} = {_p(value)}"
            case IfStatementNode(condition=cond):
                return f"if ({_p(cond)})"
            case FunctionDeclarationNode(name=fn, parameters=params):
                return f"function {fn}({', '.join(params)})"
            case ProgramNode():
                return "<program>"
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())

from __future__ import annotations
import json
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


EXAMPLE_PROGRAM = """
function startEngine() {
    speed = 100;
    if (speed > 60) {
        applyBrakes();
    }
}
"""


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token], strict: bool = False) -> ProgramNode:
    """Parse tokens into a program node."""
    parser = Parser(tokens, strict=strict)
    return parser.parse_program()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_json: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    strict: bool = False,
) -> bool:
    """Process a single program: lex, parse and optionally print each stage.

    Returns True when the program parsed, False on a syntax error.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            print(PrettyPrinter.print_tokens(tokens, limit=50))

        ast = parse_tokens(tokens, strict=strict)
    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return False

    # The printers recurse on the tree, so very deep expressions cannot be shown.
    try:
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_ast(ast))

        if print_json:
            print(json.dumps(ast_to_json(ast), indent=2))
    except RecursionError:
        print("AST is nested too deeply to print")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = True,
    print_json: bool = False,
    strict: bool = False,
) -> None:
    """Run interactive parser REPL reading programs from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(
            text,
            print_tokens=print_tokens,
            print_ast=print_ast,
            print_json=print_json,
            strict=strict,
        )


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse a program from a file, the built-in example, or stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    group.add_argument(
        "--example",
        dest="example",
        action="store_true",
        help="Process the built-in startEngine example program",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--json", dest="print_json", action="store_true", help="Print the AST as JSON"
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Verify every expected delimiter and keyword instead of skipping it",
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_json=args.print_json,
            strict=args.strict,
        )
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.example:
        text = EXAMPLE_PROGRAM
    else:
        parser.print_help()
        return 0

    ok = process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_json=args.print_json,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
        strict=args.strict,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())

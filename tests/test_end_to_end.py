"""The startEngine example: tokenizes fully, then fails on the call statement."""

import pytest

from main import EXAMPLE_PROGRAM
from ast_nodes import *
from lexer import tokenize
from parser import Parser, ParseError
from tokens import TokenKind


def test_example_program_tokenizes():
    tokens = tokenize(EXAMPLE_PROGRAM)
    assert tokens[0].text == "function"
    assert [t.text for t in tokens if t.kind == TokenKind.OPERATOR] == [">"]
    assert tokens[-1].kind == TokenKind.EOF


def test_example_program_fails_on_call_statement():
    with pytest.raises(ParseError) as excinfo:
        Parser(EXAMPLE_PROGRAM).parse()
    token = excinfo.value.token
    assert token.text == ")"
    assert (token.line, token.column) == (5, 21)


def test_example_program_fails_at_assignment_step_in_strict_mode():
    with pytest.raises(ParseError, match="Expected '='") as excinfo:
        Parser(EXAMPLE_PROGRAM, strict=True).parse()
    assert excinfo.value.token.text == "("


def test_example_program_with_assignment_in_place_of_call():
    src = EXAMPLE_PROGRAM.replace("applyBrakes();", "brakes = 1;")
    ast = Parser(src).parse()
    assert ast == [
        FunctionDeclarationNode(
            name="startEngine",
            parameters=(),
            body=(
                AssignmentNode(name="speed", value=NumberLiteralNode(value=100)),
                IfStatementNode(
                    condition=BinaryOpNode(
                        left=VariableNode(name="speed"),
                        operator=">",
                        right=NumberLiteralNode(value=60),
                    ),
                    body=(
                        AssignmentNode(
                            name="brakes", value=NumberLiteralNode(value=1)
                        ),
                    ),
                ),
            ),
        )
    ]

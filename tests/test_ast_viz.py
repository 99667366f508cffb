"""Tests for ast_viz: ensure a Digraph is produced and mirrors the tree."""

from tests.utils import parse_text
from ast_viz import render_ast_dot
from parser import Parser


def test_ast_viz_dot_source():
    dot = render_ast_dot(parse_text("x = 1 + y;"))
    src = dot.source
    assert "Program" in src
    assert "Assignment" in src
    assert "BinaryOp" in src
    assert "n0 -> n1" in src
    assert "n1 -> n2" in src
    assert "label=left" in src
    assert "label=right" in src


def test_ast_viz_node_count_matches_tree():
    program = Parser("function f(a) { if (a) { b = 2; } }").parse_program()
    src = render_ast_dot(program).source
    # Program, FunctionDecl, If, Variable, Assignment, NumberLiteral
    assert src.count("->") == 5
    assert "shape=box" in src
    assert "shape=ellipse" in src

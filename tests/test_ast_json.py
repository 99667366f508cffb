import json

import pytest

from tests.utils import parse_text
from ast_json import ast_to_json
from ast_nodes import ASTNode, NodeType
from parser import Parser


def test_ast_to_json_assignment():
    assert ast_to_json(parse_text("x = 1;")) == [
        {
            "node_type": "Assignment",
            "name": "x",
            "value": {"node_type": "NumberLiteral", "value": 1, "line": 1, "column": 5},
            "line": 1,
            "column": 1,
        }
    ]


def test_ast_to_json_program_is_serializable():
    program = Parser("function f(a) { if (a < 2) { b = a * 3; } }").parse_program()
    data = ast_to_json(program)
    assert data["node_type"] == "Program"
    assert (data["line"], data["column"]) == (1, 1)
    fn = data["statements"][0]
    assert fn["node_type"] == "FunctionDecl"
    assert fn["parameters"] == ["a"]
    cond = fn["body"][0]
    assert cond["node_type"] == "If"
    assert cond["condition"]["operator"] == "<"
    assert cond["body"][0]["value"]["right"] == {
        "node_type": "NumberLiteral",
        "value": 3,
        "line": 1,
        "column": 38,
    }
    # round-trips through the json module
    assert json.loads(json.dumps(data)) == data


def test_ast_to_json_none_and_unknown():
    assert ast_to_json(None) is None
    with pytest.raises(TypeError):
        ast_to_json(ASTNode(type=NodeType.PROGRAM))

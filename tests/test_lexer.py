import pytest

from main import lex
from lexer import LexError, tokenize
from tokens import Token, TokenKind


def kinds(tokens):
    return [t.kind for t in tokens]


def test_lexer_digit_run_is_single_number_token():
    assert tokenize("1234567890") == [
        Token(TokenKind.NUMBER, "1234567890"),
        Token(TokenKind.EOF, ""),
    ]


def test_lexer_recognizes_keywords_without_partial_match():
    assert tokenize("function") == [
        Token(TokenKind.KEYWORD, "function"),
        Token(TokenKind.EOF, ""),
    ]
    assert tokenize("functionX") == [
        Token(TokenKind.IDENTIFIER, "functionX"),
        Token(TokenKind.EOF, ""),
    ]
    assert kinds(tokenize("if iffy")) == [
        TokenKind.KEYWORD,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_lexer_whitespace_is_transparent():
    assert tokenize("a  b") == tokenize("a b")
    assert tokenize("a\t\nb") == [
        Token(TokenKind.IDENTIFIER, "a"),
        Token(TokenKind.IDENTIFIER, "b"),
        Token(TokenKind.EOF, ""),
    ]


def test_lexer_operators_and_delimiters():
    tokens = lex("+-*/<>(){},;=")
    assert [t.kind for t in tokens[:6]] == [TokenKind.OPERATOR] * 6
    assert [t.kind for t in tokens[6:13]] == [TokenKind.DELIMITER] * 7
    assert "".join(t.text for t in tokens) == "+-*/<>(){},;="
    assert tokens[-1].kind == TokenKind.EOF


def test_lexer_number_followed_by_letters_splits():
    assert tokenize("12ab") == [
        Token(TokenKind.NUMBER, "12"),
        Token(TokenKind.IDENTIFIER, "ab"),
        Token(TokenKind.EOF, ""),
    ]
    assert tokenize("a1b2")[0] == Token(TokenKind.IDENTIFIER, "a1b2")


def test_lexer_identifier_continues_with_unicode_letters():
    tokens = tokenize("café = 1;")
    assert tokens[0] == Token(TokenKind.IDENTIFIER, "café")
    # multi-byte characters count as one column
    assert tokens[1].column == 6


def test_lexer_empty_input_yields_only_eof():
    assert tokenize("") == [Token(TokenKind.EOF, "")]
    assert tokenize(" \n\t ") == [Token(TokenKind.EOF, "")]


def test_lexer_tracks_line_and_column():
    tokens = tokenize("x =\n  42;")
    number = tokens[2]
    assert number == Token(TokenKind.NUMBER, "42")
    assert (number.line, number.column) == (2, 3)
    assert (tokens[-1].line, tokens[-1].column) == (2, 6)


def test_lexer_unknown_character_is_fatal():
    with pytest.raises(LexError, match=r"\$") as excinfo:
        tokenize("a$b")
    assert excinfo.value.char == "$"
    assert (excinfo.value.line, excinfo.value.column) == (1, 2)
    assert isinstance(excinfo.value, SyntaxError)


@pytest.mark.parametrize("src", ["_x", "3.14", "x\r\n", "é", "-5 % 2", "a != b"])
def test_lexer_rejects_characters_outside_the_alphabet(src):
    with pytest.raises(LexError, match="Unexpected character"):
        tokenize(src)

"""
Lexer for the small imperative language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes the keywords `function` and `if`, identifiers, integer
    literals, the single-character operators `+ - * / < >` and the delimiters
    `( ) { } , ; =`. Spaces, tabs and newlines are skipped.

Examples:
    Input:  "function add(a, b) { x = a + b; }"
    Tokens: [KEYWORD('function'), IDENTIFIER('add'), DELIMITER('('), ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
    Every character is visited exactly once; there is no backtracking.
- Numbers are maximal runs of ASCII digits. Identifiers start with an ASCII
    letter and continue with any alphanumeric character; the result is mapped
    to a keyword when it is one of `KEYWORDS`.
- Any other character aborts the scan with a `LexError`.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenKind, KEYWORDS, OPERATORS, DELIMITERS, WHITESPACE


class LexError(SyntaxError):
    """Raised on the first character that no token rule accepts."""

    def __init__(self, message: str, char: Optional[str], line: int, column: int):
        super().__init__(f"Lexical error at line {line}, column {column}: {message}")
        self.char = char
        self.line = line
        self.column = column


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def error(self, message: str = "") -> LexError:
        return LexError(message, self.current_char, self.line, self.column)

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self) -> None:
        """Skip space, tab and newline characters."""
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def number(self) -> str:
        """Scan a maximal run of ASCII digits."""
        result = []

        while self.current_char is not None and _is_ascii_digit(self.current_char):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def identifier(self) -> str:
        """Scan an identifier or keyword."""
        result = []

        # The caller has already checked for a leading ASCII letter.
        result.append(self.current_char)
        self.advance()

        # Continuation characters may be any alphanumeric character.
        while self.current_char is not None and self.current_char.isalnum():
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    def get_next_token(self) -> Token:
        """Return the next token, or EOF once the input is exhausted."""
        while self.current_char is not None:
            if self.current_char in WHITESPACE:
                self.skip_whitespace()
                continue

            line, column = self.line, self.column

            if _is_ascii_digit(self.current_char):
                return Token(TokenKind.NUMBER, self.number(), line, column)

            if _is_ascii_letter(self.current_char):
                ident = self.identifier()
                kind = TokenKind.KEYWORD if ident in KEYWORDS else TokenKind.IDENTIFIER
                return Token(kind, ident, line, column)

            if self.current_char in OPERATORS:
                ch = self.current_char
                self.advance()
                return Token(TokenKind.OPERATOR, ch, line, column)

            if self.current_char in DELIMITERS:
                ch = self.current_char
                self.advance()
                return Token(TokenKind.DELIMITER, ch, line, column)

            raise self.error(f"Unexpected character '{self.current_char}'")

        return Token(TokenKind.EOF, "", self.line, self.column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, terminated by EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize `source` eagerly and return the full token list."""
    return Lexer(source).tokenize()

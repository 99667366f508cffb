"""Token definitions for the lexer.

This module defines the `TokenKind` enum for the token classes recognized by
the lexer and a small immutable `Token` dataclass that holds a kind and the
exact matched text. Tokens are the atomic units produced by the lexer and
consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


class TokenKind(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    OPERATOR = auto()
    DELIMITER = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = frozenset({"function", "if"})

OPERATORS = frozenset("+-*/<>")

DELIMITERS = frozenset("(){},;=")

WHITESPACE = frozenset(" \t\n")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""
    # Position of the first character (1-based); ignored by equality.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {repr(self.text)})"

    def is_(self, kind: TokenKind, text: Optional[str] = None) -> bool:
        if self.kind != kind:
            return False
        return text is None or self.text == text

    @property
    def lexeme(self) -> str:
        if not self.text:
            return str(self.kind)
        return self.text

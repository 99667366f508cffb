"""
Parser for the small imperative language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. Each grammar
    rule is a `parse_*` method that looks only at the current token
    (`self.peek()`) to decide what to do; there is no backtracking.

Grammar:
    program     := statement* EOF
    statement   := function_decl | if_stmt | assignment
    function_decl := 'function' IDENT '(' params ')' '{' statement* '}'
    params      := (IDENT | ',')*
    if_stmt     := 'if' '(' expression ')' '{' statement* '}'
    assignment  := IDENT '=' expression ';'
    expression  := term (OPERATOR expression)?
    term        := NUMBER | IDENT | '(' expression ')'

Key points:
- Expressions have a single precedence level and are right-associative:
    `a + b * c - d` parses as `a + (b * (c - d))`.
- Statement dispatch is decided by the current token alone: the keywords
    `function` and `if` start their statements, an identifier starts an
    assignment. There is no call or expression statement, so `f();` fails.
- In the default (lenient) mode the punctuation and keywords a rule expects
    (`(`, `)`, `{`, `}`, `=`, `;`) are consumed without checking their text.
    With `strict=True` every such step is verified and a mismatch raises a
    `ParseError` naming the expected token.
- Inside a parameter list only identifiers and commas are accepted; any other
    token raises instead of being skipped.

Examples:
    Parser("x = 1 + 2 + 3;").parse()
    -> [Assignment(x, BinaryOp(1, +, BinaryOp(2, +, 3)))]
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Union
from tokens import Token, TokenKind
from ast_nodes import *
from lexer import tokenize

INT32_MAX = 2**31 - 1


class ParseError(SyntaxError):
    """Raised on the first token that no grammar rule accepts."""

    def __init__(self, message: str, token: Optional[Token] = None):
        if token is not None and token.line:
            message = f"{message} at line {token.line}, column {token.column}"
        super().__init__(message)
        self.token = token


class Parser:
    def __init__(self, source: Union[str, Sequence[Token]], *, strict: bool = False):
        if isinstance(source, str):
            tokens = tokenize(source)
        else:
            tokens = list(source)

        # The token list always ends with exactly one EOF token.
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            tokens.append(Token(TokenKind.EOF, ""))

        self.tokens: List[Token] = tokens
        self.strict = strict
        self.pos = 0
        self._consumed = False

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self.pos]
        if token.kind == TokenKind.EOF:
            raise self.unexpected(token)
        self.pos += 1
        return token

    def unexpected(self, token: Token) -> ParseError:
        if token.kind == TokenKind.EOF:
            return ParseError("Unexpected end of input", token)
        return ParseError(f"Unexpected token: {token!r}", token)

    def expect(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        """Consume the current token if it matches `kind` (and `text`)."""
        if self.peek().is_(kind, text):
            return self.advance()

        expected = repr(text) if text is not None else str(kind)
        raise ParseError(f"Expected {expected}, got {self.peek()!r}", self.peek())

    def consume(self, kind: TokenKind, text: Optional[str] = None) -> Token:
        """Step past a token the grammar expects here.

        Lenient parsers take whatever token is current; strict parsers
        verify it with `expect`.
        """
        if self.strict:
            return self.expect(kind, text)
        return self.advance()

    def parse_integer(self, token: Token) -> int:
        try:
            value = int(token.text, 10)
        except ValueError:
            raise ParseError(f"Invalid integer literal {token.text!r}", token)
        if value > INT32_MAX:
            raise ParseError(f"Integer literal out of range: {token.text}", token)
        return value

    def parse_term(self) -> Expression:
        """Parse a number, a variable or a parenthesized expression."""
        token = self.peek()

        match token.kind:
            case TokenKind.NUMBER:
                self.advance()
                return NumberLiteralNode(
                    value=self.parse_integer(token),
                    line=token.line,
                    column=token.column,
                )

            case TokenKind.IDENTIFIER:
                self.advance()
                return VariableNode(
                    name=token.text, line=token.line, column=token.column
                )

            case TokenKind.DELIMITER if token.text == "(":
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.consume(TokenKind.DELIMITER, ")")
                return expr

            case _:
                raise self.unexpected(token)

    def parse_expression(self) -> Expression:
        """Parse `term (OPERATOR expression)?` (right-associative).

        The operator chain is collected in a loop and folded from the right,
        so long chains do not grow the call stack.
        """
        terms = [self.parse_term()]
        operators: List[str] = []

        while self.peek().kind == TokenKind.OPERATOR:
            operators.append(self.advance().text)
            terms.append(self.parse_term())

        expr = terms.pop()
        while operators:
            left = terms.pop()
            expr = BinaryOpNode(
                left=left,
                operator=operators.pop(),
                right=expr,
                line=left.line,
                column=left.column,
            )
        return expr

    def parse_statement_list(self) -> List[Statement]:
        """Parse statements up to (not including) the closing `}`."""
        statements: List[Statement] = []

        while not self.peek().is_(TokenKind.DELIMITER, "}"):
            statements.append(self.parse_statement())

        return statements

    def parse_parameter_list(self) -> List[str]:
        """Parse parameter names up to (not including) the closing `)`."""
        params: List[str] = []

        while not self.peek().is_(TokenKind.DELIMITER, ")"):
            if self.peek().kind == TokenKind.IDENTIFIER:
                params.append(self.advance().text)
            elif self.peek().is_(TokenKind.DELIMITER, ","):
                self.advance()
            else:
                raise self.unexpected(self.peek())

        return params

    def parse_function_declaration(self) -> FunctionDeclarationNode:
        """Parse `function name(params) { body }`."""
        start = self.consume(TokenKind.KEYWORD, "function")
        name = self.consume(TokenKind.IDENTIFIER).text
        self.consume(TokenKind.DELIMITER, "(")
        params = self.parse_parameter_list()
        self.consume(TokenKind.DELIMITER, ")")
        self.consume(TokenKind.DELIMITER, "{")
        body = self.parse_statement_list()
        self.consume(TokenKind.DELIMITER, "}")

        return FunctionDeclarationNode(
            name=name,
            parameters=tuple(params),
            body=tuple(body),
            line=start.line,
            column=start.column,
        )

    def parse_if_statement(self) -> IfStatementNode:
        """Parse `if (condition) { body }`."""
        start = self.consume(TokenKind.KEYWORD, "if")
        self.consume(TokenKind.DELIMITER, "(")
        condition = self.parse_expression()
        self.consume(TokenKind.DELIMITER, ")")
        self.consume(TokenKind.DELIMITER, "{")
        body = self.parse_statement_list()
        self.consume(TokenKind.DELIMITER, "}")

        return IfStatementNode(
            condition=condition,
            body=tuple(body),
            line=start.line,
            column=start.column,
        )

    def parse_assignment(self) -> AssignmentNode:
        """Parse `name = expression;`."""
        target = self.consume(TokenKind.IDENTIFIER)
        self.consume(TokenKind.DELIMITER, "=")
        value = self.parse_expression()
        self.consume(TokenKind.DELIMITER, ";")

        return AssignmentNode(
            name=target.text, value=value, line=target.line, column=target.column
        )

    def parse_statement(self) -> Statement:
        """Parse a statement, dispatching on the current token."""
        token = self.peek()

        match token.kind:
            case TokenKind.KEYWORD if token.text == "function":
                return self.parse_function_declaration()

            case TokenKind.KEYWORD if token.text == "if":
                return self.parse_if_statement()

            case TokenKind.IDENTIFIER:
                return self.parse_assignment()

            case _:
                raise self.unexpected(token)

    def parse(self) -> List[Statement]:
        """Parse the whole token list into top-level statements.

        A parser can be consumed once; build a new `Parser` to parse again.
        """
        if self._consumed:
            raise RuntimeError("Parser.parse() can only be called once")
        self._consumed = True

        statements: List[Statement] = []
        try:
            while self.peek().kind != TokenKind.EOF:
                statements.append(self.parse_statement())
        except RecursionError:
            raise ParseError("Nesting too deep", self.peek()) from None

        return statements

    def parse_program(self) -> ProgramNode:
        """Parse a complete program and wrap it in a `ProgramNode`."""
        return ProgramNode(statements=tuple(self.parse()), line=1, column=1)

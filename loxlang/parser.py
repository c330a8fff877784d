"""Recursive-descent parser from tokens to statements."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loxlang.errors import ErrorReporter, ParseError
from loxlang.nodes import (
    Binary,
    Expr,
    ExpressionStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Unary,
)
from loxlang.tokens import Token, TokenType


class Parser:
    """Builds a list of statements from a token sequence ending in end-of-file."""

    def __init__(
        self, tokens: Sequence[Token], reporter: ErrorReporter | None = None
    ) -> None:
        if not tokens:
            raise ValueError("token sequence must end with an end-of-file token")
        self.tokens = list(tokens)
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._current = 0

    def parse(self) -> list[Stmt]:
        """Parse every statement; raise ParseError on the first syntax error."""
        statements: list[Stmt] = []
        while not self._at_end():
            statements.append(self._statement())
        return statements

    # Statements

    def _statement(self) -> Stmt:
        if self._match(TokenType.PRINT):
            return self._print_statement()
        return self._expression_statement()

    def _print_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(TokenType.SEMICOLON, "expected semicolon after value")
        return PrintStmt(expr)

    def _expression_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(TokenType.SEMICOLON, "expected semicolon after expression")
        return ExpressionStmt(expr)

    # Expressions

    def _expression(self) -> Expr:
        return self._equality()

    def _binary_chain(
        self,
        operand: Callable[[], Expr],
        right_operand: Callable[[], Expr],
        *kinds: TokenType,
    ) -> Expr:
        expr = operand()
        while self._match(*kinds):
            op = self._previous()
            expr = Binary(expr, op, right_operand())
        return expr

    def _equality(self) -> Expr:
        return self._binary_chain(
            self._comparison,
            self._comparison,
            TokenType.BANG_EQUAL,
            TokenType.EQUAL_EQUAL,
        )

    def _comparison(self) -> Expr:
        # The right operand of a comparison binds at factor level.
        return self._binary_chain(
            self._term,
            self._factor,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def _term(self) -> Expr:
        return self._binary_chain(
            self._factor, self._factor, TokenType.MINUS, TokenType.PLUS
        )

    def _factor(self) -> Expr:
        return self._binary_chain(
            self._unary, self._unary, TokenType.SLASH, TokenType.STAR
        )

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            op = self._previous()
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)
        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)
        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression")
            return Grouping(expr)
        raise self._error("Expect expression.")

    # Token helpers

    def _peek(self) -> Token:
        return self.tokens[self._current]

    def _previous(self) -> Token:
        return self.tokens[max(0, self._current - 1)]

    def _at_end(self) -> bool:
        return self._peek().type is TokenType.ENDOFFILE

    def _advance(self) -> Token:
        if not self._at_end():
            self._current += 1
        return self._previous()

    def _check(self, kind: TokenType) -> bool:
        return not self._at_end() and self._peek().type is kind

    def _match(self, *kinds: TokenType) -> bool:
        if any(self._check(kind) for kind in kinds):
            self._advance()
            return True
        return False

    def _consume(self, kind: TokenType, message: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(message)

    def _error(self, message: str) -> ParseError:
        self.reporter.error(self._peek().line, message)
        return ParseError(message)
"""Tree-walking evaluator for expressions and statements."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

from loxlang.errors import ErrorReporter, LoxRuntimeError
from loxlang.nodes import (
    Binary,
    Expr,
    ExpressionStmt,
    Grouping,
    Literal,
    PrintStmt,
    Stmt,
    Unary,
    Visitor,
)
from loxlang.tokens import ObjectType, Token, TokenType, object_type, stringify


def is_truthy(value: Any) -> bool:
    """Return False for nil and false, True for every other value."""
    kind = object_type(value)
    if kind is ObjectType.NIL:
        return False
    if kind is ObjectType.BOOL:
        return bool(value)
    return True


def is_equal(left: Any, right: Any) -> bool:
    """Compare two values; values of different types are never equal."""
    left_kind = object_type(left)
    if left_kind is not object_type(right):
        return False
    if left_kind is ObjectType.NIL:
        return True
    return left == right


def _divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_NUMERIC: dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.MINUS: operator.sub,
    TokenType.SLASH: _divide,
    TokenType.STAR: operator.mul,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


def _is_number(value: Any) -> bool:
    return object_type(value) is ObjectType.NUM


class Interpreter(Visitor):
    """Evaluates syntax trees, writing printed values to an output stream."""

    def __init__(
        self, out: TextIO | None = None, reporter: ErrorReporter | None = None
    ) -> None:
        self._out = out
        self.reporter = reporter if reporter is not None else ErrorReporter(out)
        self.was_error = False

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def interpret(self, statements: Iterable[Stmt]) -> None:
        """Run statements in order, stopping at the first runtime error."""
        try:
            for statement in statements:
                statement.accept(self)
        except LoxRuntimeError as err:
            self.reporter.error(err.token.line, err.message)
            self.was_error = True

    def evaluate(self, expr: Expr) -> Any:
        """Return the value of an expression."""
        return expr.accept(self)

    # Expressions

    def visit_binary(self, expr: Binary) -> Any:
        right = self.evaluate(expr.right)
        left = self.evaluate(expr.left)
        op = expr.operator
        kind = op.type

        if kind in _NUMERIC:
            self._check_number_operands(op, left, right)
            return _NUMERIC[kind](left, right)
        if kind is TokenType.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if object_type(left) is ObjectType.STR and object_type(right) is ObjectType.STR:
                return left + right
            raise LoxRuntimeError(
                op, "Runtime Error! Cannot apply + operator to these types"
            )
        if kind is TokenType.BANG_EQUAL:
            return not is_equal(right, left)
        if kind is TokenType.EQUAL_EQUAL:
            return is_equal(right, left)
        raise LoxRuntimeError(op, f"Unknown binary operator '{op.lexeme}'")

    def visit_literal(self, expr: Literal) -> Any:
        return expr.value

    def visit_unary(self, expr: Unary) -> Any:
        right = self.evaluate(expr.right)
        op = expr.operator
        if op.type is TokenType.MINUS:
            if not _is_number(right):
                raise LoxRuntimeError(
                    op, "Runtime Error! Cannot apply operator to non number"
                )
            return -right
        if op.type is TokenType.BANG:
            return not is_truthy(right)
        raise LoxRuntimeError(op, f"Unknown unary operator '{op.lexeme}'")

    def visit_grouping(self, expr: Grouping) -> Any:
        return self.evaluate(expr.expression)

    # Statements

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> None:
        self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> None:
        value = self.evaluate(stmt.expression)
        self.out.write(f"{stringify(value)}\n")

    @staticmethod
    def _check_number_operands(op: Token, left: Any, right: Any) -> None:
        if not (_is_number(left) and _is_number(right)):
            raise LoxRuntimeError(op, "Cannot apply operator to non number")
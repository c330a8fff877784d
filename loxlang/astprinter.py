"""Renders syntax trees as parenthesised prefix text."""

from __future__ import annotations

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
from loxlang.tokens import stringify


class AstPrinter(Visitor):
    """Shows how a tree groups its tokens, e.g. ``(* (- 1) (group 2))``."""

    def print(self, node: Expr | Stmt) -> str:
        """Return the text form of an expression or statement."""
        return node.accept(self)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = "".join(f" {expr.accept(self)}" for expr in exprs)
        return f"({name}{parts})"

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_literal(self, expr: Literal) -> str:
        return stringify(expr.value)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_expression_stmt(self, stmt: ExpressionStmt) -> str:
        return self._parenthesize("", stmt.expression)

    def visit_print_stmt(self, stmt: PrintStmt) -> str:
        return self._parenthesize("print", stmt.expression)
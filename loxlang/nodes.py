"""Syntax tree nodes for expressions and statements, and their visitor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from loxlang.tokens import Token


class Visitor(ABC):
    """Operation applied to each kind of node."""

    @abstractmethod
    def visit_binary(self, expr: Binary) -> Any: ...

    @abstractmethod
    def visit_grouping(self, expr: Grouping) -> Any: ...

    @abstractmethod
    def visit_literal(self, expr: Literal) -> Any: ...

    @abstractmethod
    def visit_unary(self, expr: Unary) -> Any: ...

    @abstractmethod
    def visit_expression_stmt(self, stmt: ExpressionStmt) -> Any: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: PrintStmt) -> Any: ...


class Expr(ABC):
    """An expression node."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> Any:
        """Dispatch to the visitor method for this node."""


class Stmt(ABC):
    """A statement node."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> Any:
        """Dispatch to the visitor method for this node."""


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_binary(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_grouping(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Any

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_literal(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_unary(self)


@dataclass(frozen=True)
class ExpressionStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class PrintStmt(Stmt):
    expression: Expr

    def accept(self, visitor: Visitor) -> Any:
        return visitor.visit_print_stmt(self)
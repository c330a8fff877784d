"""Token types, tokens and the runtime values they can carry."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class TokenType(enum.IntEnum):
    """Every kind of token the scanner can produce."""

    # Single-character tokens.
    LEFT_PAREN = 0
    RIGHT_PAREN = 1
    LEFT_BRACE = 2
    RIGHT_BRACE = 3
    COMMA = 4
    DOT = 5
    MINUS = 6
    PLUS = 7
    SEMICOLON = 8
    SLASH = 9
    STAR = 10
    # One or two character tokens.
    BANG = 11
    BANG_EQUAL = 12
    EQUAL = 13
    EQUAL_EQUAL = 14
    GREATER = 15
    GREATER_EQUAL = 16
    LESS = 17
    LESS_EQUAL = 18
    # Literals.
    IDENTIFIER = 19
    STRING = 20
    NUMBER = 21
    # Keywords.
    AND = 22
    CLASS = 23
    ELSE = 24
    FALSE = 25
    FUN = 26
    FOR = 27
    IF = 28
    NIL = 29
    OR = 30
    PRINT = 31
    RETURN = 32
    SUPER = 33
    THIS = 34
    TRUE = 35
    VAR = 36
    WHILE = 37
    ENDOFFILE = 38


class ObjectType(enum.IntEnum):
    """The four kinds of runtime value."""

    BOOL = 0
    NUM = 1
    STR = 2
    NIL = 3


def object_type(value: Any) -> ObjectType:
    """Classify a runtime value; raise TypeError for anything that is not one."""
    if value is None:
        return ObjectType.NIL
    if isinstance(value, bool):
        return ObjectType.BOOL
    if isinstance(value, (int, float)):
        return ObjectType.NUM
    if isinstance(value, str):
        return ObjectType.STR
    raise TypeError(f"not a Lox value: {value!r}")


def stringify(value: Any) -> str:
    """Render a runtime value as text."""
    kind = object_type(value)
    if kind is ObjectType.NUM:
        return f"{float(value):f}"
    if kind is ObjectType.STR:
        return value
    if kind is ObjectType.BOOL:
        return "true" if value else "false"
    return "NIL"


@dataclass(frozen=True)
class Token:
    """A lexeme with its type, optional literal value and source line."""

    type: TokenType
    lexeme: str
    literal: Any = None
    line: int = 1

    def __str__(self) -> str:
        return f"{int(self.type)} {self.lexeme} "
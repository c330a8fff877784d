"""Turns Lox source text into a list of tokens."""

from __future__ import annotations

from loxlang.errors import ErrorReporter
from loxlang.tokens import Token, TokenType

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

_SINGLE: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Character -> (type when followed by '=', type otherwise)
_WITH_EQUAL: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_WHITESPACE = frozenset(" \r\t")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_alphanumeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Scanner:
    """Splits source text into tokens, reporting lexical errors as it goes."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the list always ends with an end-of-file token."""
        self._tokens = []
        self._start = self._current = 0
        self._line = 1
        while not self._at_end():
            self._start = self._current
            self._scan_token()
        self._tokens.append(Token(TokenType.ENDOFFILE, "", None, self._line))
        return self._tokens

    # Character helpers

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _peek(self) -> str:
        return "" if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        nxt = self._current + 1
        return self.source[nxt] if nxt < len(self.source) else ""

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, kind: TokenType, literal: object = None) -> None:
        text = self.source[self._start:self._current]
        self._tokens.append(Token(kind, text, literal, self._line))

    # Token rules

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add_token(_SINGLE[c])
        elif c in _WITH_EQUAL:
            paired, alone = _WITH_EQUAL[c]
            self._add_token(paired if self._match("=") else alone)
        elif c == ".":
            if _is_digit(self._peek()):
                self._number()
            else:
                self._add_token(TokenType.DOT)
        elif c == "/":
            self._slash()
        elif c in _WHITESPACE:
            pass
        elif c == "\n":
            self._line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            self.reporter.error(self._line, "Unexpected character.")

    def _slash(self) -> None:
        if self._match("/"):
            while self._peek() != "\n" and not self._at_end():
                self._advance()
        elif self._match("*"):
            # The character right after the opening "/*" is skipped unseen.
            if not self._at_end():
                self._advance()
            self._block_comment()
        else:
            self._add_token(TokenType.SLASH)

    def _block_comment(self) -> None:
        while not self._at_end():
            c = self._peek()
            if c == "\n":
                self._line += 1
            elif c == "*" and self._peek_next() == "/":
                self._advance()
                self._advance()
                return
            self._advance()

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            self.reporter.error(self._line, "Unterminated String")
            return
        self._advance()
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self) -> None:
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        text = self.source[self._start:self._current]
        self._add_token(TokenType.NUMBER, float(text))

    def _identifier(self) -> None:
        while _is_alphanumeric(self._peek()):
            self._advance()
        text = self.source[self._start:self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))
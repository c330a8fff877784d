"""Error types and the reporter that prints diagnostics."""

from __future__ import annotations

import sys
from typing import TextIO

from loxlang.tokens import Token


class ParseError(Exception):
    """Raised when the parser meets a token it cannot accept."""


class LoxRuntimeError(Exception):
    """Raised when evaluation fails, carrying the offending token."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


class ErrorReporter:
    """Prints errors and remembers whether any were reported."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.had_error = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def report(self, line: int, where: str, message: str) -> None:
        """Print an error with its location and mark that one happened."""
        self.stream.write(f"[line {line}], Error {where}: {message}\n")
        self.had_error = True

    def error(self, line: int, message: str) -> None:
        """Report an error on a line with no further location."""
        self.report(line, "", message)

    def reset(self) -> None:
        """Forget earlier errors."""
        self.had_error = False
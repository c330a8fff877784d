"""Runs Lox source from a string, a file or an interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from loxlang.errors import ErrorReporter, ParseError
from loxlang.interpreter import Interpreter
from loxlang.parser import Parser
from loxlang.scanner import Scanner

EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66


class Lox:
    """Front end that scans, parses and interprets Lox code."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.reporter = ErrorReporter(out)

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self, source: str) -> None:
        """Scan, parse and interpret one piece of source text."""
        tokens = Scanner(source, self.reporter).scan_tokens()
        try:
            statements = Parser(tokens, self.reporter).parse()
        except ParseError:
            return
        Interpreter(self._out, self.reporter).interpret(statements)

    def run_file(self, path: str | Path) -> int:
        """Run a script file; return the process exit status."""
        self.reporter.reset()
        self.run(Path(path).read_text(encoding="utf-8"))
        return EXIT_DATA_ERROR if self.reporter.had_error else 0

    def run_prompt(self, stream: Iterable[str]) -> None:
        """Run each line read from the stream until an empty line or its end."""
        self.out.write(">")
        for raw in stream:
            line = raw.rstrip("\n")
            if not line:
                break
            self.run(line)
            self.out.write(">")
            self.reporter.reset()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: run a script if one is given, else a prompt."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        sys.stdout.write("Usage: loxlang [script]\n")
        return EXIT_USAGE
    lox = Lox()
    if args:
        try:
            return lox.run_file(args[0])
        except OSError as err:
            sys.stderr.write(f"cannot read {args[0]}: {err}\n")
            return EXIT_NO_INPUT
    lox.run_prompt(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
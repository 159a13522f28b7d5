"""Character-level cursor shared by the HTML and CSS parsers."""

from __future__ import annotations

from typing import Callable

_WHITESPACE = frozenset(" \t\n\v\f\r")


class ParseError(ValueError):
    """Raised when the input does not match what a parser expects."""


class Scanner:
    """A cursor over a source string that tracks position, line and column.

    At end of input, :meth:`peek` and :meth:`consume` return an empty string.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1

    def describe(self) -> str:
        """Return a readable summary of the current scanner state."""
        remaining = self.source[self.pos:] if not self.eof() else "EOF"
        return (
            "Parser state:\n"
            f"  Position: {self.pos}\n"
            f"  Line: {self.line}\n"
            f"  Column: {self.col}\n"
            f"  Current source: {remaining}\n"
        )

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.eof():
            return ""
        return self.source[self.pos]

    def starts_with(self, prefix: str) -> bool:
        """Tell whether the unread input begins with ``prefix``."""
        return self.source.startswith(prefix, self.pos)

    def expect(self, prefix: str) -> None:
        """Consume ``prefix`` or raise :class:`ParseError`."""
        if not self.starts_with(prefix):
            raise ParseError(f"expected '{prefix}' at position {self.pos}")
        for _ in prefix:
            self.consume()

    def consume(self) -> str:
        """Consume and return the current character."""
        if self.eof():
            return ""
        char = self.source[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return char

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while ``predicate`` holds and return them."""
        start = self.pos
        while not self.eof() and predicate(self.peek()):
            self.consume()
        return self.source[start:self.pos]

    def consume_whitespace(self) -> None:
        """Skip over any whitespace."""
        self.consume_while(lambda c: c in _WHITESPACE)

    def eof(self) -> bool:
        """Tell whether all input has been consumed."""
        return self.pos >= len(self.source)
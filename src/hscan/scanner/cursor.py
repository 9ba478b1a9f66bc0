"""Bounds-checked character cursor over a source buffer.

End of buffer is an ordinary, checkable state: peek() and peek_next()
return the empty string there and advance() becomes a no-op, so no
operation can read out of range or raise.

Thread Safety:
Cursor instances are single-use and owned by one scan. Create one per scan.

"""

from __future__ import annotations

from hscan.location import SourceLocation
from hscan.parsing.charsets import WHITESPACE

# Returned by peek()/peek_next() at end of buffer
EOF_CHAR = ""


class Cursor:
    """Forward-only read position within a source string.

    Usage:
            >>> cursor = Cursor("hscpp_require_lib")
            >>> cursor.match("hscpp_require_")
            True
            >>> cursor.peek()
            'l'
            >>> cursor.match("source")
            False
            >>> cursor.offset
            14

    """

    __slots__ = ("_source", "_source_len", "_pos", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    @property
    def offset(self) -> int:
        return self._pos

    @property
    def source(self) -> str:
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def peek(self) -> str:
        """Current character, or EOF_CHAR at end of buffer."""
        if self._pos >= self._source_len:
            return EOF_CHAR
        return self._source[self._pos]

    def peek_next(self) -> str:
        """Character after the current one, or EOF_CHAR past the end."""
        if self._pos + 1 >= self._source_len:
            return EOF_CHAR
        return self._source[self._pos + 1]

    def advance(self) -> str:
        """Move forward one character.

        Returns:
            The consumed character, or EOF_CHAR if already at the end.
        """
        if self._pos >= self._source_len:
            return EOF_CHAR
        char = self._source[self._pos]
        self._pos += 1
        return char

    def match(self, literal: str) -> bool:
        """Consume literal if the buffer contains it at the current offset.

        Anchored: a partial match (including one cut short by end of
        buffer) consumes nothing.
        """
        if not self._source.startswith(literal, self._pos):
            return False
        self._pos += len(literal)
        return True

    def skip_whitespace(self) -> None:
        while self._pos < self._source_len and self._source[self._pos] in WHITESPACE:
            self._pos += 1

    def location(self, offset: int | None = None) -> SourceLocation:
        """1-indexed location of offset (default: current offset)."""
        return SourceLocation.from_offset(
            self._source,
            self._pos if offset is None else offset,
            self._source_file,
        )

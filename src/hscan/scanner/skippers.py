"""Literal skipper mixin.

Moves the cursor past comments and string literals without looking at
their contents, so directive names inside them are never recognized.
Unterminated literals run to end of buffer silently.
"""

from __future__ import annotations

from hscan.scanner.cursor import Cursor


class LiteralSkipperMixin:
    """Mixin providing comment and string skipping.

    Handles:
    - Line comments (// ... newline)
    - Block comments (/* ... */), terminated only by the pair ``*/``
    - Quoted strings ("..."), where ``\\"`` does not terminate

    """

    __slots__ = ()

    def _skip_comment(self, cursor: Cursor) -> None:
        """Skip a comment starting at the cursor.

        A ``/`` that does not start a comment consumes nothing.
        """
        if cursor.peek() != "/":
            return

        following = cursor.peek_next()
        if following == "/":
            self._skip_line_comment(cursor)
        elif following == "*":
            self._skip_block_comment(cursor)

    def _skip_line_comment(self, cursor: Cursor) -> None:
        cursor.advance()  # /
        cursor.advance()  # /
        while not cursor.at_end() and cursor.peek() != "\n":
            cursor.advance()
        cursor.advance()  # \n

    def _skip_block_comment(self, cursor: Cursor) -> None:
        """Skip to just past the closing ``*/``.

        The terminator is tested as a two-character unit: a lone ``*`` or
        ``/`` inside the comment does not end it.
        """
        cursor.advance()  # /
        cursor.advance()  # *
        while not cursor.at_end():
            if cursor.peek() == "*" and cursor.peek_next() == "/":
                cursor.advance()
                cursor.advance()
                return
            cursor.advance()

    def _skip_string(self, cursor: Cursor) -> None:
        """Skip a quoted string, including its closing quote if present."""
        if cursor.peek() == '"':
            cursor.advance()

        while not cursor.at_end() and cursor.peek() != '"':
            if cursor.peek() == "\\" and cursor.peek_next() == '"':
                # Escaped quote
                cursor.advance()
            cursor.advance()

        cursor.advance()  # closing "

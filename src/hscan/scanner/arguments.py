"""Argument-list parser mixin.

Parses the parenthesized, comma-separated argument list that follows a
directive keyword:

    hscpp_require_source("a.cpp", "b.cpp")
    hscpp_preprocessor_definitions(DEBUG, "LEVEL=2")

Every step returns either the parsed value or a Diagnostic; nothing here
logs or raises. A keyword that is not followed by ``(`` yields None, which
the recognizer treats as "not one of our directives".
"""

from __future__ import annotations

from enum import Enum, auto

from hscan.diagnostics import Diagnostic, DiagnosticKind
from hscan.parsing.charsets import IDENTIFIER_CHARS, IDENTIFIER_START
from hscan.scanner.cursor import Cursor


class ArgumentMode(Enum):
    """Accepted argument shapes.

    - QUOTED_PATH: every argument is a double-quoted string
    - STRING_OR_IDENTIFIER: double-quoted string or bare C identifier

    """

    QUOTED_PATH = auto()
    STRING_OR_IDENTIFIER = auto()


class ArgumentListMixin:
    """Mixin providing directive argument-list parsing."""

    __slots__ = ()

    def _parse_argument_list(
        self, cursor: Cursor, keyword: str, mode: ArgumentMode
    ) -> tuple[str, ...] | Diagnostic | None:
        """Parse ``( arg [, arg ...] )`` at the cursor.

        Args:
            cursor: Positioned just after the directive keyword
            keyword: Directive name, for diagnostics
            mode: Which argument shapes are accepted

        Returns:
            Arguments in written order on success, a Diagnostic once ``(``
            has been consumed and the list turns out malformed, or None if
            no ``(`` follows the keyword.
        """
        cursor.skip_whitespace()
        if cursor.peek() != "(":
            return None

        arguments: list[str] = []
        while True:
            cursor.advance()  # ( or ,
            cursor.skip_whitespace()

            if mode is ArgumentMode.QUOTED_PATH:
                value = self._parse_string(cursor)
            else:
                value = self._parse_string_or_identifier(cursor)
            if isinstance(value, Diagnostic):
                return value
            arguments.append(value)

            cursor.skip_whitespace()
            if cursor.peek() != ",":
                break

        if cursor.peek() != ")":
            return _diagnostic(
                cursor,
                DiagnosticKind.MISSING_CLOSING_PAREN,
                f"{keyword} missing closing ')'",
            )

        cursor.advance()
        return tuple(arguments)

    def _parse_string(self, cursor: Cursor) -> str | Diagnostic:
        """Parse a double-quoted string, unescaping ``\\"`` to ``"``.

        Other backslash sequences are kept verbatim.
        """
        if cursor.peek() != '"':
            return _diagnostic(
                cursor, DiagnosticKind.MISSING_OPENING_QUOTE, "missing opening '\"'"
            )

        start = cursor.offset
        cursor.advance()

        chars: list[str] = []
        while not cursor.at_end() and cursor.peek() != '"':
            if cursor.peek() == "\\" and cursor.peek_next() == '"':
                cursor.advance()
            chars.append(cursor.advance())

        if cursor.peek() != '"':
            # Reported at the opening quote; the cursor is at end of buffer.
            return _diagnostic(
                cursor,
                DiagnosticKind.UNTERMINATED_STRING,
                "unterminated string, expected a '\"'",
                offset=start,
            )

        cursor.advance()
        return "".join(chars)

    def _parse_string_or_identifier(self, cursor: Cursor) -> str | Diagnostic:
        if cursor.peek() == '"':
            return self._parse_string(cursor)
        return self._parse_identifier(cursor)

    def _parse_identifier(self, cursor: Cursor) -> str | Diagnostic:
        """Parse ``[A-Za-z_][A-Za-z0-9_]*``."""
        if cursor.peek() not in IDENTIFIER_START:
            return _diagnostic(
                cursor,
                DiagnosticKind.INVALID_DEFINITION,
                "expected a string or identifier",
            )

        start = cursor.offset
        while cursor.peek() in IDENTIFIER_CHARS:
            cursor.advance()
        return cursor.source[start : cursor.offset]


def _diagnostic(
    cursor: Cursor,
    kind: DiagnosticKind,
    message: str,
    *,
    offset: int | None = None,
) -> Diagnostic:
    return Diagnostic(
        kind=kind,
        message=message,
        location=cursor.location(offset),
        source_file=cursor.source_file,
    )

"""Single-pass directive scanner.

Walks the source once, one character at a time, skipping comments and
string literals and recognizing a handful of directive keywords. It does
not tokenize the language: everything it does not recognize is stepped over.

Scanning is O(n) in the source length and always runs to completion.
Malformed directives are reported as diagnostics and never abort the scan.

Thread Safety:
A Scanner holds only immutable inputs. All scan state (cursor and
accumulators) is local to scan(), so calling scan() repeatedly or from
several threads yields independent, equal results.

"""

from __future__ import annotations

from hscan.config import get_scan_config
from hscan.diagnostics import Diagnostic, DiagnosticSink, log_diagnostic
from hscan.errors import ScanError
from hscan.result import ParseResult, Require
from hscan.scanner.arguments import ArgumentListMixin
from hscan.scanner.cursor import Cursor
from hscan.scanner.directives import DIRECTIVE_START_CHARS, DirectiveRecognizerMixin
from hscan.scanner.skippers import LiteralSkipperMixin


class Scanner(
    LiteralSkipperMixin,
    ArgumentListMixin,
    DirectiveRecognizerMixin,
):
    """Extracts hscpp directives from one source buffer.

    Usage:
            >>> scanner = Scanner('hscpp_require_source("a.cpp", "b.cpp")')
            >>> scanner.scan()
            ParseResult(requires=(Require(kind=<RequireKind.SOURCE: 1>, paths=('a.cpp', 'b.cpp')),), preprocessor_definitions=())

    """

    __slots__ = ("_source", "_source_file", "_on_diagnostic")

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        on_diagnostic: DiagnosticSink | None = None,
    ) -> None:
        """Initialize scanner with source text.

        Args:
            source: Source text to scan
            source_file: Optional source file path for diagnostics
            on_diagnostic: Receives each diagnostic (defaults to logging it)
        """
        self._source = source
        self._source_file = source_file
        self._on_diagnostic = on_diagnostic or log_diagnostic

    def scan(self) -> ParseResult:
        """Scan the whole buffer.

        Returns:
            Requires and preprocessor definitions in source order.

        Raises:
            ScanError: Only when ScanConfig.strict is enabled, for the first
                malformed directive.
        """
        cursor = Cursor(self._source, self._source_file)
        requires: list[Require] = []
        definitions: list[str] = []

        while not cursor.at_end():
            start = cursor.offset
            char = cursor.peek()

            if char == "/":
                self._skip_comment(cursor)
            elif char == '"':
                self._skip_string(cursor)
            elif char in DIRECTIVE_START_CHARS:
                self._scan_directive(cursor, requires, definitions)

            if cursor.offset == start:
                cursor.advance()

        return ParseResult(
            requires=tuple(requires),
            preprocessor_definitions=tuple(definitions),
        )

    def _report(self, diagnostic: Diagnostic) -> None:
        if get_scan_config().strict:
            raise ScanError(diagnostic)
        self._on_diagnostic(diagnostic)

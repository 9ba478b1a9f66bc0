"""Structured diagnostics for malformed directives and unreadable files.

Parsing steps never log or raise: they return a Diagnostic describing what
went wrong. The scan driver hands each one to a DiagnosticSink, which by
default writes it to the ``hscan.diagnostics`` logger at ERROR level.

Example:
    >>> from hscan import scan
    >>> collected = []
    >>> scan('hscpp_require_source("a.cpp"', on_diagnostic=collected.append)
    ParseResult(requires=(), preprocessor_definitions=())
    >>> str(collected[0])
    "1:29: hscpp_require_source missing closing ')'"

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from hscan.location import SourceLocation
from hscan.utils.logger import get_logger

logger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Categories of scan problems.

    A directive keyword without ``(`` is treated as an unrelated identifier
    and produces no diagnostic.

    """

    FILE_ACCESS = auto()
    MISSING_CLOSING_PAREN = auto()
    MISSING_OPENING_QUOTE = auto()
    UNTERMINATED_STRING = auto()
    INVALID_DEFINITION = auto()


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A human-readable problem report.

    Attributes:
        kind: Problem category
        message: Short description
        location: Where the problem was detected (None for file access)
        source_file: Path of the scanned file, if known

    """

    kind: DiagnosticKind
    message: str
    location: SourceLocation | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.location is not None:
            return f"{self.location}: {self.message}"
        if self.source_file:
            return f"{self.source_file}: {self.message}"
        return self.message


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: log the diagnostic at ERROR level."""
    logger.error("%s", diagnostic)


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "log_diagnostic",
]

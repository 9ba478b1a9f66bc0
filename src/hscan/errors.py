"""Exception classes for hscan.

Scanning never raises for malformed input by default: problems are reported
as diagnostics. These exceptions exist for callers that opt into
``ScanConfig(strict=True)`` and for API misuse.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hscan.diagnostics import Diagnostic


class HscanError(Exception):
    """Base exception for all hscan errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(HscanError):
    """A diagnostic promoted to an exception by strict mode.

    Raised for the first diagnostic of a scan when ``ScanConfig.strict``
    is enabled.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize scan error from the diagnostic that triggered it.

        Args:
            diagnostic: The structural or file-access diagnostic
        """
        self.diagnostic = diagnostic
        self.kind = diagnostic.kind
        self.source_file = diagnostic.source_file
        location = diagnostic.location
        self.lineno = location.lineno if location is not None else None
        self.col_offset = location.col_offset if location is not None else None

        super().__init__(str(diagnostic))

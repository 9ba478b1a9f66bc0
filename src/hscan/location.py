"""Source location tracking for diagnostics.

Provides the SourceLocation dataclass for reporting where in a scanned file
a malformed directive was detected.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in a scanned source buffer.

    Line and column are 1-indexed; offset is the 0-indexed character offset
    into the buffer.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute offset in the source buffer
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=5, offset=27)
            >>> str(loc)
            '3:5'

            >>> loc = SourceLocation(1, 1, 0, "src/Printer.cpp")
            >>> str(loc)
            'src/Printer.cpp:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "file.cpp:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the line/column of an offset in source.

        Offsets past the end of source are clamped to its length.

        Args:
            source: Full source text
            offset: 0-indexed character offset
            source_file: Optional path for display

        Returns:
            SourceLocation for the offset
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )

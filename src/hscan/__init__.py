"""
hscan: hscpp directive scanner for Python

Extracts build declarations embedded in C/C++ sources as pseudo-macro calls:

    hscpp_require_source("Printer.cpp", "Util.cpp")
    hscpp_require_include("../include")
    hscpp_require_lib("user32.lib")
    hscpp_preprocessor_definitions(DEBUG, "LEVEL=2")

Occurrences inside comments and string literals are ignored. Malformed
directives are reported as diagnostics and never stop the scan.

Quick Start:
    >>> from hscan import scan
    >>> result = scan('hscpp_require_source("a.cpp", "b.cpp")')
    >>> result.sources
    ('a.cpp', 'b.cpp')

    >>> # Files, one at a time or in parallel
    >>> from hscan import scan_file, scan_files
    >>> result = scan_file("src/Printer.cpp")
    >>> results = scan_files(["src/A.cpp", "src/B.cpp"], max_workers=4)

Diagnostics:
    >>> collected = []
    >>> scan('hscpp_require_lib("x.lib"', on_diagnostic=collected.append)
    ParseResult(requires=(), preprocessor_definitions=())
    >>> collected[0].kind
    <DiagnosticKind.MISSING_CLOSING_PAREN: 2>
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from contextvars import copy_context
from pathlib import Path

from hscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from hscan.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink, log_diagnostic
from hscan.errors import HscanError, ScanError
from hscan.location import SourceLocation
from hscan.result import ParseResult, Require, RequireKind
from hscan.scanner import Scanner
from hscan.serialization import from_dict, from_json, to_dict, to_json
from hscan.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def scan(
    source: str,
    *,
    source_file: str | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> ParseResult:
    """Scan source text for hscpp directives.

    Args:
        source: Source text
        source_file: Optional source file path for diagnostics
        on_diagnostic: Receives each diagnostic (defaults to logging it)

    Returns:
        ParseResult with requires and preprocessor definitions in source order

    Example:
        >>> scan('// hscpp_require_source("commented.cpp")\\n').is_empty
        True
    """
    return Scanner(source, source_file=source_file, on_diagnostic=on_diagnostic).scan()


def scan_file(
    path: str | os.PathLike[str],
    *,
    on_diagnostic: DiagnosticSink | None = None,
) -> ParseResult:
    """Read a file and scan it for hscpp directives.

    The file is read whole and decoded with ScanConfig.encoding. If it
    cannot be read or decoded, one FILE_ACCESS diagnostic is reported and
    an empty result is returned without scanning.

    Args:
        path: File to scan
        on_diagnostic: Receives each diagnostic (defaults to logging it)

    Returns:
        ParseResult for the file (empty if it could not be read)

    Raises:
        ScanError: Only when ScanConfig.strict is enabled.
    """
    config = get_scan_config()
    source_file = os.fspath(path)

    try:
        data = Path(source_file).read_bytes()
    except OSError as e:
        message = f"failed to open file: {e.strerror or e}"
        _report_file_access(message, source_file, on_diagnostic, e)
        return ParseResult.empty()

    try:
        source = data.decode(config.encoding, config.decode_errors)
    except (UnicodeDecodeError, LookupError) as e:
        _report_file_access(f"failed to decode file: {e}", source_file, on_diagnostic, e)
        return ParseResult.empty()

    return Scanner(source, source_file=source_file, on_diagnostic=on_diagnostic).scan()


def _report_file_access(
    message: str,
    source_file: str,
    on_diagnostic: DiagnosticSink | None,
    cause: Exception,
) -> None:
    diagnostic = Diagnostic(
        kind=DiagnosticKind.FILE_ACCESS,
        message=message,
        source_file=source_file,
    )
    if get_scan_config().strict:
        raise ScanError(diagnostic) from cause
    (on_diagnostic or log_diagnostic)(diagnostic)


def scan_files(
    paths: Iterable[str | os.PathLike[str]],
    *,
    max_workers: int | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> dict[str, ParseResult]:
    """Scan many files concurrently, one independent scan per file.

    Each worker runs in a copy of the caller's context, so the active
    ScanConfig applies to the whole batch. on_diagnostic may be called from
    several threads at once.

    Args:
        paths: Files to scan
        max_workers: Thread count (defaults to ScanConfig.max_workers)
        on_diagnostic: Receives each diagnostic (defaults to logging it)

    Returns:
        Mapping of path (as given, via os.fspath) to its ParseResult,
        in input order

    Example:
        >>> results = scan_files(["A.cpp", "B.cpp"])
        >>> list(results)
        ['A.cpp', 'B.cpp']
    """
    # Each distinct path is scanned once
    source_files = list(dict.fromkeys(os.fspath(path) for path in paths))
    if max_workers is None:
        max_workers = get_scan_config().max_workers

    logger.debug("Scanning %d files", len(source_files))
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(
                copy_context().run, scan_file, source_file, on_diagnostic=on_diagnostic
            )
            for source_file in source_files
        ]
        results = {
            source_file: future.result()
            for source_file, future in zip(source_files, futures, strict=True)
        }
    logger.debug("Scanned %d files", len(results))
    return results


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "scan",
    "scan_file",
    "scan_files",
    "Scanner",
    # Result model
    "ParseResult",
    "Require",
    "RequireKind",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "log_diagnostic",
    "SourceLocation",
    # Errors
    "HscanError",
    "ScanError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]

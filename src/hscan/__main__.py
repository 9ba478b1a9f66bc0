"""Command-line entry point: scan files and print the results as JSON.

Usage:
    python -m hscan src/Printer.cpp src/Util.cpp
    python -m hscan --indent 2 -o deps.json src/*.cpp

Diagnostics are logged to stderr. Exit status is 0 on a clean scan and 1
if any diagnostic was reported.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import threading
from pathlib import Path

from hscan import __version__, scan_files
from hscan.config import ScanConfig, scan_config_context
from hscan.diagnostics import Diagnostic, log_diagnostic
from hscan.errors import ScanError
from hscan.serialization import to_dict
from hscan.utils.logger import get_logger

logger = get_logger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="hscan",
        description="Extract hscpp_require_* and hscpp_preprocessor_definitions "
        "directives from C/C++ sources.",
    )
    parser.add_argument("files", nargs="+", help="Source files to scan")
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: compact)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Source file encoding (default: utf-8)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first malformed directive or unreadable file",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        default=None,
        help="Number of files scanned in parallel",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(args)


def main(argv: list[str] | None = None) -> int:
    """Run the scanner CLI.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    reported: list[Diagnostic] = []
    lock = threading.Lock()

    def report(diagnostic: Diagnostic) -> None:
        with lock:
            reported.append(diagnostic)
        log_diagnostic(diagnostic)

    config = ScanConfig(encoding=args.encoding, strict=args.strict, max_workers=args.jobs)
    with scan_config_context(config):
        try:
            results = scan_files(args.files, on_diagnostic=report)
        except ScanError as e:
            logger.error("%s", e)
            return 1

    output = json.dumps(
        {path: to_dict(result) for path, result in results.items()},
        indent=args.indent,
    )
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        sys.stdout.write(output + "\n")

    return 1 if reported else 0


if __name__ == "__main__":
    sys.exit(main())

"""Single-pass directive scanner for hscan.

Architecture:
scanner/
├── __init__.py      # Re-exports Scanner, Cursor, directive table
├── core.py          # Scanner class (mixin composition + scan loop)
├── cursor.py        # Bounds-checked character cursor
├── skippers.py      # Comment and string-literal skipping
├── arguments.py     # Parenthesized argument-list parsing
└── directives.py    # Directive keyword table and recognition

Usage:
    >>> from hscan.scanner import Scanner
    >>> Scanner('hscpp_require_lib("user32.lib")').scan().libraries
    ('user32.lib',)

"""

from hscan.scanner.arguments import ArgumentMode
from hscan.scanner.core import Scanner
from hscan.scanner.cursor import Cursor
from hscan.scanner.directives import DIRECTIVES, DirectiveSpec

__all__ = ["DIRECTIVES", "ArgumentMode", "Cursor", "DirectiveSpec", "Scanner"]

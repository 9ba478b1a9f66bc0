"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII is classified: directive arguments follow C identifier rules,
not Unicode ones.

Usage:
    from hscan.parsing.charsets import IDENTIFIER_START

    if char in IDENTIFIER_START:  # O(1) lookup
        ...
"""

import string

# Whitespace skipped between directive tokens (matches C isspace)
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# First character of a bare identifier
IDENTIFIER_START: frozenset[str] = frozenset(string.ascii_letters + "_")

# Remaining characters of a bare identifier
IDENTIFIER_CHARS: frozenset[str] = IDENTIFIER_START | frozenset(string.digits)

"""Directive recognizer mixin.

Recognized directives (exact literal keywords, followed by an argument list):

    hscpp_require_source(...)            -> Require(SOURCE, ...)
    hscpp_require_include(...)           -> Require(INCLUDE, ...)
    hscpp_require_lib(...)               -> Require(LIBRARY, ...)
    hscpp_preprocessor_definitions(...)  -> preprocessor definitions

A keyword must match in full at the current offset; anything shorter
consumes nothing. A keyword without a following ``(`` (for example a user
symbol such as ``hscpp_require_source_custom``) is silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from hscan.diagnostics import Diagnostic
from hscan.result import Require, RequireKind
from hscan.scanner.arguments import ArgumentMode
from hscan.scanner.cursor import Cursor


@dataclass(frozen=True, slots=True)
class DirectiveSpec:
    """One recognized directive keyword.

    Attributes:
        keyword: Literal text to match
        mode: Argument shapes accepted after the keyword
        kind: RequireKind produced, or None for preprocessor definitions

    """

    keyword: str
    mode: ArgumentMode
    kind: RequireKind | None = None


DIRECTIVES: tuple[DirectiveSpec, ...] = (
    DirectiveSpec("hscpp_require_source", ArgumentMode.QUOTED_PATH, RequireKind.SOURCE),
    DirectiveSpec("hscpp_require_include", ArgumentMode.QUOTED_PATH, RequireKind.INCLUDE),
    DirectiveSpec("hscpp_require_lib", ArgumentMode.QUOTED_PATH, RequireKind.LIBRARY),
    DirectiveSpec("hscpp_preprocessor_definitions", ArgumentMode.STRING_OR_IDENTIFIER),
)

# First characters of all keywords, for O(1) dispatch in the scan loop
DIRECTIVE_START_CHARS: frozenset[str] = frozenset(spec.keyword[0] for spec in DIRECTIVES)


class DirectiveRecognizerMixin:
    """Mixin providing keyword matching and result accumulation."""

    __slots__ = ()

    def _parse_argument_list(
        self, cursor: Cursor, keyword: str, mode: ArgumentMode
    ) -> tuple[str, ...] | Diagnostic | None:
        """Parse a directive argument list. Implemented by ArgumentListMixin."""
        raise NotImplementedError

    def _report(self, diagnostic: Diagnostic) -> None:
        """Deliver a diagnostic. Implemented by Scanner."""
        raise NotImplementedError

    def _match_directive(self, cursor: Cursor) -> DirectiveSpec | None:
        """Consume a directive keyword at the cursor, if one is there."""
        for spec in DIRECTIVES:
            if cursor.match(spec.keyword):
                return spec
        return None

    def _scan_directive(
        self,
        cursor: Cursor,
        requires: list[Require],
        definitions: list[str],
    ) -> None:
        """Recognize one directive at the cursor and record its arguments.

        A malformed directive is reported and contributes nothing; the
        cursor stays wherever argument parsing stopped.
        """
        spec = self._match_directive(cursor)
        if spec is None:
            return

        outcome = self._parse_argument_list(cursor, spec.keyword, spec.mode)
        if outcome is None:
            return
        if isinstance(outcome, Diagnostic):
            self._report(outcome)
            return

        if spec.kind is None:
            definitions.extend(outcome)
        else:
            requires.append(Require(kind=spec.kind, paths=outcome))

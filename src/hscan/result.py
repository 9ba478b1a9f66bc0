"""Scan result model.

A scan produces one ParseResult: every recognized ``hscpp_require_*``
directive as a Require, plus every preprocessor definition, both in the
order they appear in the source.

Thread Safety:
All types are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class RequireKind(Enum):
    """Why a path was declared.

    - SOURCE: additional translation unit to compile (hscpp_require_source)
    - INCLUDE: additional include search path (hscpp_require_include)
    - LIBRARY: additional link input (hscpp_require_lib)

    """

    SOURCE = auto()
    INCLUDE = auto()
    LIBRARY = auto()


@dataclass(frozen=True, slots=True)
class Require:
    """One recognized require directive.

    Attributes:
        kind: Directive family the paths came from
        paths: Arguments in written order; never empty, duplicates kept

    """

    kind: RequireKind
    paths: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Everything one scan extracted from a file.

    Value-comparable: scanning identical content twice yields equal results.

    Attributes:
        requires: Require entries in first-occurrence order
        preprocessor_definitions: Definitions from every
            hscpp_preprocessor_definitions call, in file order

    """

    requires: tuple[Require, ...] = ()
    preprocessor_definitions: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> ParseResult:
        """Result of a file with nothing to report (or one that failed to open)."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.requires and not self.preprocessor_definitions

    def paths_of(self, kind: RequireKind) -> tuple[str, ...]:
        """Flatten the paths of every Require of one kind, in order."""
        return tuple(path for req in self.requires if req.kind is kind for path in req.paths)

    @property
    def sources(self) -> tuple[str, ...]:
        return self.paths_of(RequireKind.SOURCE)

    @property
    def include_paths(self) -> tuple[str, ...]:
        return self.paths_of(RequireKind.INCLUDE)

    @property
    def libraries(self) -> tuple[str, ...]:
        return self.paths_of(RequireKind.LIBRARY)

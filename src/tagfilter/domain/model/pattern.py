"""Patterns: the right-hand side of a filter comparison.

Regex and glob patterns compile once at construction.
Equality and hashing are defined on source text, never on compiled form.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass, field
from typing import Self

from tagfilter.domain.exceptions import InvalidPatternError


@dataclass(frozen=True, slots=True)
class ExactPattern:
    """Literal text."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class RegexPattern:
    """Regular expression, matched anywhere in the subject.

    Attributes:
        source: Expression source text.
    """

    source: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Compile once. FAIL-FIRST on invalid source."""
        try:
            compiled = re.compile(self.source)
        except re.error as exc:
            raise InvalidPatternError(source=self.source, reason=str(exc)) from exc
        object.__setattr__(self, "_compiled", compiled)

    def is_match(self, subject: str) -> bool:
        """True if expression matches anywhere in subject."""
        return self._compiled.search(subject) is not None

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """Shell-style glob, matched against the whole subject.

    Uses fnmatch syntax, case-sensitive: * matches any characters including /.
    A `[` must open a closed character class; fnmatch would read an unclosed
    one as a literal bracket, here it is rejected.

    Attributes:
        glob: Glob source text.
    """

    glob: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Compile once. FAIL-FIRST on unclosed character class."""
        _check_classes_closed(self.glob)
        object.__setattr__(self, "_compiled", re.compile(fnmatch.translate(self.glob)))

    def is_match(self, subject: str) -> bool:
        """True if whole subject matches the glob."""
        return self._compiled.match(subject) is not None

    def __str__(self) -> str:
        return self.glob


def _check_classes_closed(glob: str) -> None:
    """Raise InvalidPatternError if a `[` has no closing `]`.

    Follows fnmatch class syntax: optional leading `!`, then a `]` right
    after the opening is a member, not the end of the class.
    """
    i = glob.find("[")
    while i != -1:
        j = i + 1
        if glob[j:j + 1] == "!":
            j += 1
        if glob[j:j + 1] == "]":
            j += 1
        end = glob.find("]", j)
        if end == -1:
            raise InvalidPatternError(source=glob, reason=f"unclosed character class at position {i}")
        i = glob.find("[", end + 1)


@dataclass(frozen=True, slots=True)
class SetPattern:
    """Set of exact strings. Unique, unordered."""

    values: frozenset[str]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.values, frozenset):
            raise TypeError(f"values must be frozenset, got {type(self.values).__name__}")

    @classmethod
    def of(cls, *values: str) -> Self:
        """Create set pattern from values."""
        return cls(values=frozenset(values))

    def __contains__(self, subject: object) -> bool:
        return subject in self.values

    def __str__(self) -> str:
        return ",".join(sorted(self.values))


type Pattern = ExactPattern | RegexPattern | GlobPattern | SetPattern

"""Filter: one rule comparing a tag subject against a pattern."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath

from tagfilter.domain.model.enums import Matcher, Operator
from tagfilter.domain.model.pattern import (
    ExactPattern,
    GlobPattern,
    Pattern,
    RegexPattern,
    SetPattern,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Filter:
    """Single filter rule.

    Plain immutable value: equality is structural, clone with dataclasses.replace.

    Attributes:
        on: Which tag the filter applies to.
        op: Operation to perform on the tag's subject.
        pat: Pattern to match the subject against.
        negate: If True, a positive match overrides negative matches from
            previous filters on the same tag, and negative matches are ignored.
        in_path: Path the filter applies from. None = no scope.
    """

    on: Matcher
    op: Operator
    pat: Pattern
    negate: bool = False
    in_path: PurePath | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.on, Matcher):
            raise TypeError(f"on must be Matcher, got {type(self.on).__name__}")
        if not isinstance(self.op, Operator):
            raise TypeError(f"op must be Operator, got {type(self.op).__name__}")

    def matches(self, subject: str) -> bool:
        """Compare subject against pattern with operator.

        Pure and total. Operator/pattern pairs that cannot work are
        not errors: they log a warning and never match.
        """
        match (self.op, self.pat):
            case (Operator.EQUAL, ExactPattern(text)):
                return subject == text
            case (Operator.NOT_EQUAL, ExactPattern(text)):
                return subject != text
            case (Operator.REGEX, RegexPattern() as pat):
                return pat.is_match(subject)
            case (Operator.NOT_REGEX, RegexPattern() as pat):
                return not pat.is_match(subject)
            case (Operator.GLOB, GlobPattern() as pat):
                return pat.is_match(subject)
            case (Operator.NOT_GLOB, GlobPattern() as pat):
                return not pat.is_match(subject)
            case (Operator.IN_SET, SetPattern() as pat):
                return subject in pat
            case (Operator.IN_SET, ExactPattern(text)):
                return subject == text
            case (Operator.NOT_IN_SET, SetPattern() as pat):
                return subject not in pat
            case (Operator.NOT_IN_SET, ExactPattern(text)):
                return subject != text
            case (op, pat):
                logger.warning(
                    "trying to match pattern %r with op %s, that cannot work",
                    pat,
                    op.name,
                )
                return False

    def __str__(self) -> str:
        """Rule as text, for diagnostics."""
        prefix = "!" if self.negate else ""
        return f"{prefix}{self.on.name_in_rules} {self.op.symbol} {self.pat}"

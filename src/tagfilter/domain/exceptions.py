"""Domain exceptions: all public errors of tagfilter.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagfilter.domain.model.enums import Matcher


class TagFilterError(Exception):
    """Base for all tagfilter error exceptions.

    Allows: except TagFilterError to catch all library errors.
    """


class UnsupportedMatcherError(TagFilterError, NotImplementedError):
    """Matcher has no subject projection.

    Raised by check_event() when a rule targets a tag kind whose projection
    is not implemented (path, signal, process completion by default).
    Distinct from a reject: the rule could not be evaluated at all.
    Inherits NotImplementedError for semantic correctness.

    Attributes:
        matcher: Matcher that could not be evaluated.
    """

    def __init__(self, matcher: Matcher) -> None:
        """Initialize with unsupported matcher."""
        self.matcher = matcher
        super().__init__(f"no subject projection for matcher {matcher.name_in_rules!r}")


class InvalidPatternError(TagFilterError, ValueError):
    """Pattern source failed to compile.

    Raised at pattern construction, never during evaluation.

    Attributes:
        source: Pattern source text.
        reason: Compiler error message.
    """

    def __init__(self, *, source: str, reason: str) -> None:
        """Initialize with pattern source and reason."""
        self.source = source
        self.reason = reason
        super().__init__(f"invalid pattern {source!r}: {reason}")


class UnknownOperatorError(TagFilterError, ValueError):
    """Operator symbol not recognised.

    Attributes:
        symbol: Symbol that was looked up.
    """

    def __init__(self, symbol: str) -> None:
        """Initialize with unknown symbol."""
        self.symbol = symbol
        super().__init__(f"unknown operator symbol {symbol!r}")

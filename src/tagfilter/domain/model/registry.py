"""Filter registry: filters grouped by matcher into ordered buckets.

Built once at setup, read-only afterwards. Order within a bucket is
significant: negated filters override earlier results.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from tagfilter.domain.model.enums import Matcher
from tagfilter.domain.model.filter import Filter


@dataclass(frozen=True, slots=True)
class FilterRegistry:
    """Immutable matcher -> filters mapping.

    Attributes:
        buckets: Filters per matcher, in evaluation order.
            Empty buckets allowed.
    """

    buckets: Mapping[Matcher, tuple[Filter, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze. FAIL-FIRST."""
        frozen: dict[Matcher, tuple[Filter, ...]] = {}
        for matcher, filters in self.buckets.items():
            if not isinstance(matcher, Matcher):
                raise TypeError(f"bucket key must be Matcher, got {type(matcher).__name__}")
            bucket = tuple(filters)
            for flt in bucket:
                if not isinstance(flt, Filter):
                    raise TypeError(f"bucket {matcher.name_in_rules!r} holds {type(flt).__name__}, not Filter")
            frozen[matcher] = bucket
        object.__setattr__(self, "buckets", MappingProxyType(frozen))

    @classmethod
    def from_filters(cls, filters: Iterable[Filter]) -> Self:
        """Group filters by their matcher, preserving relative order."""
        grouped: dict[Matcher, list[Filter]] = {}
        for flt in filters:
            grouped.setdefault(flt.on, []).append(flt)
        return cls(buckets={matcher: tuple(bucket) for matcher, bucket in grouped.items()})

    @property
    def is_empty(self) -> bool:
        """True if no matcher has a bucket."""
        return not self.buckets

    @property
    def matchers(self) -> tuple[Matcher, ...]:
        """Matchers with a bucket, in insertion order."""
        return tuple(self.buckets)

    def get(self, matcher: Matcher) -> tuple[Filter, ...] | None:
        """Bucket for matcher, None if there is none."""
        return self.buckets.get(matcher)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())

    def __iter__(self) -> Iterator[Filter]:
        for bucket in self.buckets.values():
            yield from bucket

    def __hash__(self) -> int:
        return hash(frozenset(self.buckets.items()))

"""Event: ordered collection of tags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from tagfilter.domain.model.tags import Tag


@dataclass(frozen=True, slots=True)
class Event:
    """Single event passed to the filterer.

    Attributes:
        tags: Facts about the event, in source order. Any iterable is
            accepted and stored as a tuple.
        metadata: Free-form key -> values carried alongside.
            Never consulted by filtering.
    """

    tags: tuple[Tag, ...]
    metadata: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze tags and metadata."""
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def of(cls, *tags: Tag) -> Self:
        """Create event from tags, no metadata."""
        return cls(tags=tags)

    def __hash__(self) -> int:
        return hash(self.tags)

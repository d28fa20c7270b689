"""Subject projections: Tag -> comparable text.

Projections are registered per matcher in an immutable ProjectionTable.
Matchers without a projection (path, signal, process completion by default)
raise UnsupportedMatcherError instead of guessing semantics.

Usage:
    table = default_projections()
    table = table.with_projection(Matcher.SIGNAL, lambda tag: tag.signal.name)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from tagfilter.domain.exceptions import UnsupportedMatcherError
from tagfilter.domain.model.enums import Matcher
from tagfilter.domain.model.tags import tag_kind_name

if TYPE_CHECKING:
    from tagfilter.domain.model.filter import Filter
    from tagfilter.domain.model.tags import FileEventKindTag, ProcessTag, SourceTag, Tag
    from tagfilter.domain.ports.projector import SubjectProjector


def project_file_event_kind(tag: FileEventKindTag) -> str:
    """Render classification as Kind or Kind(Detail)."""
    if tag.detail is None:
        return str(tag.kind)
    return f"{tag.kind}({tag.detail})"


def project_source(tag: SourceTag) -> str:
    """Render source by name."""
    return str(tag.source)


def project_process(tag: ProcessTag) -> str:
    """Render pid as decimal."""
    return str(tag.pid)


@dataclass(frozen=True, slots=True)
class ProjectionTable:
    """Immutable matcher -> projector mapping.

    TAG is never registered: it always projects the tag's kind name.

    Attributes:
        projectors: Projector per matcher.
    """

    projectors: Mapping[Matcher, SubjectProjector] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze. FAIL-FIRST."""
        if Matcher.TAG in self.projectors:
            raise ValueError("TAG matcher projects the tag kind name, it cannot be overridden")
        for matcher, projector in self.projectors.items():
            if not callable(projector):
                raise TypeError(f"projector for {matcher.name_in_rules!r} must be callable")
        object.__setattr__(self, "projectors", MappingProxyType(dict(self.projectors)))

    def with_projection(self, matcher: Matcher, projector: SubjectProjector) -> Self:
        """New table with projector registered for matcher (replacing any)."""
        return type(self)(projectors={**self.projectors, matcher: projector})

    def supports(self, matcher: Matcher) -> bool:
        """True if matcher can be evaluated."""
        return matcher is Matcher.TAG or matcher in self.projectors

    def project(self, flt: Filter, tag: Tag) -> str | None:
        """Subject for comparing tag with filter.

        Returns:
            Subject text, or None if the filter does not apply to this tag kind.

        Raises:
            UnsupportedMatcherError: If the filter's matcher has no projection.
        """
        if flt.on is Matcher.TAG:
            return tag_kind_name(tag)
        if flt.on is not Matcher.from_tag(tag):
            return None
        projector = self.projectors.get(flt.on)
        if projector is None:
            raise UnsupportedMatcherError(flt.on)
        return projector(tag)

    def __hash__(self) -> int:
        return hash(frozenset(self.projectors.items()))


def default_projections() -> ProjectionTable:
    """Projections for file event kind, source and process."""
    return ProjectionTable(
        projectors={
            Matcher.FILE_EVENT_KIND: project_file_event_kind,
            Matcher.SOURCE: project_source,
            Matcher.PROCESS: project_process,
        }
    )

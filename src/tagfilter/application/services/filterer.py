"""TaggedFilterer: evaluates a frozen FilterRegistry against events.

Per tag, the bucket for the tag's matcher is folded in registry order:
    non-negated filter: tag_match = tag_match and applies
    negated filter:     if applies: tag_match = True (else unchanged)
A tag whose bucket ends False rejects the event immediately.
No bucket, an empty bucket, or an empty registry passes.

Thread-safe: holds only immutable state, no locking needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tagfilter.domain.model.enums import Matcher
from tagfilter.domain.model.tags import tag_kind_name
from tagfilter.infrastructure.projections import default_projections

if TYPE_CHECKING:
    from tagfilter.domain.model.configuration import FiltererConfig
    from tagfilter.domain.model.event import Event
    from tagfilter.domain.model.filter import Filter
    from tagfilter.domain.model.registry import FilterRegistry
    from tagfilter.domain.model.tags import Tag
    from tagfilter.infrastructure.projections import ProjectionTable

logger = logging.getLogger(__name__)


class TaggedFilterer:
    """Filterer over tagged events.

    Implements FiltererProtocol.
    """

    __slots__ = ("_config", "_projections", "_registry")

    def __init__(
        self,
        registry: FilterRegistry,
        config: FiltererConfig | None = None,
        projections: ProjectionTable | None = None,
    ) -> None:
        """Initialize filterer.

        Args:
            registry: Filters to apply. Never mutated.
            config: Path context for path-scoped filters. None = not configured.
            projections: Subject projections. None = default_projections().
        """
        self._registry = registry
        self._config = config
        self._projections = projections or default_projections()

    @property
    def registry(self) -> FilterRegistry:
        """Filters applied by this filterer."""
        return self._registry

    @property
    def config(self) -> FiltererConfig | None:
        """Path context, None if not configured."""
        return self._config

    def check_event(self, event: Event) -> bool:
        """Decide whether event passes the filters.

        Args:
            event: Event to check.

        Returns:
            True if every tag's bucket accepts, False on first rejecting tag.

        Raises:
            UnsupportedMatcherError: If a rule targets a matcher with no projection.
        """
        if self._registry.is_empty:
            logger.debug("no filters registered, event accepted")
            return True

        for tag in event.tags:
            tag_filters = self._registry.get(Matcher.from_tag(tag))
            if not tag_filters:
                logger.debug("no %s filters, tag %r passes", tag_kind_name(tag), tag)
                continue

            tag_match = True
            for flt in tag_filters:
                applies = self.match_tag(flt, tag)
                if applies is None:
                    logger.debug("filter %s does not apply to tag %r", flt, tag)
                    continue
                if flt.negate:
                    if applies:
                        tag_match = True
                else:
                    tag_match = tag_match and applies

            if not tag_match:
                logger.debug("event rejected by %s filters on tag %r", tag_kind_name(tag), tag)
                return False
            logger.debug("tag %r accepted by %s filters", tag, tag_kind_name(tag))

        logger.debug("event accepted, %d tag(s) checked", len(event.tags))
        return True

    def match_tag(self, flt: Filter, tag: Tag) -> bool | None:
        """Match one filter against one tag.

        Returns:
            Match result, or None if the filter does not apply to this tag kind.

        Raises:
            UnsupportedMatcherError: If the filter's matcher has no projection.
        """
        subject = self._projections.project(flt, tag)
        if subject is None:
            return None
        return flt.matches(subject)

"""Application services."""

from tagfilter.application.services.filterer import TaggedFilterer

__all__ = ["TaggedFilterer"]

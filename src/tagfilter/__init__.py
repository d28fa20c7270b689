"""tagfilter - tagged event filtering with ordered, negatable rules."""

__version__ = "0.1.0"

from tagfilter.application.services.filterer import TaggedFilterer
from tagfilter.domain.exceptions import TagFilterError, UnsupportedMatcherError
from tagfilter.domain.model.filter import Filter
from tagfilter.domain.model.registry import FilterRegistry

__all__ = [
    "Filter",
    "FilterRegistry",
    "TagFilterError",
    "TaggedFilterer",
    "UnsupportedMatcherError",
    "__version__",
]

"""Domain model: value objects for tagged filtering."""

from tagfilter.domain.model.configuration import FiltererConfig
from tagfilter.domain.model.enums import FileEventKind, Matcher, Operator, ProcessEndKind, Source
from tagfilter.domain.model.event import Event
from tagfilter.domain.model.filter import Filter
from tagfilter.domain.model.pattern import ExactPattern, GlobPattern, Pattern, RegexPattern, SetPattern
from tagfilter.domain.model.registry import FilterRegistry
from tagfilter.domain.model.tags import (
    FileEventKindTag,
    PathTag,
    ProcessCompletionTag,
    ProcessEnd,
    ProcessTag,
    SignalTag,
    SourceTag,
    Tag,
    tag_kind_name,
)

__all__ = [
    # Enums
    "Matcher",
    "Operator",
    "Source",
    "FileEventKind",
    "ProcessEndKind",
    # Tags
    "Tag",
    "PathTag",
    "FileEventKindTag",
    "SourceTag",
    "ProcessTag",
    "SignalTag",
    "ProcessCompletionTag",
    "ProcessEnd",
    "tag_kind_name",
    "Event",
    # Patterns
    "Pattern",
    "ExactPattern",
    "RegexPattern",
    "GlobPattern",
    "SetPattern",
    # Rules
    "Filter",
    "FilterRegistry",
    # Configuration
    "FiltererConfig",
]

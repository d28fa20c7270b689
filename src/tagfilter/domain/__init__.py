"""tagfilter domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, fnmatch, logging, collections.abc
"""

from tagfilter.domain.exceptions import (
    InvalidPatternError,
    TagFilterError,
    UnknownOperatorError,
    UnsupportedMatcherError,
)
from tagfilter.domain.model import (
    Event,
    ExactPattern,
    FileEventKind,
    FileEventKindTag,
    Filter,
    FiltererConfig,
    FilterRegistry,
    GlobPattern,
    Matcher,
    Operator,
    PathTag,
    ProcessCompletionTag,
    ProcessEnd,
    ProcessEndKind,
    ProcessTag,
    RegexPattern,
    SetPattern,
    SignalTag,
    Source,
    SourceTag,
)
from tagfilter.domain.ports import FiltererProtocol, SubjectProjector

__all__ = [
    # Exceptions
    "TagFilterError",
    "UnsupportedMatcherError",
    "InvalidPatternError",
    "UnknownOperatorError",
    # Enums
    "Matcher",
    "Operator",
    "Source",
    "FileEventKind",
    "ProcessEndKind",
    # Tags
    "PathTag",
    "FileEventKindTag",
    "SourceTag",
    "ProcessTag",
    "SignalTag",
    "ProcessCompletionTag",
    "ProcessEnd",
    "Event",
    # Patterns
    "ExactPattern",
    "RegexPattern",
    "GlobPattern",
    "SetPattern",
    # Rules
    "Filter",
    "FilterRegistry",
    "FiltererConfig",
    # Ports
    "FiltererProtocol",
    "SubjectProjector",
]

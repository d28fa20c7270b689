"""Domain enumerations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tagfilter.domain.exceptions import UnknownOperatorError

if TYPE_CHECKING:
    from tagfilter.domain.model.tags import Tag


class Matcher(Enum):
    """Tag dimension a filter targets.

    One member per tag kind, plus TAG which matches on the kind name itself.
    Value is the name used in rule text.
    """

    TAG = "tag"
    PATH = "path"
    FILE_EVENT_KIND = "kind"
    SOURCE = "source"
    PROCESS = "process"
    SIGNAL = "signal"
    PROCESS_COMPLETION = "complete"

    @property
    def name_in_rules(self) -> str:
        """Name of this matcher in rule text."""
        return self.value

    @classmethod
    def from_tag(cls, tag: Tag) -> Matcher:
        """Matcher for the kind of tag. Never returns TAG."""
        from tagfilter.domain.model.tags import (
            FileEventKindTag,
            PathTag,
            ProcessCompletionTag,
            ProcessTag,
            SignalTag,
            SourceTag,
        )

        match tag:
            case PathTag():
                return cls.PATH
            case FileEventKindTag():
                return cls.FILE_EVENT_KIND
            case SourceTag():
                return cls.SOURCE
            case ProcessTag():
                return cls.PROCESS
            case SignalTag():
                return cls.SIGNAL
            case ProcessCompletionTag():
                return cls.PROCESS_COMPLETION
            case _:
                raise TypeError(f"not a tag: {type(tag).__name__}")


class Operator(Enum):
    """Comparison applied between a subject and a pattern.

    Value is the operator symbol in rule text.
    """

    AUTO = "="
    EQUAL = "=="
    NOT_EQUAL = "!="
    REGEX = "~="
    NOT_REGEX = "~!"
    GLOB = "*="
    NOT_GLOB = "*!"
    IN_SET = ":="
    NOT_IN_SET = ":!"

    @property
    def symbol(self) -> str:
        """Operator symbol."""
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        """Resolve operator symbol.

        Raises:
            UnknownOperatorError: If symbol is not an operator.
        """
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperatorError(symbol) from None


class Source(Enum):
    """Where an event originated."""

    FILESYSTEM = "filesystem"
    KEYBOARD = "keyboard"
    MOUSE = "mouse"
    OS = "os"
    TIME = "time"
    INTERNAL = "internal"

    def __str__(self) -> str:
        return self.value


class FileEventKind(Enum):
    """Classification of a filesystem event."""

    ANY = "Any"
    ACCESS = "Access"
    CREATE = "Create"
    MODIFY = "Modify"
    REMOVE = "Remove"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


class ProcessEndKind(Enum):
    """How a supervised process ended."""

    SUCCESS = "Success"
    EXIT_ERROR = "ExitError"  # code = exit status
    EXIT_SIGNAL = "ExitSignal"  # code = signal number
    EXIT_STOP = "ExitStop"  # code = stop signal
    EXCEPTION = "Exception"  # code = platform exception code
    CONTINUED = "Continued"

    @property
    def carries_code(self) -> bool:
        """True if this outcome requires a numeric code."""
        return self not in (ProcessEndKind.SUCCESS, ProcessEndKind.CONTINUED)

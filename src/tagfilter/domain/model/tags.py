"""Tags: independent facts attached to an event.

All objects frozen, invariants validated in __post_init__.
New tag kinds are added here and given a Matcher and a projection;
the evaluator loop does not change.
"""

from __future__ import annotations

import signal
from dataclasses import dataclass
from pathlib import PurePath

from tagfilter.domain.model.enums import FileEventKind, ProcessEndKind, Source


@dataclass(frozen=True, slots=True)
class PathTag:
    """Filesystem path involved in the event.

    Attributes:
        path: Path as reported by the event source.
        file_type: File type if known ("file", "dir", "symlink", "other").
    """

    path: PurePath
    file_type: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.path, PurePath):
            raise TypeError(f"path must be PurePath, got {type(self.path).__name__}")
        if self.file_type is not None and not self.file_type:
            raise ValueError("file_type must be None or non-empty")


@dataclass(frozen=True, slots=True)
class FileEventKindTag:
    """Filesystem event classification.

    Attributes:
        kind: Top-level classification.
        detail: Sub-classification (e.g. "File", "Data"), None if unknown.
    """

    kind: FileEventKind
    detail: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.detail is not None and not self.detail:
            raise ValueError("detail must be None or non-empty")


@dataclass(frozen=True, slots=True)
class SourceTag:
    """Event origin."""

    source: Source


@dataclass(frozen=True, slots=True)
class ProcessTag:
    """Process id related to the event."""

    pid: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.pid < 1:
            raise ValueError(f"pid must be >= 1, got {self.pid}")


@dataclass(frozen=True, slots=True)
class SignalTag:
    """Signal received by the host."""

    signal: signal.Signals


@dataclass(frozen=True, slots=True)
class ProcessEnd:
    """Outcome of a finished process.

    Attributes:
        kind: How the process ended.
        code: Exit status, signal number or exception code.
            Required iff kind carries a code.
    """

    kind: ProcessEndKind
    code: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind.carries_code and self.code is None:
            raise ValueError(f"{self.kind.value} requires code")
        if not self.kind.carries_code and self.code is not None:
            raise ValueError(f"{self.kind.value} must not have code, got {self.code}")


@dataclass(frozen=True, slots=True)
class ProcessCompletionTag:
    """Process completed. end is None when the outcome is unknown."""

    end: ProcessEnd | None = None


type Tag = PathTag | FileEventKindTag | SourceTag | ProcessTag | SignalTag | ProcessCompletionTag


def tag_kind_name(tag: Tag) -> str:
    """Discriminant name of tag.

    Exhaustive match on Tag union.
    """
    match tag:
        case PathTag():
            return "Path"
        case FileEventKindTag():
            return "FileEventKind"
        case SourceTag():
            return "Source"
        case ProcessTag():
            return "Process"
        case SignalTag():
            return "Signal"
        case ProcessCompletionTag():
            return "ProcessCompletion"
        case _:
            raise TypeError(f"not a tag: {type(tag).__name__}")

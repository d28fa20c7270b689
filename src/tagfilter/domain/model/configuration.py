"""Filterer configuration.

Path context for filters. Filters carrying in_path are scoped from it;
otherwise root resolves absolute paths and workdir resolves relative ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FiltererConfig:
    """Filterer configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        root: Directory the project is in, its "root".
        workdir: Where the program is running from.
    """

    root: Path
    workdir: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.root.is_absolute():
            raise ValueError(f"root must be absolute, got {self.root}")
        if not self.workdir.is_absolute():
            raise ValueError(f"workdir must be absolute, got {self.workdir}")

    @classmethod
    def from_cwd(cls) -> FiltererConfig:
        """Use the current directory as both root and workdir."""
        cwd = Path.cwd()
        return cls(root=cwd, workdir=cwd)

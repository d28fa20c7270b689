"""Tests for domain/model/configuration.py."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from tagfilter.domain.model.configuration import FiltererConfig


class TestFiltererConfig:
    """Tests for FiltererConfig."""

    def test_absolute_paths(self, tmp_path: Path) -> None:
        config = FiltererConfig(root=tmp_path, workdir=tmp_path / "sub")
        assert config.root == tmp_path

    def test_relative_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="root"):
            FiltererConfig(root=Path("project"), workdir=tmp_path)

    def test_relative_workdir_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="workdir"):
            FiltererConfig(root=tmp_path, workdir=Path("."))

    def test_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        config = FiltererConfig.from_cwd()
        assert config.root == config.workdir == Path.cwd()

    def test_frozen(self, tmp_path: Path) -> None:
        config = FiltererConfig(root=tmp_path, workdir=tmp_path)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.root = tmp_path / "x"  # type: ignore[misc]

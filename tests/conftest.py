"""Shared fixtures for the konf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
import yaml

from konf.repository import Repository


@pytest.fixture(autouse=True)
def _reset_shared_repository() -> Iterator[None]:
    """Every test starts and ends without a shared repository."""
    Repository.reset_instance()
    yield
    Repository.reset_instance()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, dict[str, Any]], Path]:
    """Write a mapping as a YAML source file under tmp_path."""

    def _write(name: str, data: dict[str, Any]) -> Path:
        path = tmp_path / name
        path.write_text(yaml.dump(data), encoding="utf-8")
        return path

    return _write


class FakeSources:
    """In-memory loader and lister that record their calls."""

    def __init__(self, sources: dict[str, dict[str, Any]]) -> None:
        self.sources = sources
        self.loaded: list[str] = []
        self.listed: list[str] = []

    def load(self, location: str) -> dict[str, Any]:
        self.loaded.append(location)
        return self.sources[location]

    def listdir(self, directory: str) -> list[str]:
        self.listed.append(directory)
        prefix = f"{directory}/"
        return [loc[len(prefix):] for loc in self.sources if loc.startswith(prefix)]


@pytest.fixture
def fake_sources() -> Callable[[dict[str, dict[str, Any]]], FakeSources]:
    return FakeSources

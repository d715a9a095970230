"""Value type and collaborator protocols for konf."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Union, runtime_checkable

__all__ = [
    "ConfigValue",
    "SourceLoader",
    "DirectoryLister",
    "RepositoryProtocol",
]

ConfigValue = Union[
    str,
    int,
    float,
    bool,
    None,
    "list[ConfigValue]",
    "dict[str, ConfigValue]",
]
"""Payloads a configuration source can yield. Not enforced at runtime."""


class SourceLoader(Protocol):
    """Turns a resolved source location into a flat key/value mapping."""

    def __call__(self, location: str) -> Mapping[Any, ConfigValue]: ...


class DirectoryLister(Protocol):
    """Returns the entry names found in a directory."""

    def __call__(self, directory: str) -> Iterable[str]: ...


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Interface implemented by configuration repositories."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str | Mapping[str, Any], value: Any = None) -> None: ...

    def all(self) -> dict[str, Any]: ...

    def load(self, sources: Iterable[str], directory: str | None = None) -> None: ...

    def load_from_dir(self, directory: str, marker: str = ...) -> None: ...

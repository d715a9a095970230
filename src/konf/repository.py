"""Flat, dotted-key configuration repository."""

from __future__ import annotations

import logging
import threading
from typing import Any, ClassVar, Iterable, Iterator, Mapping

from konf.loaders import list_directory, load_source
from konf.naming import derive_namespace, matches_marker, resolve_location
from konf.types import DirectoryLister, SourceLoader

logger = logging.getLogger(__name__)

__all__ = ["Repository", "DEFAULT_MARKER"]

DEFAULT_MARKER = ".php"


class Repository:
    """Configuration repository holding a flat mapping of dotted keys.

    Sources are loaded into namespaces derived from their names, so the
    key ``host`` in ``database.yaml`` is stored as ``database.host``.
    Nested values are stored as-is; only the top level of a source is
    flattened.

    Thread safety:
        Only construction of the shared instance is synchronized. Reads
        and writes on a repository are not.
    """

    _instance: ClassVar[Repository | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        items: Mapping[str, Any] | None = None,
        *,
        loader: SourceLoader | None = None,
        lister: DirectoryLister | None = None,
    ) -> None:
        """Create a new configuration repository.

        Args:
            items: Initial key/value pairs. Copied, not validated.
            loader: Turns a source location into a mapping. Defaults to
                :func:`konf.loaders.load_source`.
            lister: Lists directory entry names. Defaults to
                :func:`konf.loaders.list_directory`.
        """
        self._items: dict[str, Any] = dict(items or {})
        self._loader: SourceLoader = loader or load_source
        self._lister: DirectoryLister = lister or list_directory

    # ----- Shared instance -----

    @classmethod
    def get_instance(cls) -> Repository:
        """Return the process-wide repository, creating it on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared repository so the next access builds a new one."""
        with cls._instance_lock:
            cls._instance = None

    # ----- Loading -----

    def load(self, sources: Iterable[str], directory: str | None = None) -> None:
        """Load configuration sources into their namespaces, in order.

        Later sources overwrite keys set by earlier ones. The first source
        that fails to load stops the batch; sources already processed stay
        applied.

        Args:
            sources: Source names, e.g. ``["database.yaml", "cache.yaml"]``.
            directory: Base directory the names are relative to.

        Raises:
            LoadError: If the default loader cannot read a source. Errors
                from a custom loader propagate unchanged.
        """
        for source in sources:
            namespace = derive_namespace(source)
            location = resolve_location(source, directory)
            items = self._loader(location)

            for key, value in items.items():
                self.set(f"{namespace}.{key}", value)
            logger.debug("Loaded source %s into namespace '%s'", location, namespace)

    def load_from_dir(self, directory: str, marker: str = DEFAULT_MARKER) -> None:
        """Load every entry of a directory whose name contains ``marker``.

        The match is a plain substring test, so ``settings.php.bak`` is
        picked up alongside ``settings.php``.

        The default loader does not read ``.php`` files, so pass a
        ``loader=`` to the repository that understands them, or a
        ``marker=`` naming a format it reads, such as ``".yaml"``.

        Raises:
            FilesystemError: If the directory cannot be listed.
            LoadError: If one of the selected sources cannot be loaded.
        """
        sources = [name for name in self._lister(directory) if matches_marker(name, marker)]
        logger.info("Loading %d configuration sources from %s", len(sources), directory)
        self.load(sources, directory)

    # ----- Accessors -----

    def has(self, key: str) -> bool:
        """Return True if ``key`` is stored, even with a None value."""
        return key in self._items

    def get(self, key: str, default: Any = None) -> Any:
        return self._items.get(key, default)

    def set(self, key: str | Mapping[str, Any], value: Any = None) -> None:
        """Set one value, or many when ``key`` is a mapping.

        With a mapping, ``value`` is ignored and each pair is assigned in
        iteration order. Existing values are replaced, never merged.
        """
        pairs = key if isinstance(key, Mapping) else {key: value}
        for k, v in pairs.items():
            self._items[k] = v

    def all(self) -> dict[str, Any]:
        """Return a shallow copy of every stored item."""
        return dict(self._items)

    # ----- Item access -----

    def exists(self, key: str) -> bool:
        return self.has(key)

    def read(self, key: str) -> Any:
        return self.get(key)

    def write(self, key: str, value: Any) -> None:
        self.set(key, value)

    def clear(self, key: str) -> None:
        """Store None under ``key``. The key itself stays present."""
        self.set(key, None)

    def __contains__(self, key: Any) -> bool:
        return self.exists(key)

    def __getitem__(self, key: str) -> Any:
        return self.read(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.write(key, value)

    def __delitem__(self, key: str) -> None:
        self.clear(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._items)} items)"

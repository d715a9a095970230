"""konf - Flat, namespaced configuration repository."""

from __future__ import annotations

# Core
from konf.repository import DEFAULT_MARKER, Repository

# Types
from konf.types import ConfigValue, DirectoryLister, RepositoryProtocol, SourceLoader

# Collaborators
from konf.loaders import list_directory, load_source
from konf.naming import derive_namespace, matches_marker, resolve_location

# Errors
from konf.errors import ErrorCodes, FilesystemError, KonfError, LoadError

__version__ = "1.0.0"

__all__ = [
    # Core
    "Repository",
    "DEFAULT_MARKER",
    # Types
    "ConfigValue",
    "RepositoryProtocol",
    "SourceLoader",
    "DirectoryLister",
    # Collaborators
    "load_source",
    "list_directory",
    "derive_namespace",
    "resolve_location",
    "matches_marker",
    # Errors
    "ErrorCodes",
    "KonfError",
    "LoadError",
    "FilesystemError",
]

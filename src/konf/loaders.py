"""Default source loader and directory lister for the konf repository."""

from __future__ import annotations

import importlib.util
import json
import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from konf.errors import FilesystemError, LoadError

logger = logging.getLogger(__name__)

__all__ = ["load_source", "list_directory", "CONFIG_ATTRIBUTE"]

CONFIG_ATTRIBUTE = "CONFIG"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(location=str(path), reason=str(exc), cause=exc) from exc


def _load_yaml(path: Path) -> Any:
    content = _read_text(path)
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise LoadError(location=str(path), reason=f"YAML parse error: {exc}", cause=exc) from exc
    return {} if parsed is None else parsed


def _load_json(path: Path) -> Any:
    content = _read_text(path)
    try:
        return json.loads(content)
    except ValueError as exc:
        raise LoadError(location=str(path), reason=f"JSON parse error: {exc}", cause=exc) from exc


def _load_python(path: Path) -> Any:
    """Execute a Python definitions file and return its CONFIG mapping."""
    if not path.is_file():
        raise LoadError(location=str(path), reason="File not found")

    module_name = f"konf_source_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, str(path))
    if spec is None or spec.loader is None:
        raise LoadError(location=str(path), reason=f"Cannot create import spec for {path}")

    mod = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        raise LoadError(location=str(path), reason=f"Failed to execute source: {exc}", cause=exc) from exc

    if not hasattr(mod, CONFIG_ATTRIBUTE):
        raise LoadError(
            location=str(path),
            reason=f"Source does not define a module-level '{CONFIG_ATTRIBUTE}' mapping",
        )
    return getattr(mod, CONFIG_ATTRIBUTE)


_FORMATS = {
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".json": _load_json,
    ".py": _load_python,
}


def load_source(location: str) -> Mapping[Any, Any]:
    """Load one configuration source into a flat mapping.

    The format is chosen from the file suffix: YAML (``.yaml``/``.yml``),
    JSON (``.json``) or a Python definitions file (``.py``) that binds a
    module-level ``CONFIG`` mapping.

    Args:
        location: Path of the source file.

    Returns:
        The top-level mapping defined by the source.

    Raises:
        LoadError: If the format is unsupported, the file cannot be read or
            parsed, or its top-level value is not a mapping.
    """
    path = Path(location)
    reader = _FORMATS.get(path.suffix.lower())
    if reader is None:
        raise LoadError(location=location, reason=f"Unsupported source format '{path.suffix}'")

    data = reader(path)
    if not isinstance(data, Mapping):
        raise LoadError(
            location=location,
            reason=f"Source must define a mapping, got {type(data).__name__}",
        )

    logger.debug("Loaded %d keys from %s", len(data), location)
    return data


def list_directory(directory: str) -> list[str]:
    """Return the entry names in a directory, sorted by name.

    Raises:
        FilesystemError: If the directory is missing, is not a directory,
            or cannot be read.
    """
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        raise FilesystemError(path=directory, reason=exc.strerror or str(exc), cause=exc) from exc

    logger.debug("Listed %d entries in %s", len(entries), directory)
    return entries

"""Pure string transforms for configuration source names."""

from __future__ import annotations

import re

__all__ = ["derive_namespace", "resolve_location", "matches_marker"]

_EXTENSION_RE = re.compile(r"\.[^.\s]{3,4}$")


def derive_namespace(source: str) -> str:
    """Derive the key namespace for a configuration source.

    Strips a trailing extension of three or four characters (no dots, no
    whitespace) from the source name. Shorter or longer extensions are
    kept as part of the namespace.

    Args:
        source: The source name, e.g. ``"database.php"``.

    Returns:
        The namespace, e.g. ``"database"``.
    """
    return _EXTENSION_RE.sub("", source)


def resolve_location(source: str, directory: str | None = None) -> str:
    """Join a source name onto its base directory, if one is given."""
    if directory:
        return f"{directory}/{source}"
    return source


def matches_marker(name: str, marker: str) -> bool:
    """Loose substring test used when picking sources out of a directory.

    This is deliberately not a suffix check: ``"app.php.bak"`` contains
    ``".php"`` and matches.
    """
    return marker in name

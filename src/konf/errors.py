"""Error hierarchy for the konf configuration store."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "KonfError",
    "LoadError",
    "FilesystemError",
    "ErrorCodes",
]


class KonfError(Exception):
    """Base error for all konf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class LoadError(KonfError):
    """Raised when a configuration source cannot be read or parsed."""

    def __init__(self, location: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_LOAD_ERROR",
            message=f"Failed to load configuration source '{location}': {reason}",
            details={"location": location, "reason": reason},
            **kwargs,
        )

    @property
    def location(self) -> str:
        """The resolved location of the source that failed."""
        return self.details["location"]

    @property
    def reason(self) -> str:
        return self.details["reason"]


class FilesystemError(KonfError):
    """Raised when a configuration directory cannot be listed."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_FILESYSTEM_ERROR",
            message=f"Cannot list configuration directory '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The directory that could not be listed."""
        return self.details["path"]

    @property
    def reason(self) -> str:
        return self.details["reason"]


class ErrorCodes:
    """All konf error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_LOAD_ERROR:
            handle_bad_source()
    """

    CONFIG_LOAD_ERROR = "CONFIG_LOAD_ERROR"
    CONFIG_FILESYSTEM_ERROR = "CONFIG_FILESYSTEM_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

"""Tests for the konf error hierarchy."""

from __future__ import annotations

import pytest

from konf.errors import ErrorCodes, FilesystemError, KonfError, LoadError


class TestKonfError:
    def test_fields(self) -> None:
        cause = ValueError("bad")
        err = KonfError(code="X", message="something failed", details={"k": 1}, cause=cause)
        assert err.code == "X"
        assert err.message == "something failed"
        assert err.details == {"k": 1}
        assert err.cause is cause
        assert err.timestamp

    def test_str(self) -> None:
        assert str(KonfError(code="X", message="boom")) == "[X] boom"

    def test_details_default_empty(self) -> None:
        assert KonfError(code="X", message="boom").details == {}


class TestLoadError:
    def test_fields(self) -> None:
        err = LoadError(location="/cfg/db.yaml", reason="File not found")
        assert isinstance(err, KonfError)
        assert err.code == ErrorCodes.CONFIG_LOAD_ERROR
        assert err.location == "/cfg/db.yaml"
        assert err.reason == "File not found"
        assert str(err) == "[CONFIG_LOAD_ERROR] Failed to load configuration source '/cfg/db.yaml': File not found"


class TestFilesystemError:
    def test_fields(self) -> None:
        err = FilesystemError(path="/cfg", reason="No such file or directory")
        assert isinstance(err, KonfError)
        assert err.code == ErrorCodes.CONFIG_FILESYSTEM_ERROR
        assert err.path == "/cfg"
        assert err.reason == "No such file or directory"


class TestErrorCodes:
    def test_immutable(self) -> None:
        codes = ErrorCodes()
        with pytest.raises(AttributeError):
            codes.CONFIG_LOAD_ERROR = "OTHER"

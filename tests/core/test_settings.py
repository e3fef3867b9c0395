"""Tests for settings, Result and profiling errors."""

import pytest
from pydantic import ValidationError

from relprofile.core import Result
from relprofile.core.config import Settings, get_settings
from relprofile.core.errors import (
    AttributeIndexError,
    DiscoveryCancelledError,
    InputValidationError,
    ProfilingError,
    UnsupportedOperationError,
)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RELPROFILE_UCC_MAX_WORKERS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.csv_delimiter == ","
        assert settings.csv_header is True
        assert settings.ucc_max_workers == 1
        assert settings.ind_strip_quotes is True
        assert settings.dedup_window_size == 4

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RELPROFILE_UCC_MAX_WORKERS", "8")
        monkeypatch.setenv("RELPROFILE_CSV_DELIMITER", ";")
        settings = Settings(_env_file=None)
        assert settings.ucc_max_workers == 8
        assert settings.csv_delimiter == ";"

    def test_invalid_worker_count(self, monkeypatch):
        monkeypatch.setenv("RELPROFILE_UCC_MAX_WORKERS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestResult:
    """Tests for the Result type."""

    def test_ok(self):
        result = Result.ok(3, warnings=["careful"])
        assert result.success
        assert result.unwrap() == 3
        assert result.warnings == ["careful"]

    def test_fail(self):
        result = Result.fail("boom")
        assert not result.success
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()


class TestErrors:
    """Tests for the error hierarchy."""

    def test_attribute_index_error(self):
        error = AttributeIndexError(5, 3)
        assert isinstance(error, InputValidationError)
        assert isinstance(error, IndexError)
        assert isinstance(error, ValueError)
        assert "5" in str(error) and "3" in str(error)

    def test_unsupported_is_not_implemented(self):
        assert issubclass(UnsupportedOperationError, NotImplementedError)
        assert issubclass(UnsupportedOperationError, ProfilingError)

    def test_cancelled_carries_level(self):
        assert DiscoveryCancelledError(3).level == 3

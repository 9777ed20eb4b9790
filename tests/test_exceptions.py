"""Tests for exception hierarchy."""

from pathlib import Path

import pytest

from stackshift.exceptions import (
    AnalyzeError,
    ArtifactError,
    ManifestError,
    RuleError,
    StackshiftError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    def test_base_exception_exists(self):
        """StackshiftError is the base exception."""
        error = StackshiftError("test message")
        assert isinstance(error, Exception)
        assert str(error) == "test message"

    @pytest.mark.parametrize("exception_class", [AnalyzeError, RuleError, ArtifactError])
    def test_all_exceptions_inherit_from_base(self, exception_class):
        """All custom exceptions inherit from StackshiftError."""
        error = exception_class("specific error")
        assert isinstance(error, StackshiftError)
        assert str(error) == "specific error"

    def test_manifest_error_carries_path(self):
        """ManifestError keeps the path and reason."""
        error = ManifestError(Path("package.json"), "Expecting value")
        assert isinstance(error, StackshiftError)
        assert error.path == Path("package.json")
        assert error.reason == "Expecting value"
        assert str(error) == "Malformed manifest package.json: Expecting value"

    def test_catch_by_base(self):
        """Catching the base catches every subclass."""
        with pytest.raises(StackshiftError):
            raise RuleError("bad rules")

"""Tests for settings module."""

from unittest.mock import patch

from stackshift.settings import Settings, get_settings


class TestSettings:
    """Test Settings class configuration."""

    def test_settings_defaults(self):
        """Settings has correct default values."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.content_sample_limit == 10
            assert settings.max_concurrency == 8
            assert settings.max_files == 5000
            assert settings.output_dir == ".stackshift"
            assert settings.analysis_file == "analysis.json"

    def test_settings_loads_from_env(self):
        """Settings are read from STACKSHIFT_ prefixed variables."""
        with patch.dict(
            "os.environ",
            {"STACKSHIFT_MAX_FILES": "100", "STACKSHIFT_OUTPUT_DIR": "plans"},
            clear=True,
        ):
            settings = Settings(_env_file=None)
            assert settings.max_files == 100
            assert settings.output_dir == "plans"

    def test_unprefixed_variables_ignored(self):
        """Variables without the prefix do not leak in."""
        with patch.dict("os.environ", {"MAX_FILES": "1"}, clear=True):
            assert Settings(_env_file=None).max_files == 5000


class TestGetSettings:
    """Test get_settings caching."""

    def test_returns_cached_instance(self):
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Clearing the cache picks up new environment values."""
        with patch.dict("os.environ", {"STACKSHIFT_CONTENT_SAMPLE_LIMIT": "3"}):
            get_settings.cache_clear()
            assert get_settings().content_sample_limit == 3

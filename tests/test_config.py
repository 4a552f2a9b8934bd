"""Tests for config.py environment variable loading."""
import os
from unittest.mock import patch


class TestSettings:
    """Test Server-Timing settings."""

    def test_defaults(self):
        """Settings load with defaults when nothing is configured."""
        from server_timing.config import Settings
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        assert s.SERVER_TIMING_ENABLED is True
        assert s.SERVER_TIMING_TAIL_LABEL == "app"
        assert s.RESPONSE_TIME_HEADER_ENABLED is True
        assert s.ENVIRONMENT == "development"

    def test_environment_override(self):
        """Environment variables override the defaults."""
        from server_timing.config import Settings
        env = {
            "SERVER_TIMING_ENABLED": "false",
            "SERVER_TIMING_TAIL_LABEL": "total",
            "RESPONSE_TIME_HEADER_ENABLED": "0",
        }
        with patch.dict(os.environ, env, clear=False):
            s = Settings(_env_file=None)
        assert s.SERVER_TIMING_ENABLED is False
        assert s.SERVER_TIMING_TAIL_LABEL == "total"
        assert s.RESPONSE_TIME_HEADER_ENABLED is False

    def test_tail_label_stripped(self):
        """Whitespace around the tail label is removed."""
        from server_timing.config import Settings
        s = Settings(SERVER_TIMING_TAIL_LABEL="  render  ", _env_file=None)
        assert s.SERVER_TIMING_TAIL_LABEL == "render"

    def test_blank_tail_label(self):
        """A whitespace-only tail label becomes empty."""
        from server_timing.config import Settings
        s = Settings(SERVER_TIMING_TAIL_LABEL="   ", _env_file=None)
        assert s.SERVER_TIMING_TAIL_LABEL == ""

    def test_get_settings_cached(self):
        """get_settings returns the same instance."""
        from server_timing.config import get_settings
        assert get_settings() is get_settings()

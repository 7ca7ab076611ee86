"""Tests for centralized configuration."""

import pytest
from pydantic import ValidationError

from chessmetrics.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        """An empty environment is a valid configuration."""
        for var in ("LOG_LEVEL", "STRICT_FEN", "VALIDATE_POSITIONS", "API_VERSION", "ERROR_MESSAGE_MAX_LENGTH"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.strict_fen is True
        assert s.validate_positions is True
        assert s.api_version == "1.0.0"
        assert s.error_message_max_length == 100

    def test_all_fields(self, monkeypatch):
        """All fields can be set explicitly."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("STRICT_FEN", "false")
        monkeypatch.setenv("VALIDATE_POSITIONS", "false")
        monkeypatch.setenv("API_VERSION", "2.0.0")
        monkeypatch.setenv("ERROR_MESSAGE_MAX_LENGTH", "50")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.strict_fen is False
        assert s.validate_positions is False
        assert s.api_version == "2.0.0"
        assert s.error_message_max_length == 50

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("ERROR_MESSAGE_MAX_LENGTH", "lots")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env.chessmetrics"
        env_file.write_text("STRICT_FEN=false\nLOG_LEVEL=WARNING\n")
        s = Settings(_env_file=env_file)
        assert s.strict_fen is False
        assert s.log_level == "WARNING"

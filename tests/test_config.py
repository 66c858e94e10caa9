"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from skillforge.core.config import Settings


class TestSettings:
    """Test Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DISABLED_SKILLS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.API_V1_PREFIX == "/api/v1"
        assert settings.DISABLED_SKILLS == []
        assert settings.SKILL_INVOKE_RATE_LIMIT == "60/minute"

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, LOG_LEVEL="verbose")

    def test_disabled_skills_from_env(self, monkeypatch):
        monkeypatch.setenv("DISABLED_SKILLS", '["ui_polish", "ai_copywriter"]')

        assert Settings(_env_file=None).DISABLED_SKILLS == ["ui_polish", "ai_copywriter"]

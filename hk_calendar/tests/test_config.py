"""
Tests for configuration validation
"""
import pytest
from pydantic import ValidationError

from hk_calendar.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.HOLIDAY_FEED_EN_URL == "https://www.1823.gov.hk/common/ical/en.json"
    assert settings.HOLIDAY_FEED_ZH_URL == "https://www.1823.gov.hk/common/ical/tc.json"
    assert settings.HOLIDAY_CACHE_EN_PATH == "data/holidays-en.json"
    assert settings.HOLIDAY_CACHE_ZH_PATH == "data/holidays-zh.json"


def test_prod_settings_rejects_wildcard_origins():
    """Test that production settings reject wildcard origins"""
    settings = Settings(APP_ENV="prod", ALLOWED_ORIGINS="*")

    with pytest.raises(ValueError, match="ALLOWED_ORIGINS"):
        settings.validate_production()


def test_prod_settings_accepts_explicit_origins():
    settings = Settings(APP_ENV="prod", ALLOWED_ORIGINS="https://calendar.example.hk")
    settings.validate_production()


def test_get_allowed_origins_list():
    """Test parsing of ALLOWED_ORIGINS"""
    assert Settings(ALLOWED_ORIGINS="*").get_allowed_origins_list() == ["*"]

    settings = Settings(ALLOWED_ORIGINS="https://example.com, https://app.example.com,")
    assert settings.get_allowed_origins_list() == ["https://example.com", "https://app.example.com"]


@pytest.mark.parametrize("field, value", [
    ("APP_ENV", "dev"),
    ("LOG_LEVEL", "VERBOSE"),
    ("HOLIDAY_SOURCE", "ftp"),
    ("DEFAULT_LOCALE", "fr"),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_values_normalized():
    settings = Settings(LOG_LEVEL="debug", HOLIDAY_SOURCE="REMOTE", DEFAULT_LOCALE="ZH")

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.HOLIDAY_SOURCE == "remote"
    assert settings.DEFAULT_LOCALE == "zh"

import pytest

from app.core.config import Settings, settings, validate_settings


def test_defaults():
    assert settings.API_PREFIX == "/api"
    assert settings.INVOICE_PREFIX == "INV-"
    assert settings.INVOICE_NUMBER_WIDTH == 6
    assert settings.UPCOMING_WINDOW_DAYS == 7
    assert validate_settings() is True


def test_log_level_is_normalized():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
    with pytest.raises(ValueError):
        Settings(LOG_LEVEL="chatty")


def test_api_prefix_trailing_slash_removed():
    assert Settings(API_PREFIX="/api/").API_PREFIX == "/api"
    with pytest.raises(ValueError):
        Settings(API_PREFIX="api")

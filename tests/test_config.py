"""Settings parsing and startup validation."""

import pytest

from app.config import Settings


def test_valid_settings_pass_validation():
    settings = Settings()
    settings.PORT = "8000"
    settings.SCRAPER_TIMEOUT = "15"
    settings.BASE_ORIGIN = "https://www.flipkart.com"

    settings.validate()
    assert settings.port == 8000
    assert settings.scraper_timeout == 15.0


@pytest.mark.parametrize("port", ["abc", "", "0", "70000"])
def test_invalid_port_fails_validation(port):
    settings = Settings()
    settings.PORT = port

    with pytest.raises(ValueError, match="PORT"):
        settings.validate()


def test_invalid_timeout_and_origin_are_reported_together():
    settings = Settings()
    settings.PORT = "8000"
    settings.SCRAPER_TIMEOUT = "soon"
    settings.BASE_ORIGIN = "flipkart.com"

    with pytest.raises(ValueError) as info:
        settings.validate()

    assert "SCRAPER_TIMEOUT" in str(info.value)
    assert "BASE_ORIGIN" in str(info.value)


def test_base_origin_drops_trailing_slash():
    settings = Settings()
    settings.BASE_ORIGIN = "https://www.flipkart.com/"

    assert settings.base_origin == "https://www.flipkart.com"


def test_log_level_is_normalized():
    settings = Settings()
    settings.LOG_LEVEL = "debug"

    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("level", ["VERBOSE", "trace", ""])
def test_invalid_log_level_fails_validation(level):
    settings = Settings()
    settings.PORT = "8000"
    settings.SCRAPER_TIMEOUT = "15"
    settings.BASE_ORIGIN = "https://www.flipkart.com"
    settings.LOG_LEVEL = level

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        settings.validate()

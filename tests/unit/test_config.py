"""
Tests pour Settings (pydantic-settings) et configure_logging.
"""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from moviedb.config import Settings
from moviedb.logging_config import configure_logging


class TestSettings:
    """Tests pour la classe Settings."""

    def test_loads_api_key_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MOVIEDB_API_KEY", "env_key")
        settings = Settings()
        assert settings.api_key == "env_key"

    def test_defaults(self):
        settings = Settings(api_key="k")
        assert settings.api_base_url == "https://api.themoviedb.org/3"
        assert settings.image_base_url == "https://image.tmdb.org/t/p"
        assert settings.image_cache_size == 256
        assert settings.request_timeout == 30.0

    def test_api_key_is_required(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("MOVIEDB_API_KEY", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_base_url_trailing_slash_is_stripped(self):
        settings = Settings(api_key="k", api_base_url="http://localhost:8080/3/")
        assert settings.api_base_url == "http://localhost:8080/3"

    @pytest.mark.parametrize("url", ["ftp://example.com", "not a url"])
    def test_invalid_base_url(self, url: str):
        with pytest.raises(ValidationError):
            Settings(api_key="k", image_base_url=url)

    def test_image_cache_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(api_key="k", image_cache_size=0)

    def test_log_file_expands_home(self):
        settings = Settings(api_key="k", log_file="~/moviedb.log")
        assert settings.log_file == Path("~/moviedb.log").expanduser()


class TestConfigureLogging:
    """Tests pour configure_logging()."""

    def test_creates_log_directory(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "moviedb.log"
        handler_ids = configure_logging(log_level="DEBUG", log_file=log_file)
        assert log_file.parent.is_dir()
        assert len(handler_ids) == 2
        for handler_id in handler_ids:
            logger.remove(handler_id)

    def test_console_only_without_log_file(self):
        handler_ids = configure_logging(log_level="warning")
        assert len(handler_ids) == 1
        logger.remove(handler_ids[0])

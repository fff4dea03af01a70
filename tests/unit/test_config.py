"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from fileuploader.config import FileUploaderSettings, LogFormat, LoggingConfig, get_settings, setup_logging
from fileuploader.core.exceptions import FileUploaderError, HandlerNotFoundError, create_error_response


class TestSettings:
    """Test cases for FileUploaderSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FILEUPLOADER_DEFAULT_MAX_SIZE", raising=False)
        settings = FileUploaderSettings(_env_file=None)

        assert settings.delegate_name == "CoreFileUploaderDelegate"
        assert settings.default_max_size == -1
        assert settings.allow_offline is False
        assert settings.remote_verify_ssl is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FILEUPLOADER_DEFAULT_MAX_SIZE", "1000")

        assert get_settings().default_max_size == 1000

    def test_invalid_max_size(self, monkeypatch):
        monkeypatch.setenv("FILEUPLOADER_DEFAULT_MAX_SIZE", "-2")

        with pytest.raises(ValidationError):
            FileUploaderSettings(_env_file=None)

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestLoggingConfig:
    """Test cases for LoggingConfig."""

    def test_verbosity_maps_to_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_VERBOSITY", "verbose")

        assert LoggingConfig.build()["root"]["level"] == "INFO"

    def test_log_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_VERBOSITY", "QUIET")

        assert LoggingConfig.build()["root"]["level"] == "DEBUG"

    def test_unknown_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("LOG_VERBOSITY", "SHOUTY")
        monkeypatch.setenv("LOG_FORMAT", "xml")

        config = LoggingConfig.build()

        assert config["root"]["level"] == "WARNING"
        assert config["formatters"]["default"]["format"] == LoggingConfig.FORMATS[LogFormat.SIMPLE]

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")

        assert LoggingConfig.build()["formatters"]["default"]["format"].startswith('{"time"')

    def test_third_party_modules_error_only(self):
        loggers = LoggingConfig.build()["loggers"]

        assert loggers["httpx"]["level"] == "ERROR"

    def test_setup_logging_configures_root(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        root = logging.getLogger()
        previous_level = root.level

        try:
            setup_logging()

            assert root.level == logging.INFO
            assert any(isinstance(handler, logging.StreamHandler) for handler in root.handlers)
            assert logging.getLogger("httpx").level == logging.ERROR
        finally:
            root.setLevel(previous_level)


class TestErrors:
    """Test cases for error rendering."""

    def test_create_error_response(self):
        error = HandlerNotFoundError("Camera", "Delegate")

        assert isinstance(error, FileUploaderError)
        assert create_error_response(error) == {
            "error": {
                "code": "HANDLER_NOT_FOUND",
                "message": "Handler 'Camera' is not registered",
                "details": {"handler_name": "Camera", "delegate_name": "Delegate"},
                "type": "HandlerNotFoundError",
            }
        }

    def test_default_error_code(self):
        assert FileUploaderError("failed").error_code == "FileUploaderError"

"""Tests for settings and logging setup."""

import logging

import structlog

from log.abstract_factory import LoggerAbstractServiceFactory
from servicemanager.config import ServiceManagerSettings
from servicemanager.logging import configure_logging, get_logger
from servicemanager.service_manager import ServiceManager


class TestSettings:
    def test_defaults(self):
        """Defaults match the conventional service names."""
        settings = ServiceManagerSettings()

        assert settings.config_service == "Config"
        assert settings.config_key == "log"
        assert settings.writer_manager_service == "LogWriterManager"
        assert settings.processor_manager_service == "LogProcessorManager"

    def test_environment_override(self, monkeypatch):
        """Settings are read from LOGFACTORY_ environment variables."""
        monkeypatch.setenv("LOGFACTORY_CONFIG_KEY", "loggers")
        monkeypatch.setenv("LOGFACTORY_CONFIG_SERVICE", "AppConfig")

        settings = ServiceManagerSettings()

        assert settings.config_key == "loggers"
        assert settings.config_service == "AppConfig"

    def test_factory_and_manager_use_settings_defaults(self):
        """Components fall back to the global settings."""
        assert LoggerAbstractServiceFactory().config_key == "log"
        assert ServiceManager().config_service == "Config"


class TestLogging:
    def test_configure_logging_sets_level(self):
        """The package loggers follow the configured level."""
        configure_logging("DEBUG")
        try:
            assert logging.getLogger("servicemanager").level == logging.DEBUG
            assert logging.getLogger("log").level == logging.DEBUG
            assert structlog.is_configured()
        finally:
            configure_logging("WARNING")

    def test_get_logger_binds_events(self):
        """get_logger returns a structlog logger accepting key-value events."""
        logger = get_logger("servicemanager.tests")

        logger.debug("test.event", answer=42)

"""Pytest configuration and shared fixtures."""

import sqlite3

import pytest

from log.abstract_factory import LoggerAbstractServiceFactory
from servicemanager.logging import configure_logging
from servicemanager.service_manager import ServiceManager


@pytest.fixture
def logger_config():
    """Two empty loggers under the default config key."""
    return {
        "log": {
            "Application.Frontend": {},
            "Application.Backend": {},
        },
    }


@pytest.fixture
def factory():
    """Create a fresh LoggerAbstractServiceFactory for each test."""
    return LoggerAbstractServiceFactory()


@pytest.fixture
def service_manager(logger_config):
    """Service manager resolving configured loggers through the abstract factory."""
    services = ServiceManager(abstract_factories=[LoggerAbstractServiceFactory])
    services.set_service("Config", logger_config)
    return services


@pytest.fixture
def db_connection():
    """In-memory SQLite connection with a log table."""
    connection = sqlite3.connect(":memory:")
    connection.execute(
        "CREATE TABLE applicationlog (ts TEXT, priority INTEGER, message TEXT, user_id TEXT)"
    )
    yield connection
    connection.close()


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Route diagnostics through stdlib logging at WARNING for the test session."""
    configure_logging("WARNING")

# servicemanager/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceManagerSettings(BaseSettings):
    """Configuration for service resolution and logger assembly."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LOGFACTORY_", extra="ignore")

    # Service names
    config_service: str = "Config"
    writer_manager_service: str = "LogWriterManager"
    processor_manager_service: str = "LogProcessorManager"

    # Top-level key holding logger definitions
    config_key: str = "log"

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = ServiceManagerSettings()

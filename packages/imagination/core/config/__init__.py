"""Configuration management for Imagination."""

from imagination.core.config.loader import (
    configure_logging,
    load_app_config,
    load_config,
)
from imagination.core.config.models import (
    AppConfig,
    LoggingConfig,
    ProviderConfig,
    ServerConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "ProviderConfig",
    "ServerConfig",
]

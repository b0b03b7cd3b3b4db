"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, TextIO

import yaml

from imagination.core.config.models import AppConfig
from imagination.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("imagination.json")
        'json'
        >>> detect_format("imagination.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. Environment variables fill in any
    provider/server values the file leaves unset.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to imagination.json

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
        logger.debug("Loaded app config from %s", path)
    else:
        config = AppConfig()

    return _apply_env_overrides(config)


def configure_logging(
    config: AppConfig | None = None,
    *,
    level: str | None = None,
    structured: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
        level: Override for config.logging.level
        structured: Override for config.logging.structured
        stream: Console stream (defaults to stdout)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=level or config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured if structured is None else structured,
        stream=stream,
    )


def get_openai_api_key() -> str | None:
    """Get OpenAI API key from environment.

    Returns:
        API key or None if not set
    """
    return os.getenv("OPENAI_API_KEY")


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    """Fill unset provider/server values from the environment.

    Args:
        config: Loaded config

    Returns:
        Config with environment values applied
    """
    provider_updates: dict[str, Any] = {}
    provider = config.provider

    if provider.api_key is None:
        api_key = get_openai_api_key()
        if api_key:
            logger.debug("Loaded OPENAI_API_KEY from environment")
            provider_updates["api_key"] = api_key

    if provider.base_url is None and os.getenv("OPENAI_BASE_URL"):
        provider_updates["base_url"] = os.getenv("OPENAI_BASE_URL")

    if provider.organization is None and os.getenv("OPENAI_ORG_ID"):
        provider_updates["organization"] = os.getenv("OPENAI_ORG_ID")

    if "model" not in provider.model_fields_set and os.getenv("OPENAI_IMAGE_MODEL"):
        provider_updates["model"] = os.getenv("OPENAI_IMAGE_MODEL")

    server_updates: dict[str, Any] = {}
    port = os.getenv("PORT")
    if "port" not in config.server.model_fields_set and port:
        if port.isdigit() and 0 < int(port) < 65536:
            server_updates["port"] = int(port)
        else:
            logger.warning("Ignoring invalid PORT environment value: %r", port)

    updates: dict[str, Any] = {}
    if provider_updates:
        updates["provider"] = provider.model_copy(update=provider_updates)
    if server_updates:
        updates["server"] = config.server.model_copy(update=server_updates)

    return config.model_copy(update=updates) if updates else config

"""Configuration models for Imagination."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Image provider (OpenAI) configuration.

    A blank or missing API key means no provider is configured and every
    request is served by the local fallback.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: str | None = Field(default=None, repr=False, description="OpenAI API key")
    base_url: str | None = Field(default=None, description="Override API base URL")
    organization: str | None = Field(default=None, description="OpenAI organization ID")
    model: str = Field(default="gpt-image-1", min_length=1)
    timeout_seconds: float = Field(default=120.0, gt=0, description="Transport timeout")

    @property
    def enabled(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    model_config = ConfigDict(extra="forbid")

    host: str = "0.0.0.0"
    port: int = Field(default=3000, gt=0, lt=65536)
    static_dir: str | None = Field(
        default="public", description="Directory served at / (skipped if missing)"
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    assets_dir: str = "public/assets"
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("imagination.json")

"""Shared pytest fixtures for imagination tests."""

from __future__ import annotations

import base64

import pytest

from imagination.core.config.models import AppConfig, ServerConfig
from imagination.core.generation.errors import ProviderError
from imagination.core.generation.models import ImageSize
from imagination.core.providers.base import ProviderImage

# ============================================================================
# Provider Stubs
# ============================================================================


class StubProvider:
    """In-memory image provider that records every call."""

    def __init__(
        self,
        *,
        name: str = "stub",
        images: list[ProviderImage] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._name = name
        self._images = images or []
        self._error = error
        self.calls: list[tuple[str, ImageSize | str, int]] = []

    @property
    def name(self) -> str:
        return self._name

    async def generate(self, prompt: str, size: ImageSize | str, n: int) -> list[ProviderImage]:
        self.calls.append((prompt, size, n))
        if self._error is not None:
            raise self._error
        return list(self._images)


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def make_provider() -> type[StubProvider]:
    """Factory fixture for custom stub providers."""
    return StubProvider


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def failing_provider() -> StubProvider:
    """Provider that always raises ProviderError."""
    return StubProvider(error=ProviderError("boom", provider="stub"))


@pytest.fixture
def empty_provider() -> StubProvider:
    """Provider that succeeds with no images."""
    return StubProvider()


@pytest.fixture
def inline_provider() -> StubProvider:
    """Provider that returns inline base64 PNG data."""
    return StubProvider(images=[ProviderImage(b64_json=PNG_B64)])


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def app_config() -> AppConfig:
    """App config with no provider key and no static directory."""
    return AppConfig(server=ServerConfig(static_dir=None))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove environment variables read by the config loader."""
    for var in (
        "OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "OPENAI_ORG_ID",
        "OPENAI_IMAGE_MODEL",
        "PORT",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch

"""Tests for resolving provider items to image bytes."""

from __future__ import annotations

import base64

import httpx
import pytest

from imagination.core.generation.errors import ProviderError
from imagination.core.providers.base import ProviderImage
from imagination.core.providers.fetch import fetch_image_bytes


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_decodes_inline_data(png_bytes: bytes) -> None:
    image = ProviderImage(b64_json=base64.b64encode(png_bytes).decode("ascii"))
    assert await fetch_image_bytes(image) == png_bytes


@pytest.mark.asyncio
async def test_invalid_inline_data() -> None:
    with pytest.raises(ProviderError, match="Invalid base64") as exc_info:
        await fetch_image_bytes(ProviderImage(b64_json="not base64!!"), provider="openai")
    assert exc_info.value.provider == "openai"


@pytest.mark.asyncio
async def test_missing_data_and_url() -> None:
    with pytest.raises(ProviderError):
        await fetch_image_bytes(ProviderImage())


@pytest.mark.asyncio
async def test_downloads_url(png_bytes: bytes) -> None:
    async with _client(lambda request: httpx.Response(200, content=png_bytes)) as client:
        data = await fetch_image_bytes(
            ProviderImage(url="https://img.example/a.png"), http_client=client
        )
    assert data == png_bytes


@pytest.mark.asyncio
async def test_http_error_status() -> None:
    async with _client(lambda request: httpx.Response(500)) as client:
        with pytest.raises(ProviderError, match="500"):
            await fetch_image_bytes(
                ProviderImage(url="https://img.example/a.png"), http_client=client
            )


@pytest.mark.asyncio
async def test_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(ProviderError, match="connection refused"):
            await fetch_image_bytes(
                ProviderImage(url="https://img.example/a.png"), http_client=client
            )

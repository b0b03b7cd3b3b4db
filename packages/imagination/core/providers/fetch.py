"""Resolve provider items to raw image bytes.

Inline base64 data is decoded locally; remote URLs are downloaded once with
HTTPX. Every failure surfaces as ``ProviderError``.
"""

from __future__ import annotations

import base64
import binascii
import logging

import httpx

from imagination.core.generation.errors import ProviderError
from imagination.core.providers.base import ProviderImage

logger = logging.getLogger(__name__)


async def fetch_image_bytes(
    image: ProviderImage,
    *,
    provider: str = "unknown",
    http_client: httpx.AsyncClient | None = None,
) -> bytes:
    """Return the binary image for a provider item.

    Args:
        image: Provider item carrying inline data or a URL.
        provider: Provider name for error reporting.
        http_client: Client to download with. A short-lived client is created
            when omitted.

    Returns:
        Image bytes.

    Raises:
        ProviderError: If decoding or downloading fails, or the item carries
            neither inline data nor a URL.
    """
    if image.b64_json:
        try:
            return base64.b64decode(image.b64_json, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ProviderError(f"Invalid base64 image data: {e}", provider=provider) from e

    if not image.url:
        raise ProviderError("Provider item has neither image data nor URL", provider=provider)

    if http_client is None:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await _download(client, image.url, provider)
    return await _download(http_client, image.url, provider)


async def _download(client: httpx.AsyncClient, url: str, provider: str) -> bytes:
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise ProviderError(f"Failed to fetch image url: {e}", provider=provider) from e

    if not response.is_success:
        raise ProviderError(
            f"Failed to fetch image url: {response.status_code}", provider=provider
        )

    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content

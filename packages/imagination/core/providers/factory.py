"""Provider factory."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI

from imagination.core.config.models import ProviderConfig
from imagination.core.providers.base import ImageProvider
from imagination.core.providers.openai import OpenAIImageProvider

logger = logging.getLogger(__name__)


def build_image_provider(config: ProviderConfig) -> ImageProvider | None:
    """Create the configured image provider, or None when no key is set.

    The OpenAI client is built with retries disabled: one attempt per request,
    then fallback.
    """
    if not config.enabled:
        logger.info("No OpenAI API key configured; using local fallback images")
        return None

    client = AsyncOpenAI(
        api_key=(config.api_key or "").strip(),
        base_url=config.base_url,
        organization=config.organization,
        timeout=config.timeout_seconds,
        max_retries=0,
    )
    return OpenAIImageProvider(client, model=config.model)

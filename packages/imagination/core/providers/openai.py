"""OpenAI Images API provider.

Single-attempt wrapper around ``client.images.generate()``. Transport errors,
API errors and malformed responses are all raised as ``ProviderError`` so the
orchestrator can fall back to local synthesis.
"""

from __future__ import annotations

import logging
import time

from openai import AsyncOpenAI

from imagination.core.generation.errors import ProviderError
from imagination.core.generation.models import ImageSize
from imagination.core.providers.base import ProviderImage

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MODEL = "gpt-image-1"


class OpenAIImageProvider:
    """Image provider backed by the OpenAI Images API.

    Args:
        client: AsyncOpenAI client instance.
        model: Image generation model name.
    """

    def __init__(self, client: AsyncOpenAI, *, model: str = DEFAULT_IMAGE_MODEL) -> None:
        self._client = client
        self._model = model

    @property
    def name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    async def generate(self, prompt: str, size: ImageSize | str, n: int) -> list[ProviderImage]:
        """Request ``n`` images in one API call.

        Args:
            prompt: Image generation prompt.
            size: Requested size, sent as its ``"WxH"`` string.
            n: Number of images.

        Returns:
            One ProviderImage per returned item, in API order.

        Raises:
            ProviderError: If the call fails for any reason.
        """
        api_size = size.value if isinstance(size, ImageSize) else size
        t0 = time.perf_counter()
        try:
            response = await self._client.images.generate(
                model=self._model,
                prompt=prompt,
                size=api_size,  # type: ignore[arg-type]
                n=n,
            )
            images = [
                ProviderImage(
                    b64_json=getattr(item, "b64_json", None),
                    url=getattr(item, "url", None),
                )
                for item in (response.data or [])
            ]
        except Exception as e:
            raise ProviderError(f"Image generation failed: {e}", provider=self.name) from e

        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        logger.info(
            "OpenAI returned %d image(s) in %d ms (model=%s, size=%s)",
            len(images),
            elapsed_ms,
            self._model,
            api_size,
        )
        return images

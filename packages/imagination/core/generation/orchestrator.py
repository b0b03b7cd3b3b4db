"""Generation orchestrator.

Provider first, local fallback second:

    START -> PROVIDER_ATTEMPT -> (PROVIDER_SUCCESS | PROVIDER_FAILURE)
          -> FALLBACK (conditional) -> DONE

The provider is attempted at most once. A ``ProviderError`` and an empty set
of usable images are treated the same way: the result is tagged
``<provider>-fallback`` and filled with synthesized placeholders. Without a
provider the tag is plain ``fallback``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from imagination.core.generation.errors import ProviderError
from imagination.core.generation.models import (
    FALLBACK_PROVIDER,
    GenerationRequest,
    GenerationResult,
    ImageSize,
    fallback_tag,
)
from imagination.core.generation.normalize import parse_size
from imagination.core.synth.encoders import to_data_uri
from imagination.core.synth.placeholder import synthesize_svg

if TYPE_CHECKING:
    from imagination.core.providers.base import ImageProvider

logger = logging.getLogger(__name__)


def generate_fallback_images(
    prompt: str,
    size: ImageSize | str,
    count: int,
    *,
    encode: Callable[[str], Any] = to_data_uri,
) -> list[Any]:
    """Synthesize ``count`` placeholder images, one per seed ``0..count-1``.

    Image ``i`` always corresponds to seed ``i``.

    Args:
        prompt: Prompt text.
        size: Image size (enum member or ``"WxH"`` string).
        count: Number of images.
        encode: Encoder applied to each SVG document.

    Returns:
        Encoded documents in seed order.
    """
    dims = parse_size(size)
    return [encode(synthesize_svg(prompt, dims.width, dims.height, seed)) for seed in range(count)]


async def _attempt_provider(provider: ImageProvider, request: GenerationRequest) -> list[str]:
    """Call the provider once and keep only usable references."""
    items = await provider.generate(request.prompt, request.size, request.count)
    references = [ref for ref in (item.to_reference() for item in items) if ref]
    if len(references) < len(items):
        logger.debug(
            "Dropped %d provider item(s) without data or URL", len(items) - len(references)
        )
    return references


async def generate_images(
    request: GenerationRequest,
    provider: ImageProvider | None = None,
) -> GenerationResult:
    """Generate images for a validated request.

    Args:
        request: Validated generation request.
        provider: Optional remote provider. None means fallback only.

    Returns:
        GenerationResult with at least one image.
    """
    tag = FALLBACK_PROVIDER

    if provider is not None:
        try:
            images = await _attempt_provider(provider, request)
        except ProviderError as e:
            logger.warning("Provider generation failed, using fallback: %s", e)
        else:
            if images:
                return GenerationResult(images=images, provider=provider.name)
            logger.info("Provider %s returned no usable images, using fallback", provider.name)

        tag = fallback_tag(provider.name)

    images = generate_fallback_images(request.prompt, request.size, request.count)
    return GenerationResult(images=images, provider=tag)


async def run_generation(
    prompt: Any,
    size: Any = None,
    count: Any = None,
    provider: ImageProvider | None = None,
) -> GenerationResult:
    """Validate raw input and generate images.

    Raises:
        InvalidPromptError: If the prompt is empty after trimming.
    """
    request = GenerationRequest.from_raw(prompt, size, count)
    logger.debug(
        "Generating %d image(s) at %s (provider=%s)",
        request.count,
        request.size.value,
        provider.name if provider else "none",
    )
    return await generate_images(request, provider)

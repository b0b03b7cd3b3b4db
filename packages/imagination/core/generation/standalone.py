"""Standalone single-image generation to disk.

Writes one provider image (``<name>.png``) or, when the provider is missing
or fails, the raw placeholder SVG (``<name>.svg``). Unexpected errors get one
more best-effort placeholder write before the run is reported as failed.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from imagination.core.generation.errors import ProviderError
from imagination.core.generation.models import FALLBACK_PROVIDER, fallback_tag
from imagination.core.generation.normalize import parse_size
from imagination.core.providers.base import ImageProvider
from imagination.core.providers.fetch import fetch_image_bytes
from imagination.core.synth.encoders import SVG_EXTENSION, to_raw, well_formed
from imagination.core.synth.placeholder import synthesize_svg

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "A dreamy futuristic city in the clouds, neon, cinematic"
DEFAULT_SIZE = "1024x1024"
PROVIDER_EXTENSION = "png"


class GenerationStatus(BaseModel):
    """Final status line of a standalone run.

    Attributes:
        status: ``"ok"`` or ``"error"``.
        provider: Provenance tag (ok only).
        path: Written file path (ok only).
        message: Failure description (error only).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: str
    provider: str | None = None
    path: str | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def timestamp_name(now: datetime | None = None, prefix: str = "sample") -> str:
    """Default output name, e.g. ``sample-20260117-093005`` (local time)."""
    now = now or datetime.now()
    return f"{prefix}-{now:%Y%m%d-%H%M%S}"


def write_image(output_path: Path, data: bytes) -> Path:
    """Write image bytes, creating parent directories.

    Args:
        output_path: Destination file.
        data: File contents.

    Returns:
        The written path.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), output_path)
    return output_path


def write_fallback(prompt: str, size: str, output_dir: Path, name: str) -> Path:
    """Synthesize the seed-0 placeholder and write it as ``<name>.svg``.

    Dimensions come from ``parse_size`` so any ``WxH`` is honored here, not
    only the request allow-list.
    """
    dims = parse_size(size)
    document = synthesize_svg(prompt, dims.width, dims.height)
    return write_image(output_dir / f"{name}.{SVG_EXTENSION}", to_raw(document))


async def _provider_bytes(
    provider: ImageProvider,
    prompt: str,
    size: str,
    http_client: httpx.AsyncClient | None,
) -> bytes | None:
    """Ask the provider for one image at the caller's size and resolve it to bytes."""
    images = await provider.generate(prompt, size, 1)
    if not images:
        return None
    return await fetch_image_bytes(images[0], provider=provider.name, http_client=http_client)


async def generate_one(
    prompt: str,
    size: str,
    name: str,
    output_dir: Path,
    provider: ImageProvider | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> GenerationStatus:
    """Generate one image and write it under ``output_dir``.

    Args:
        prompt: Prompt text (lone surrogates become U+FFFD).
        size: Size string (``WxH``), sent to the provider as given.
        name: Output file stem.
        output_dir: Directory to write into.
        provider: Optional remote provider.
        http_client: Client used to download URL results.

    Returns:
        GenerationStatus describing the outcome.
    """
    prompt = well_formed(prompt)
    tag = FALLBACK_PROVIDER
    try:
        output_dir.mkdir(parents=True, exist_ok=True)

        if provider is not None:
            data: bytes | None = None
            try:
                data = await _provider_bytes(provider, prompt, size, http_client)
            except ProviderError as e:
                logger.warning("Provider generation failed, using fallback: %s", e)

            if data:
                path = write_image(output_dir / f"{name}.{PROVIDER_EXTENSION}", data)
                return GenerationStatus(status="ok", provider=provider.name, path=str(path))
            tag = fallback_tag(provider.name)

        path = write_fallback(prompt, size, output_dir, name)
        return GenerationStatus(status="ok", provider=tag, path=str(path))

    except Exception:
        logger.exception("Generation failed; retrying placeholder write")
        if provider is not None:
            tag = fallback_tag(provider.name)

    try:
        path = write_fallback(prompt, size, output_dir, name)
    except Exception as e:
        logger.error("Placeholder write failed: %s", e)
        return GenerationStatus(status="error", message=str(e) or type(e).__name__)
    return GenerationStatus(status="ok", provider=tag, path=str(path))

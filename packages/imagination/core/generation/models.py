"""Value models for image generation requests and results.

Defines:
- ImageSize: Closed set of sizes the provider is asked for
- ImageDimensions: Parsed pixel dimensions (minimum 64 per side)
- GenerationRequest: Validated, clamped request
- GenerationResult: Ordered image references plus provenance tag
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from imagination.core.generation.errors import InvalidPromptError

MIN_DIMENSION = 64
MIN_COUNT = 1
MAX_COUNT = 4

# Provenance tag used when no provider is configured
FALLBACK_PROVIDER = "fallback"


def fallback_tag(provider_name: str) -> str:
    """Provenance tag for a provider attempt that ended in fallback."""
    return f"{provider_name}-{FALLBACK_PROVIDER}"


class ImageDimensions(BaseModel):
    """Pixel dimensions of a generated image.

    Attributes:
        width: Width in pixels (>= 64).
        height: Height in pixels (>= 64).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(ge=MIN_DIMENSION)
    height: int = Field(ge=MIN_DIMENSION)


class ImageSize(str, Enum):
    """Sizes accepted from callers.

    Anything outside this set is replaced by ``DEFAULT`` at the boundary.
    """

    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"

    @classmethod
    def default(cls) -> ImageSize:
        return cls.MEDIUM

    @classmethod
    def parse(cls, raw: Any) -> ImageSize:
        """Return the member whose value equals ``raw`` exactly, else the default.

        Example:
            >>> ImageSize.parse("256x256")
            <ImageSize.SMALL: '256x256'>
            >>> ImageSize.parse("banana")
            <ImageSize.MEDIUM: '512x512'>
        """
        if isinstance(raw, ImageSize):
            return raw
        if isinstance(raw, str):
            for member in cls:
                if member.value == raw:
                    return member
        return cls.default()

    @property
    def dimensions(self) -> ImageDimensions:
        width, height = (int(part) for part in self.value.split("x"))
        return ImageDimensions(width=width, height=height)


class GenerationRequest(BaseModel):
    """A validated generation request.

    Attributes:
        prompt: Trimmed, non-empty prompt text.
        size: Requested image size.
        count: Number of images, 1..4.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prompt: str = Field(min_length=1)
    size: ImageSize = ImageSize.MEDIUM
    count: int = Field(default=1, ge=MIN_COUNT, le=MAX_COUNT)

    @classmethod
    def from_raw(cls, prompt: Any, size: Any = None, count: Any = None) -> GenerationRequest:
        """Build a request from untrusted input.

        Size and count degrade to safe defaults; the prompt does not.

        Args:
            prompt: Raw prompt (non-strings count as empty).
            size: Raw size string.
            count: Raw image count.

        Returns:
            Validated GenerationRequest.

        Raises:
            InvalidPromptError: If the prompt is empty after trimming.
        """
        # Local import: normalize depends on this module
        from imagination.core.generation.normalize import normalize, normalize_prompt

        text = normalize_prompt(prompt)
        if not text:
            raise InvalidPromptError()

        image_size, image_count = normalize(size, count)
        return cls(prompt=text, size=image_size, count=image_count)


class GenerationResult(BaseModel):
    """Outcome of a generation request.

    Attributes:
        images: Image references (data URIs or URLs), in output order.
        provider: Provenance tag (provider name, ``fallback`` or
            ``<provider>-fallback``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    images: list[str] = Field(min_length=1)
    provider: str = Field(min_length=1)

    @property
    def used_fallback(self) -> bool:
        return self.provider == FALLBACK_PROVIDER or self.provider.endswith(
            f"-{FALLBACK_PROVIDER}"
        )

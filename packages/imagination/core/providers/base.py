"""Base types and protocol for image providers."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from imagination.core.generation.models import ImageSize

PNG_MIME_TYPE = "image/png"


class ProviderImage(BaseModel):
    """One item returned by an image provider.

    Providers return either inline base64 data or a remote URL (sometimes
    both, sometimes neither).

    Attributes:
        b64_json: Inline base64-encoded image bytes.
        url: Remote image URL.
        mime_type: MIME type of the inline data.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    b64_json: str | None = None
    url: str | None = None
    mime_type: str = PNG_MIME_TYPE

    def to_reference(self) -> str | None:
        """Normalize to a single image reference string.

        Returns:
            A data URI when inline data is present, else the URL, else None.
        """
        if self.b64_json:
            return f"data:{self.mime_type};base64,{self.b64_json}"
        if self.url:
            return self.url
        return None


class ImageProvider(Protocol):
    """Protocol for remote image-generation providers.

    Implementations make exactly one attempt per call and raise
    ``ProviderError`` for any failure; retries are not the provider's job.
    """

    @property
    def name(self) -> str:
        """Provider name, used as the provenance tag."""
        ...

    async def generate(self, prompt: str, size: ImageSize | str, n: int) -> list[ProviderImage]:
        """Generate ``n`` images for a prompt.

        Args:
            prompt: Prompt text.
            size: Requested image size (allow-listed member or raw ``"WxH"``).
            n: Number of images.

        Returns:
            Provider items in provider order (may be empty).

        Raises:
            ProviderError: On any provider failure.
        """
        ...

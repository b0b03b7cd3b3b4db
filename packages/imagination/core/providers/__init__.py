"""Remote image providers."""

from imagination.core.providers.base import ImageProvider, ProviderImage
from imagination.core.providers.factory import build_image_provider
from imagination.core.providers.fetch import fetch_image_bytes
from imagination.core.providers.openai import OpenAIImageProvider

__all__ = [
    "ImageProvider",
    "OpenAIImageProvider",
    "ProviderImage",
    "build_image_provider",
    "fetch_image_bytes",
]

"""Error taxonomy for image generation."""

from __future__ import annotations


class ImaginationError(Exception):
    """Base class for generation errors."""


class InvalidPromptError(ImaginationError):
    """Raised when a request carries no usable prompt.

    The request is rejected before any provider call or fallback synthesis.
    """

    def __init__(self, message: str = "Prompt is required.") -> None:
        super().__init__(message)
        self.message = message


class ProviderError(ImaginationError):
    """Raised when the image provider (or a follow-up fetch) fails.

    Always recovered locally by switching to fallback synthesis.

    Attributes:
        provider: Name of the provider that failed.
        message: Human-readable failure description.
    """

    def __init__(self, message: str, *, provider: str = "unknown") -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"

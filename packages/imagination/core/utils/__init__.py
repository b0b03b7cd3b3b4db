"""Shared utilities for Imagination."""

from imagination.core.utils.logging import configure_logging, get_logger
from imagination.core.utils.math import clamp

__all__ = [
    "clamp",
    "configure_logging",
    "get_logger",
]

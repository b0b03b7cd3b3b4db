"""HTTP API for Imagination."""

from imagination.api.app import create_app

__all__ = ["create_app"]

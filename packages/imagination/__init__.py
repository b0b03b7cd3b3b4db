"""Imagination: prompt-to-image generation with a deterministic fallback."""

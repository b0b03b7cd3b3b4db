"""Command-line interface for Imagination."""

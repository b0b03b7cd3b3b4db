"""Test suite for imagination.

Test Structure:
- unit/: Unit tests for individual components
  - synth/: Hashing, color mapping, SVG synthesis and encoders
  - generation/: Normalization, orchestration, standalone file output
  - providers/: OpenAI provider, byte fetching, provider factory
  - config/: Config loading and environment overrides
  - api/: HTTP endpoints
  - cli/: Command-line entry points
  - utils/: Logging utilities
- conftest.py: Shared fixtures and test configuration
"""

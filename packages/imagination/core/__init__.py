"""Core generation, synthesis, provider and configuration modules."""

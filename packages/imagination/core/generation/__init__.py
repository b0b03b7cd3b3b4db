"""Request normalization, orchestration and standalone generation."""

from imagination.core.generation.errors import (
    ImaginationError,
    InvalidPromptError,
    ProviderError,
)
from imagination.core.generation.models import (
    FALLBACK_PROVIDER,
    GenerationRequest,
    GenerationResult,
    ImageDimensions,
    ImageSize,
    fallback_tag,
)
from imagination.core.generation.normalize import (
    normalize,
    normalize_prompt,
    parse_count,
    parse_size,
)
from imagination.core.generation.orchestrator import (
    generate_fallback_images,
    generate_images,
    run_generation,
)

__all__ = [
    "FALLBACK_PROVIDER",
    "GenerationRequest",
    "GenerationResult",
    "ImageDimensions",
    "ImageSize",
    "ImaginationError",
    "InvalidPromptError",
    "ProviderError",
    "fallback_tag",
    "generate_fallback_images",
    "generate_images",
    "normalize",
    "normalize_prompt",
    "parse_count",
    "parse_size",
    "run_generation",
]

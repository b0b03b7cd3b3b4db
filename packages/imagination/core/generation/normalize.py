"""Normalization of untrusted request parameters.

Nothing in this module raises: malformed input degrades to a safe default.
"""

from __future__ import annotations

import math
import re
from typing import Any

from imagination.core.generation.models import (
    MAX_COUNT,
    MIN_COUNT,
    MIN_DIMENSION,
    ImageDimensions,
    ImageSize,
)
from imagination.core.synth.encoders import well_formed
from imagination.core.utils.math import clamp

_SIZE_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")
_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")

DEFAULT_DIMENSIONS = ImageDimensions(width=512, height=512)
DEFAULT_COUNT = 1

# ECMAScript WhiteSpace and LineTerminator code points
PROMPT_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _parse_int(raw: Any) -> int | None:
    """Parse a leading integer the way form/JSON input is usually read.

    ``"3"``, ``" 2 "``, ``"3.7"`` and ``"12abc"`` all parse; ``"abc"``, NaN,
    infinities, booleans and ``None`` do not.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INT_PATTERN.match(raw)
        return int(match.group(1)) if match else None
    return None


def normalize_prompt(raw: Any) -> str:
    """Trim a raw prompt, treating non-strings as empty.

    Lone surrogates are replaced with U+FFFD so the prompt can always be
    encoded. Only ECMAScript whitespace is trimmed: U+FEFF is removed, while
    control separators such as ``\\x1c`` and U+0085 are kept.
    """
    if not isinstance(raw, str):
        return ""
    return well_formed(raw).strip(PROMPT_WHITESPACE)


def parse_count(raw: Any) -> int:
    """Parse and clamp an image count to ``[1, 4]``.

    Example:
        >>> parse_count("99")
        4
        >>> parse_count("0")
        1
        >>> parse_count("many")
        1
    """
    value = _parse_int(raw)
    if value is None:
        return DEFAULT_COUNT
    return clamp(value, MIN_COUNT, MAX_COUNT)


def normalize_size(raw: Any) -> ImageSize:
    """Map a raw size string onto the allowed sizes."""
    return ImageSize.parse(raw)


def normalize(raw_size: Any, raw_count: Any) -> tuple[ImageSize, int]:
    """Normalize size and count together.

    Args:
        raw_size: Untrusted size value.
        raw_count: Untrusted count value.

    Returns:
        (size, count) with size in the allow-list and count in ``[1, 4]``.
    """
    return normalize_size(raw_size), parse_count(raw_count)


def parse_size(raw: Any) -> ImageDimensions:
    """Parse a ``"WxH"`` string into dimensions.

    Each side is raised to at least 64; there is no upper bound. Anything not
    matching ``digits x digits`` yields 512x512.

    Example:
        >>> parse_size("300x20")
        ImageDimensions(width=300, height=64)
    """
    if isinstance(raw, ImageSize):
        return raw.dimensions
    if not isinstance(raw, str):
        return DEFAULT_DIMENSIONS
    match = _SIZE_PATTERN.fullmatch(raw)
    if not match:
        return DEFAULT_DIMENSIONS
    return ImageDimensions(
        width=max(MIN_DIMENSION, int(match.group(1))),
        height=max(MIN_DIMENSION, int(match.group(2))),
    )

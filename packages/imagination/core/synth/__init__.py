"""Deterministic fallback image synthesis."""

from imagination.core.synth.color import hsl_to_hex
from imagination.core.synth.encoders import (
    SvgEncoding,
    encode_svg,
    to_data_uri,
    to_raw,
    well_formed,
)
from imagination.core.synth.hashing import hash_prompt
from imagination.core.synth.placeholder import ColorPair, color_pair, escape_text, synthesize_svg

__all__ = [
    "ColorPair",
    "SvgEncoding",
    "color_pair",
    "encode_svg",
    "escape_text",
    "hash_prompt",
    "hsl_to_hex",
    "synthesize_svg",
    "to_data_uri",
    "to_raw",
    "well_formed",
]

"""Deterministic placeholder image synthesis.

Builds a self-contained SVG document for a prompt: a diagonal two-color
gradient background, a translucent rounded panel, and the prompt text
centered on top. Colors are derived from a hash of ``"{prompt}-{seed}"`` so
that the same inputs always produce the same document, while different seeds
of one prompt get different base hues.

Synthesis never raises for text input and positive dimensions; it is the last
line of defense when the image provider is unavailable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from imagination.core.synth.color import hsl_to_hex
from imagination.core.synth.hashing import hash_prompt, seed_key

HUE_OFFSET_DEG = 60

# Fixed saturation/lightness; only the hue varies per prompt and seed
_PRIMARY_SATURATION = 70
_PRIMARY_LIGHTNESS = 60
_SECONDARY_SATURATION = 70
_SECONDARY_LIGHTNESS = 40

PANEL_INSET = 16
PANEL_RADIUS = 12
MIN_FONT_SIZE = 14
FONT_SIZE_DIVISOR = 16

_FONT_FAMILY = (
    "system-ui, -apple-system, Segoe UI, Roboto, Ubuntu, Cantarell, Noto Sans, sans-serif"
)

_SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">
  <defs>
    <linearGradient id="g" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0%" stop-color="{bg1}"/>
      <stop offset="100%" stop-color="{bg2}"/>
    </linearGradient>
  </defs>
  <rect x="0" y="0" width="100%" height="100%" fill="url(#g)"/>
  <g>
    <rect x="{inset}" y="{inset}" rx="{radius}" ry="{radius}" width="{panel_width}" height="{panel_height}" fill="rgba(255,255,255,0.25)" />
    <text x="50%" y="50%" dominant-baseline="middle" text-anchor="middle" font-family="{font_family}" font-size="{font_size}" fill="#111" opacity="0.9" style="paint-order: stroke; stroke: rgba(255,255,255,0.65); stroke-width: 6px;">
      {text}
    </text>
  </g>
</svg>"""


class ColorPair(BaseModel):
    """Gradient colors derived from a prompt and seed.

    Attributes:
        hue_a: Base hue in degrees (0..359).
        hue_b: Secondary hue, always ``(hue_a + 60) % 360``.
        bg1: Gradient start color (hex).
        bg2: Gradient end color (hex).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hue_a: int = Field(ge=0, lt=360)
    hue_b: int = Field(ge=0, lt=360)
    bg1: str
    bg2: str


def color_pair(prompt: str, seed: int = 0) -> ColorPair:
    """Derive the gradient colors for a prompt/seed pair.

    Args:
        prompt: Prompt text.
        seed: Per-image seed.

    Returns:
        ColorPair with a fixed 60 degree hue separation.
    """
    hue_a = hash_prompt(seed_key(prompt, seed)) % 360
    hue_b = (hue_a + HUE_OFFSET_DEG) % 360
    return ColorPair(
        hue_a=hue_a,
        hue_b=hue_b,
        bg1=hsl_to_hex(hue_a, _PRIMARY_SATURATION, _PRIMARY_LIGHTNESS),
        bg2=hsl_to_hex(hue_b, _SECONDARY_SATURATION, _SECONDARY_LIGHTNESS),
    )


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for embedding in SVG text content.

    ``&`` is replaced first so already-produced entities are not escaped twice.
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def font_size_for(width: int, height: int) -> float:
    """Font size scaled to the shorter side, never below 14."""
    return max(MIN_FONT_SIZE, min(width, height) / FONT_SIZE_DIVISOR)


def _format_number(value: float) -> str:
    # Whole numbers render without a trailing ".0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def synthesize_svg(prompt: str, width: int, height: int, seed: int = 0) -> str:
    """Build the placeholder SVG document.

    Args:
        prompt: Prompt text (escaped before embedding).
        width: Image width in pixels.
        height: Image height in pixels.
        seed: Per-image seed used to diversify colors.

    Returns:
        Complete SVG document as a string.
    """
    colors = color_pair(prompt, seed)
    return _SVG_TEMPLATE.format(
        width=width,
        height=height,
        bg1=colors.bg1,
        bg2=colors.bg2,
        inset=PANEL_INSET,
        radius=PANEL_RADIUS,
        panel_width=width - 2 * PANEL_INSET,
        panel_height=height - 2 * PANEL_INSET,
        font_family=_FONT_FAMILY,
        font_size=_format_number(font_size_for(width, height)),
        text=escape_text(prompt),
    )

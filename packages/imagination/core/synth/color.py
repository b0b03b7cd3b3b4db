"""HSL to RGB hex conversion."""

from __future__ import annotations

import math

# Channel offsets for red, green, blue in the HSL piecewise formula
_CHANNEL_OFFSETS = (0, 8, 4)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert an HSL color to a ``#rrggbb`` hex string.

    Args:
        hue: Hue in degrees (0..359). Callers wrap hue before calling.
        saturation: Saturation percentage (0..100).
        lightness: Lightness percentage (0..100).

    Returns:
        Lowercase, zero-padded hex color, e.g. ``"#e05252"``.

    Example:
        >>> hsl_to_hex(0, 100, 50)
        '#ff0000'
    """
    s = saturation / 100
    light = lightness / 100
    a = s * min(light, 1 - light)

    channels = []
    for n in _CHANNEL_OFFSETS:
        k = (n + hue / 30) % 12
        value = light - a * max(-1.0, min(k - 3, 9 - k, 1.0))
        channels.append(_round_half_up(255 * value))

    return "#" + "".join(f"{c:02x}" for c in channels)

"""Polynomial string hash used to seed fallback image colors.

Reproduces the classic ``hash * 31 + code`` string hash with signed 32-bit
wraparound, iterating over UTF-16 code units so that non-BMP characters hash
as surrogate pairs.
"""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def to_int32(value: int) -> int:
    """Truncate an arbitrary-precision integer to signed 32-bit range.

    Args:
        value: Integer to truncate.

    Returns:
        Two's-complement signed 32-bit interpretation of the low 32 bits.

    Example:
        >>> to_int32(2**31)
        -2147483648
        >>> to_int32(-1)
        -1
    """
    value &= _UINT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return value


def utf16_code_units(text: str) -> list[int]:
    """Split text into UTF-16 code units.

    Args:
        text: Input text.

    Returns:
        Code unit values (0..65535) in order.
    """
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def hash_prompt(text: str) -> int:
    """Hash text to a non-negative integer.

    Each step computes ``acc * 31 + code`` and truncates to signed 32-bit
    before the next character, so the result matches the reference hash for
    any input length.

    Args:
        text: Text to hash (typically ``"{prompt}-{seed}"``).

    Returns:
        Absolute value of the final signed 32-bit accumulator.
    """
    acc = 0
    for code in utf16_code_units(text):
        acc = to_int32(acc * 31 + code)
    return abs(acc)


def seed_key(prompt: str, seed: int) -> str:
    """Build the hash input for a prompt/seed pair."""
    return f"{prompt}-{seed}"

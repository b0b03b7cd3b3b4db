"""Tests for the 32-bit polynomial prompt hash."""

from __future__ import annotations

import pytest

from imagination.core.synth.hashing import hash_prompt, seed_key, to_int32, utf16_code_units


def _reference_hash(text: str) -> int:
    """Unsigned accumulation, sign-converted once at the end."""
    acc = 0
    for code in utf16_code_units(text):
        acc = (acc * 31 + code) % (1 << 32)
    if acc >= 1 << 31:
        acc -= 1 << 32
    return abs(acc)


class TestToInt32:
    def test_in_range_values_unchanged(self) -> None:
        assert to_int32(0) == 0
        assert to_int32(123) == 123
        assert to_int32(-123) == -123
        assert to_int32(2**31 - 1) == 2**31 - 1

    def test_wraps_past_max(self) -> None:
        assert to_int32(2**31) == -(2**31)
        assert to_int32(2**32) == 0
        assert to_int32(2**32 + 5) == 5


class TestHashPrompt:
    def test_empty_string(self) -> None:
        assert hash_prompt("") == 0

    def test_single_character(self) -> None:
        assert hash_prompt("a") == 97

    def test_two_characters(self) -> None:
        assert hash_prompt("ab") == 97 * 31 + 98

    def test_known_value(self) -> None:
        assert hash_prompt("hello") == 99162322

    def test_min_int_maps_to_positive(self) -> None:
        # Classic string whose 32-bit hash is exactly -2**31
        assert hash_prompt("polygenelubricants") == 2**31

    def test_never_negative(self) -> None:
        for text in ["", "cat", "a much longer prompt " * 20, "éè", "\U0001f600"]:
            assert hash_prompt(text) >= 0

    def test_deterministic(self) -> None:
        assert hash_prompt("neon city-3") == hash_prompt("neon city-3")

    def test_surrogate_pairs_hash_as_two_units(self) -> None:
        # U+1F600 is D83D DE00 in UTF-16
        assert utf16_code_units("\U0001f600") == [0xD83D, 0xDE00]
        assert hash_prompt("\U0001f600") == 0xD83D * 31 + 0xDE00

    @pytest.mark.parametrize(
        "text",
        [
            "fox-0",
            "A dreamy futuristic city in the clouds, neon, cinematic-0",
            "x" * 500,
            "日本語のプロンプト-2",
        ],
    )
    def test_matches_unsigned_reference(self, text: str) -> None:
        assert hash_prompt(text) == _reference_hash(text)


def test_seed_key_format() -> None:
    assert seed_key("fox", 0) == "fox-0"
    assert seed_key("a-b", 12) == "a-b-12"

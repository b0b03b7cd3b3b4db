"""Tests for deterministic placeholder SVG synthesis."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

import pytest

from imagination.core.synth.color import hsl_to_hex
from imagination.core.synth.hashing import hash_prompt
from imagination.core.synth.placeholder import (
    color_pair,
    escape_text,
    font_size_for,
    synthesize_svg,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def _parse(document: str) -> ET.Element:
    return ET.fromstring(document.encode("utf-8"))


class TestColorPair:
    def test_hues_follow_hash(self) -> None:
        pair = color_pair("fox", 2)
        assert pair.hue_a == hash_prompt("fox-2") % 360

    @pytest.mark.parametrize("prompt", ["fox", "cat", "", "neon city", "<b>&hi</b>"])
    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_hue_offset_is_sixty_degrees(self, prompt: str, seed: int) -> None:
        pair = color_pair(prompt, seed)
        assert pair.hue_b == (pair.hue_a + 60) % 360

    def test_colors_use_fixed_saturation_and_lightness(self) -> None:
        pair = color_pair("cat", 1)
        assert pair.bg1 == hsl_to_hex(pair.hue_a, 70, 60)
        assert pair.bg2 == hsl_to_hex(pair.hue_b, 70, 40)

    def test_is_immutable(self) -> None:
        pair = color_pair("cat")
        with pytest.raises(Exception):
            pair.hue_a = 5  # type: ignore[misc]


class TestEscapeText:
    def test_escapes_markup(self) -> None:
        assert escape_text("<b>&hi</b>") == "&lt;b&gt;&amp;hi&lt;/b&gt;"

    def test_ampersand_first_avoids_double_escape(self) -> None:
        assert escape_text("&lt;") == "&amp;lt;"

    def test_plain_text_unchanged(self) -> None:
        assert escape_text("a dreamy city") == "a dreamy city"


class TestFontSize:
    def test_scales_with_shorter_side(self) -> None:
        assert font_size_for(512, 512) == 32
        assert font_size_for(1024, 256) == 16

    def test_minimum_size(self) -> None:
        assert font_size_for(64, 64) == 14
        assert font_size_for(100, 5000) == 14


class TestSynthesizeSvg:
    def test_deterministic(self) -> None:
        first = synthesize_svg("a fox in the snow", 512, 512, 3)
        second = synthesize_svg("a fox in the snow", 512, 512, 3)
        assert first == second

    def test_seed_changes_colors(self) -> None:
        prompt = "a fox in the snow"
        if hash_prompt(f"{prompt}-0") % 360 == hash_prompt(f"{prompt}-1") % 360:
            pytest.skip("seeds collide on hue for this prompt")
        assert synthesize_svg(prompt, 512, 512, 0) != synthesize_svg(prompt, 512, 512, 1)

    def test_is_well_formed_svg(self) -> None:
        root = _parse(synthesize_svg("hello", 256, 256))
        assert root.tag == f"{SVG_NS}svg"
        assert root.attrib["width"] == "256"
        assert root.attrib["height"] == "256"
        assert root.attrib["viewBox"] == "0 0 256 256"

    def test_starts_with_xml_declaration(self) -> None:
        document = synthesize_svg("hello", 256, 256)
        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg ')

    def test_gradient_stops_use_color_pair(self) -> None:
        pair = color_pair("hello", 0)
        root = _parse(synthesize_svg("hello", 256, 256, 0))
        stops = root.findall(f".//{SVG_NS}stop")
        assert [s.attrib["offset"] for s in stops] == ["0%", "100%"]
        assert [s.attrib["stop-color"] for s in stops] == [pair.bg1, pair.bg2]

        gradient = root.find(f".//{SVG_NS}linearGradient")
        assert gradient is not None
        assert (gradient.attrib["x1"], gradient.attrib["y1"]) == ("0", "0")
        assert (gradient.attrib["x2"], gradient.attrib["y2"]) == ("1", "1")

    def test_panel_is_inset(self) -> None:
        root = _parse(synthesize_svg("hello", 300, 200))
        panel = root.find(f"{SVG_NS}g/{SVG_NS}rect")
        assert panel is not None
        assert panel.attrib["x"] == "16"
        assert panel.attrib["y"] == "16"
        assert panel.attrib["rx"] == "12"
        assert panel.attrib["width"] == "268"
        assert panel.attrib["height"] == "168"
        assert panel.attrib["fill"] == "rgba(255,255,255,0.25)"

    def test_text_is_centered_with_prompt(self) -> None:
        root = _parse(synthesize_svg("a quiet lake", 512, 512))
        text = root.find(f"{SVG_NS}g/{SVG_NS}text")
        assert text is not None
        assert text.attrib["x"] == "50%"
        assert text.attrib["y"] == "50%"
        assert text.attrib["text-anchor"] == "middle"
        assert text.attrib["dominant-baseline"] == "middle"
        assert text.attrib["font-size"] == "32"
        assert text.attrib["fill"] == "#111"
        assert (text.text or "").strip() == "a quiet lake"

    def test_fractional_font_size(self) -> None:
        document = synthesize_svg("x", 1000, 1000)
        assert 'font-size="62.5"' in document

    def test_prompt_is_escaped(self) -> None:
        document = synthesize_svg("<b>&hi</b>", 512, 512)
        assert "&lt;b&gt;&amp;hi&lt;/b&gt;" in document
        assert "<b>" not in document
        assert "</b>" not in document
        # Every remaining "&" starts an entity
        assert not re.search(r"&(?!amp;|lt;|gt;)", document)
        text = _parse(document).find(f"{SVG_NS}g/{SVG_NS}text")
        assert text is not None
        assert (text.text or "").strip() == "<b>&hi</b>"

    def test_long_prompt_does_not_raise(self) -> None:
        document = synthesize_svg("word " * 2000, 64, 64)
        assert document.endswith("</svg>")

"""Unit tests for color helpers."""

import pytest

from .lib import (
    BLACK,
    WHITE,
    contrast_color,
    hex_to_argb,
    is_hex_color,
    luminance,
    normalize_hex,
    parse_hex,
)


class TestParseHex:
    """Tests for hex parsing."""

    @pytest.mark.unit
    def test_valid(self):
        assert parse_hex("#2196F3") == (0x21, 0x96, 0xF3)
        assert parse_hex("#ffffff") == (255, 255, 255)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", [None, "", "2196F3", "#FFF", "#GG0000", "#2196F3FF", 42, "blue"]
    )
    def test_malformed(self, value):
        assert parse_hex(value) is None
        assert not is_hex_color(value)

    @pytest.mark.unit
    def test_surrounding_whitespace_tolerated(self):
        assert parse_hex("  #000000 ") == (0, 0, 0)


class TestNormalizeAndArgb:
    """Tests for canonical forms and Flutter literals."""

    @pytest.mark.unit
    def test_normalize_uppercases(self):
        assert normalize_hex("#d1d5db") == "#D1D5DB"

    @pytest.mark.unit
    def test_normalize_malformed_is_black(self):
        assert normalize_hex("not-a-color") == BLACK

    @pytest.mark.unit
    def test_argb_forces_opaque_alpha(self):
        assert hex_to_argb("#2196F3") == "0xFF2196F3"
        assert hex_to_argb("#e0e0e0") == "0xFFE0E0E0"

    @pytest.mark.unit
    def test_argb_fallback_black(self):
        assert hex_to_argb(None) == "0xFF000000"
        assert hex_to_argb("#12") == "0xFF000000"


class TestContrast:
    """Tests for the luminance based contrast rule."""

    @pytest.mark.unit
    def test_blue_gets_white_text(self):
        assert luminance("#2196F3") == pytest.approx(0.4926, abs=1e-3)
        assert contrast_color("#2196F3") == WHITE

    @pytest.mark.unit
    def test_white_gets_black_text(self):
        assert contrast_color("#FFFFFF") == BLACK

    @pytest.mark.unit
    def test_threshold_boundary(self):
        """Greys either side of 0.5 land on opposite sides."""
        assert contrast_color("#7F7F7F") == WHITE
        assert contrast_color("#808080") == BLACK

    @pytest.mark.unit
    def test_malformed_treated_as_black(self):
        assert contrast_color("oops") == WHITE

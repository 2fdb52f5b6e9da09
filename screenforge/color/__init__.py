"""Hex color parsing, Flutter ARGB literals and text contrast selection."""

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

__all__ = [
    "BLACK",
    "WHITE",
    "contrast_color",
    "hex_to_argb",
    "is_hex_color",
    "luminance",
    "normalize_hex",
    "parse_hex",
]

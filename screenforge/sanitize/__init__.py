"""Sanitizer - coerce untrusted element batches into the canonical IR."""

from .lib import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    DEFAULT_X,
    DEFAULT_Y,
    DISALLOWED_KEYS,
    coerce_bool,
    coerce_number,
    coerce_properties,
    coerce_structured,
    coerce_text,
    fit_axis,
    sanitize,
    sanitize_element,
)

__all__ = [
    "DISALLOWED_KEYS",
    "DEFAULT_X",
    "DEFAULT_Y",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "coerce_number",
    "coerce_bool",
    "coerce_text",
    "coerce_structured",
    "coerce_properties",
    "fit_axis",
    "sanitize_element",
    "sanitize",
]

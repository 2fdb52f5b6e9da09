"""Validation module - static checks on screens before export."""

from .lib import (
    ValidationError,
    is_valid,
    validate_element,
    validate_screen,
    validate_screens,
)

__all__ = [
    "ValidationError",
    "validate_element",
    "validate_screen",
    "validate_screens",
    "is_valid",
]

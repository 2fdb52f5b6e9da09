"""Color helpers shared by the preview renderer and the code generator.

Colors travel through the IR as ``#RRGGBB`` strings. Anything that does not
parse as such is treated as opaque black, both when converting to a Flutter
``Color`` literal and when choosing a contrasting text color.
"""

import re
from typing import Any

BLACK = "#000000"
WHITE = "#FFFFFF"

_HEX_PATTERN = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

# Luminance above this threshold gets black text
CONTRAST_THRESHOLD = 0.5


def parse_hex(value: Any) -> tuple[int, int, int] | None:
    """Parse a ``#RRGGBB`` string into 0-255 channel values.

    Returns:
        ``(r, g, b)`` or None when the value is not a six-digit hex color.
    """
    if not isinstance(value, str):
        return None
    match = _HEX_PATTERN.match(value.strip())
    if match is None:
        return None
    red, green, blue = (int(channel, 16) for channel in match.groups())
    return red, green, blue


def is_hex_color(value: Any) -> bool:
    """Check whether a value is a well-formed ``#RRGGBB`` string."""
    return parse_hex(value) is not None


def normalize_hex(value: Any) -> str:
    """Return the canonical upper-case form of a hex color.

    Malformed or missing values normalize to black.
    """
    rgb = parse_hex(value)
    if rgb is None:
        return BLACK
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def hex_to_argb(value: Any) -> str:
    """Convert a hex color to a 32-bit ARGB literal for ``Color(...)``.

    Alpha is always fully opaque.

    Example:
        >>> hex_to_argb("#2196f3")
        '0xFF2196F3'
        >>> hex_to_argb("blue")
        '0xFF000000'
    """
    return "0xFF" + normalize_hex(value)[1:]


def luminance(value: Any) -> float:
    """Perceived brightness of a hex color in ``[0, 1]``."""
    r, g, b = parse_hex(value) or (0, 0, 0)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def contrast_color(value: Any) -> str:
    """Pick white or black text for the given background color.

    Example:
        >>> contrast_color("#2196F3")
        '#FFFFFF'
        >>> contrast_color("#FFFFFF")
        '#000000'
    """
    return BLACK if luminance(value) > CONTRAST_THRESHOLD else WHITE

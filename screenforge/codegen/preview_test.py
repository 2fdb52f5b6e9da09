"""Tests that generated Flutter code draws what the structural preview shows."""

import re
from dataclasses import astuple

import pytest

from screenforge.color import hex_to_argb
from screenforge.ir import Screen, create_element
from screenforge.render import DARK_THEME, LIGHT_THEME, render
from screenforge.schema import ComponentType

from .lib import dart_string, generate

_HEX = re.compile(r"#[0-9A-Fa-f]{6}")

# Colors the preview uses for editor chrome; the app leaves these to Flutter.
_CHROME_COLORS = set(astuple(LIGHT_THEME)) | set(astuple(DARK_THEME))

_OVERRIDES = {
    "defaults": {},
    "malformed_structures": {
        "options": "{not json",
        "columns": "[1, 2]",
        "data": "garbage",
    },
    "invalid_icons": {
        "name": "Arrow Back",
        "icon": "Not-An-Icon",
        "hasIcon": True,
        "data": '[{"title": "A", "icon": "Not-An-Icon"}]',
    },
}


def _preview_and_code(component_type: ComponentType, overrides: dict, dark_mode: bool):
    element = create_element(component_type, 0, 0, element_id="el")
    element.properties.update(overrides)
    preview = render(element, dark_mode=dark_mode)
    code = generate(
        [Screen(id="only", name="Only", elements=[element])], dark_mode=dark_mode
    )
    return preview, code


def _element_colors(preview) -> set[str]:
    colors = set()
    for node in preview.walk():
        for value in node.style.values():
            colors.update(color.upper() for color in _HEX.findall(str(value)))
    return colors - _CHROME_COLORS


@pytest.mark.unit
@pytest.mark.parametrize("dark_mode", [False, True], ids=["light", "dark"])
@pytest.mark.parametrize(
    "overrides", list(_OVERRIDES.values()), ids=list(_OVERRIDES)
)
@pytest.mark.parametrize("component_type", list(ComponentType))
class TestPreviewMatchesGeneratedCode:
    """Each element renders and generates with the same icons, labels and colors."""

    def test_icons(self, component_type, overrides, dark_mode):
        preview, code = _preview_and_code(component_type, overrides, dark_mode)
        for node in preview.walk():
            if node.tag == "icon":
                assert f"Icons.{node.attrs['name']}" in code

    def test_option_labels(self, component_type, overrides, dark_mode):
        preview, code = _preview_and_code(component_type, overrides, dark_mode)
        for node in preview.walk():
            if node.tag == "option":
                assert dart_string(node.text) in code

    def test_table_cells(self, component_type, overrides, dark_mode):
        """Column titles and cell texts, fallbacks included, match."""
        preview, code = _preview_and_code(component_type, overrides, dark_mode)
        for node in preview.walk():
            if node.tag in ("th", "td"):
                assert f"Text({dart_string(node.text)})" in code

    def test_colors(self, component_type, overrides, dark_mode):
        preview, code = _preview_and_code(component_type, overrides, dark_mode)
        for color in _element_colors(preview):
            assert hex_to_argb(color) in code, color


class TestChromeColors:
    """Tests for the chrome palette used above."""

    @pytest.mark.unit
    def test_chat_bubble_is_not_chrome(self):
        """Bubble colors must be checked, so no theme may reuse them."""
        preview, _ = _preview_and_code(
            ComponentType.CHAT_MESSAGE, {"isUser": False}, dark_mode=True
        )
        bubble = next(n for n in preview.walk() if n.tag == "bubble")
        assert bubble.style["backgroundColor"] not in _CHROME_COLORS

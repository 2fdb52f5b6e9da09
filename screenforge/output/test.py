"""Tests for output module."""

import pytest

from screenforge.ir import Screen, create_element
from screenforge.output import (
    DesignOutput,
    OutputGenerator,
    format_design_tree,
    format_preview_tree,
    format_screen_tree,
)
from screenforge.render import node, render
from screenforge.schema import ComponentType


class TestFormatScreenTree:
    """Tests for format_screen_tree function."""

    @pytest.mark.unit
    def test_empty_screen(self):
        """Test formatting a screen without elements."""
        result = format_screen_tree(Screen(id="home", name="Home"))
        assert result == "Home [home, 0 elements]"

    @pytest.mark.unit
    def test_elements_in_order(self, sample_screen):
        """Test elements are listed in stacking order."""
        lines = format_screen_tree(sample_screen).splitlines()
        assert lines[0] == "Login [login, 4 elements]"
        assert lines[1].startswith("├── header [card, ")
        assert lines[-1].startswith("└── submit [button, ")

    @pytest.mark.unit
    def test_geometry_and_navigation(self):
        """Test geometry and navigation targets are shown."""
        button = create_element(ComponentType.BUTTON, 120, 420, element_id="go")
        button.properties["navigateTo"] = "home"
        result = format_screen_tree(Screen(id="s", name="S", elements=[button]))
        assert "S [s, 1 element]" in result
        assert "└── go [button, 120x40 @ (120, 420), -> home]" in result

    @pytest.mark.unit
    def test_design_tree(self, sample_screens):
        """Test screens are separated by blank lines."""
        result = format_design_tree(sample_screens)
        assert result.count("\n\n") == 1
        assert result.index("Login [") < result.index("Home [")


class TestFormatPreviewTree:
    """Tests for format_preview_tree function."""

    @pytest.mark.unit
    def test_single_node(self):
        assert format_preview_tree(node("box")) == "box"

    @pytest.mark.unit
    def test_nested_tree(self):
        """Test connectors and prefixes for nested nodes."""
        tree = node(
            "box",
            node("card", node("text", text="Title")),
            node("icon", name="star"),
        )
        assert format_preview_tree(tree) == (
            "box\n"
            "├── card\n"
            '│   └── text "Title"\n'
            "└── icon {name=star}"
        )

    @pytest.mark.unit
    def test_rendered_button(self):
        element = create_element(ComponentType.BUTTON, 0, 0)
        element.properties.update(text="Login", navigateTo="home")
        result = format_preview_tree(render(element))
        assert result.startswith("button {navigateTo=home}")
        assert '├── text "Login"' in result
        assert "└── indicator {name=chevron_right}" in result


class TestOutputGenerator:
    """Tests for OutputGenerator class."""

    @pytest.mark.unit
    def test_generate(self, sample_screens):
        output = OutputGenerator().generate(sample_screens)
        assert isinstance(output, DesignOutput)
        assert "class LoginScreen extends StatefulWidget" in output.dart_code
        assert "Login [login" in output.text_tree
        assert output.warnings == []

    @pytest.mark.unit
    def test_dark_and_title(self, sample_screens):
        output = OutputGenerator(dark_mode=True, app_title="Demo").generate(
            sample_screens
        )
        assert "title: 'Demo'," in output.dart_code
        assert "Brightness.dark" in output.dart_code

    @pytest.mark.unit
    def test_warnings_passed_through(self):
        button = create_element(ComponentType.BUTTON, 0, 0, element_id="b")
        button.properties["navigateTo"] = "missing"
        output = OutputGenerator().generate(
            [Screen(id="s", name="S", elements=[button])]
        )
        assert [w.value for w in output.warnings] == ["missing"]

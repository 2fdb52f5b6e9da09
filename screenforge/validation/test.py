"""Unit tests for validation module."""

import pytest

from screenforge.ir import DesignElement, Screen, create_element
from screenforge.schema import ComponentType, get_default_properties
from screenforge.validation import (
    ValidationError,
    is_valid,
    validate_element,
    validate_screen,
    validate_screens,
)


def _button(element_id: str, navigate_to: str = "") -> DesignElement:
    element = create_element(ComponentType.BUTTON, 20, 20, element_id=element_id)
    element.properties["navigateTo"] = navigate_to
    return element


class TestValidateElement:
    """Tests for validate_element function."""

    @pytest.mark.unit
    def test_placed_element_valid(self):
        """Elements created by placement pass validation."""
        assert validate_element(create_element(ComponentType.CARD, 30, 30)) == []

    @pytest.mark.unit
    def test_off_canvas(self):
        element = DesignElement(
            id="far",
            type=ComponentType.BUTTON,
            x=-5,
            y=0,
            width=120,
            height=40,
            properties=get_default_properties(ComponentType.BUTTON),
        )
        errors = validate_element(element)
        assert [e.error_type for e in errors] == ["out_of_bounds"]

    @pytest.mark.unit
    def test_overhang(self):
        element = DesignElement(
            id="wide",
            type=ComponentType.CARD,
            x=100,
            y=0,
            width=300,
            height=200,
            properties=get_default_properties(ComponentType.CARD),
        )
        errors = validate_element(element)
        assert errors[0].error_type == "out_of_bounds"
        assert "400" in errors[0].message

    @pytest.mark.unit
    def test_below_floor(self):
        element = DesignElement(
            id="tiny",
            type=ComponentType.BUTTON,
            x=0,
            y=0,
            width=10,
            height=10,
            properties=get_default_properties(ComponentType.BUTTON),
        )
        errors = validate_element(element)
        assert [e.error_type for e in errors] == ["below_min_size"]

    @pytest.mark.unit
    def test_missing_properties(self):
        element = DesignElement(
            id="bare", type=ComponentType.ICON, x=0, y=0, width=24, height=24
        )
        errors = validate_element(element)
        assert errors == [
            ValidationError(
                element_id="bare",
                message="Missing properties: color, name, size",
                error_type="missing_properties",
            )
        ]


class TestValidateScreen:
    """Tests for validate_screen function."""

    @pytest.mark.unit
    def test_duplicate_element_ids(self):
        screen = Screen(
            id="home", name="Home", elements=[_button("dupe"), _button("dupe")]
        )
        errors = validate_screen(screen)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert "dupe" in errors[0].message

    @pytest.mark.unit
    def test_navigation_unchecked_without_screen_ids(self):
        screen = Screen(id="home", name="Home", elements=[_button("b", "nowhere")])
        assert validate_screen(screen) == []

    @pytest.mark.unit
    def test_unresolved_navigation(self):
        screen = Screen(id="home", name="Home", elements=[_button("b", "nowhere")])
        errors = validate_screen(screen, ["home"])
        assert [e.error_type for e in errors] == ["unresolved_navigation"]


class TestValidateScreens:
    """Tests for whole-design validation."""

    @pytest.mark.unit
    def test_valid_design(self):
        screens = [
            Screen(id="home", name="Home", elements=[_button("go", "settings")]),
            Screen(id="settings", name="Settings"),
        ]
        assert validate_screens(screens) == []
        assert is_valid(screens)

    @pytest.mark.unit
    def test_duplicate_screen_ids(self):
        screens = [Screen(id="home", name="A"), Screen(id="home", name="B")]
        errors = validate_screens(screens)
        assert [e.error_type for e in errors] == ["duplicate_screen_id"]
        assert not is_valid(screens)

    @pytest.mark.unit
    def test_element_ids_may_repeat_across_screens(self):
        screens = [
            Screen(id="a", name="A", elements=[_button("element-0")]),
            Screen(id="b", name="B", elements=[_button("element-0")]),
        ]
        assert is_valid(screens)

"""Unit tests for IR models."""

import pydantic
import pytest

from screenforge.ir import (
    DesignElement,
    Screen,
    create_element,
    create_screen,
    dump_screens,
    load_screens,
)
from screenforge.schema import (
    ButtonProperties,
    ComponentType,
    DropdownProperties,
    get_default_properties,
)


class TestDesignElement:
    """Tests for DesignElement model."""

    @pytest.mark.unit
    def test_type_from_wire_value(self):
        """Wire names validate into enum members."""
        element = DesignElement.model_validate(
            {"id": "a", "type": "textField", "x": 0, "y": 0, "width": 200, "height": 56}
        )
        assert element.type == ComponentType.TEXT_FIELD
        assert element.properties == {}

    @pytest.mark.unit
    def test_unknown_type_rejected(self):
        """Direct construction does not coerce unknown types."""
        with pytest.raises(pydantic.ValidationError):
            DesignElement.model_validate(
                {"id": "a", "type": "image", "x": 0, "y": 0, "width": 1, "height": 1}
            )

    @pytest.mark.unit
    def test_edges(self):
        element = DesignElement(
            id="a", type=ComponentType.CARD, x=10, y=20, width=300, height=200
        )
        assert element.right == 310
        assert element.bottom == 220

    @pytest.mark.unit
    def test_json_dump_uses_wire_type(self):
        element = create_element(ComponentType.CHAT_INPUT, 0, 0, element_id="c")
        assert element.model_dump(mode="json")["type"] == "chatInput"


class TestTypedProperties:
    """Tests for DesignElement.typed_properties."""

    @pytest.mark.unit
    def test_returns_type_record(self):
        element = create_element(ComponentType.BUTTON, 0, 0)
        props = element.typed_properties()
        assert isinstance(props, ButtonProperties)
        assert props.text == "Button"
        assert props.navigate_to == ""

    @pytest.mark.unit
    def test_missing_keys_use_defaults(self):
        element = DesignElement(
            id="b",
            type=ComponentType.BUTTON,
            x=0,
            y=0,
            width=120,
            height=40,
            properties={"text": "Go"},
        )
        props = element.typed_properties()
        assert props.text == "Go"
        assert props.color == "#2196F3"

    @pytest.mark.unit
    def test_ill_typed_values_are_coerced(self):
        """Values the record rejects go through property coercion."""
        element = DesignElement(
            id="d",
            type=ComponentType.DROPDOWN,
            x=0,
            y=0,
            width=200,
            height=70,
            properties={
                "options": [{"label": "A", "value": "a"}],
                "label": 7,
            },
        )
        props = element.typed_properties()
        assert isinstance(props, DropdownProperties)
        assert props.options == '[{"label":"A","value":"a"}]'
        assert props.label == "7"


class TestScreen:
    """Tests for Screen model."""

    @pytest.mark.unit
    def test_find_element(self):
        screen = Screen(
            id="home",
            name="Home",
            elements=[
                create_element(ComponentType.BUTTON, 0, 0, element_id="first"),
                create_element(ComponentType.CARD, 0, 100, element_id="second"),
            ],
        )
        assert screen.find_element("second").type == ComponentType.CARD
        assert screen.find_element("missing") is None

    @pytest.mark.unit
    def test_create_screen(self):
        screen = create_screen("Settings")
        assert screen.id.startswith("screen-")
        assert screen.elements == []
        assert create_screen("Home", screen_id="home").id == "home"


class TestCreateElement:
    """Tests for direct element placement."""

    @pytest.mark.unit
    def test_defaults_applied(self):
        element = create_element(ComponentType.DYNAMIC_TABLE, 5, 5)
        assert (element.width, element.height) == (350, 200)
        assert element.properties == get_default_properties(
            ComponentType.DYNAMIC_TABLE
        )

    @pytest.mark.unit
    def test_position_clamped_to_fit(self):
        """A drop near the edge is pulled back onto the canvas."""
        element = create_element(ComponentType.BUTTON, 340, 630)
        assert element.x == 360 - 120
        assert element.y == 640 - 40

    @pytest.mark.unit
    def test_negative_position_clamped(self):
        element = create_element(ComponentType.ICON, -15.6, -3)
        assert (element.x, element.y) == (0, 0)

    @pytest.mark.unit
    def test_fractional_position_rounded(self):
        element = create_element(ComponentType.ICON, 10.6, 20.2)
        assert (element.x, element.y) == (11, 20)

    @pytest.mark.unit
    def test_fresh_ids(self):
        first = create_element(ComponentType.ICON, 0, 0)
        second = create_element(ComponentType.ICON, 0, 0)
        assert first.id.startswith("element-")
        assert first.id != second.id


class TestLoadScreens:
    """Tests for loading persisted screens."""

    @pytest.mark.unit
    def test_list_and_wrapper_shapes(self):
        record = {"id": "home", "name": "Home", "elements": []}
        assert load_screens([record])[0].id == "home"
        assert load_screens({"screens": [record]})[0].name == "Home"

    @pytest.mark.unit
    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            load_screens({"pages": []})

    @pytest.mark.unit
    def test_dump_round_trip(self):
        screen = Screen(
            id="home",
            name="Home",
            elements=[create_element(ComponentType.SWITCH, 0, 0, element_id="s")],
        )
        assert load_screens(dump_screens([screen])) == [screen]

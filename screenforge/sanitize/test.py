"""Unit tests for the sanitizer."""

import logging

import pytest

from screenforge.schema import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ComponentType,
    get_default_properties,
    get_min_size,
)

from .lib import (
    coerce_bool,
    coerce_number,
    coerce_properties,
    coerce_structured,
    coerce_text,
    fit_axis,
    sanitize,
)

# Deliberately hostile batch exercising every coercion path
MESSY_BATCH = [
    {"type": "bogus", "x": -10, "y": 700, "width": 5, "height": 5},
    {"type": "button", "x": "30.6", "y": None, "properties": {"text": 12}},
    {"type": "icon", "x": 359, "y": 639, "width": 24, "height": 24},
    {"type": "card", "x": 100, "y": 100, "width": 9999, "height": -4},
    {"type": "dropdown", "properties": {"options": [{"label": "A", "value": "a"}]}},
    {"type": "switch", "properties": {"interactive": "yes", "value": "0"}},
    {"id": "keep-me", "type": "row", "children": [{"type": "button"}]},
    "not a dict",
    None,
    {"type": "dynamicTable", "properties": "broken"},
    {"type": "container", "x": float("nan"), "width": float("inf")},
]


class TestValueCoercion:
    """Tests for single-value coercion helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(16, 16), (16.0, 16), ("16", 16), (" 2.5 ", 2.5), ("x", None), (True, None)],
    )
    def test_coerce_number(self, value, expected):
        assert coerce_number(value) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, True),
            ("yes", True),
            ("TRUE", True),
            ("1", True),
            (0, False),
            ("no", False),
            ("maybe", None),
            (2, None),
        ],
    )
    def test_coerce_bool(self, value, expected):
        assert coerce_bool(value) is expected

    @pytest.mark.unit
    def test_coerce_text(self):
        assert coerce_text("hi") == "hi"
        assert coerce_text(12) == "12"
        assert coerce_text(1.5) == "1.5"
        assert coerce_text(True) is None
        assert coerce_text({"a": 1}) is None

    @pytest.mark.unit
    def test_coerce_structured(self):
        assert coerce_structured('[{"id":"a"}]') == '[{"id":"a"}]'
        assert coerce_structured([{"id": "a"}]) == '[{"id":"a"}]'
        assert coerce_structured({"id": "a"}) is None


class TestCoerceProperties:
    """Tests for property bag merging."""

    @pytest.mark.unit
    def test_non_dict_yields_defaults(self):
        assert coerce_properties(ComponentType.CARD, "oops") == get_default_properties(
            ComponentType.CARD
        )

    @pytest.mark.unit
    def test_well_typed_values_override(self):
        props = coerce_properties(
            ComponentType.BUTTON, {"text": "Login", "padding": "8", "rounded": "no"}
        )
        assert props["text"] == "Login"
        assert props["padding"] == 8
        assert props["rounded"] is False

    @pytest.mark.unit
    def test_ill_typed_values_fall_back(self):
        props = coerce_properties(
            ComponentType.BUTTON, {"padding": "wide", "rounded": "maybe", "text": None}
        )
        assert props["padding"] == 16
        assert props["rounded"] is True
        assert props["text"] == "Button"

    @pytest.mark.unit
    def test_extra_scalars_kept(self):
        props = coerce_properties(
            ComponentType.ICON, {"tooltip": "Star", "nested": {"a": 1}, "tags": [1]}
        )
        assert props["tooltip"] == "Star"
        assert "nested" not in props
        assert "tags" not in props


class TestFitAxis:
    """Tests for single-axis geometry fitting."""

    @pytest.mark.unit
    def test_fits_unchanged(self):
        assert fit_axis(10, 100, 50, 360) == (10, 100)

    @pytest.mark.unit
    def test_shrinks_to_fit(self):
        assert fit_axis(300, 100, 50, 360) == (300, 60)

    @pytest.mark.unit
    def test_moves_back_when_floor_overhangs(self):
        assert fit_axis(340, 100, 50, 360) == (310, 50)

    @pytest.mark.unit
    def test_caps_to_canvas(self):
        assert fit_axis(0, 9999, 50, 360) == (0, 360)


class TestSanitize:
    """Tests for batch sanitization."""

    @pytest.mark.unit
    def test_scenario_bogus_off_canvas(self):
        """An unknown, off-canvas, undersized element becomes a fitted container."""
        (element,) = sanitize(
            [{"type": "bogus", "x": -10, "y": 700, "width": 5, "height": 5}]
        )
        min_width, min_height = get_min_size(ComponentType.CONTAINER)
        assert element.type == ComponentType.CONTAINER
        assert element.x == 0
        assert element.width == min_width
        assert element.height == min_height
        assert element.y == CANVAS_HEIGHT - min_height
        assert element.properties == get_default_properties(ComponentType.CONTAINER)

    @pytest.mark.unit
    def test_unknown_type_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            sanitize([{"type": "carousel"}])
        assert "carousel" in caplog.text

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "elements", {"type": "button"}, 3])
    def test_non_list_yields_empty(self, value):
        assert sanitize(value) == []

    @pytest.mark.unit
    def test_missing_geometry_defaults(self):
        (element,) = sanitize([{"type": "button"}])
        assert (element.x, element.y, element.width, element.height) == (
            20,
            50,
            100,
            50,
        )

    @pytest.mark.unit
    def test_ids_replaced_and_children_dropped(self):
        elements = sanitize([{"id": "keep-me", "type": "row", "children": [{}]}])
        assert elements[0].id == "element-0"
        assert "children" not in elements[0].model_dump()

    @pytest.mark.unit
    def test_custom_id_prefix(self):
        elements = sanitize([{}, {}], id_prefix="ai")
        assert [e.id for e in elements] == ["ai-0", "ai-1"]

    @pytest.mark.unit
    def test_non_dict_entries_become_containers(self):
        elements = sanitize(["x", None, 42])
        assert [e.type for e in elements] == [ComponentType.CONTAINER] * 3

    @pytest.mark.unit
    def test_native_options_encoded(self):
        (element,) = sanitize(
            [
                {
                    "type": "dropdown",
                    "properties": {"options": [{"label": "A", "value": "a"}]},
                }
            ]
        )
        assert element.properties["options"] == '[{"label":"A","value":"a"}]'

    @pytest.mark.unit
    def test_bounds_hold_for_messy_batch(self):
        """Every sanitized element lies on the canvas above its floor."""
        for element in sanitize(MESSY_BATCH):
            min_width, min_height = get_min_size(element.type)
            assert 0 <= element.x <= CANVAS_WIDTH
            assert 0 <= element.y <= CANVAS_HEIGHT
            assert element.x + element.width <= CANVAS_WIDTH
            assert element.y + element.height <= CANVAS_HEIGHT
            assert element.width >= min_width
            assert element.height >= min_height

    @pytest.mark.unit
    def test_properties_superset_of_defaults(self):
        for element in sanitize(MESSY_BATCH):
            assert set(get_default_properties(element.type)) <= set(element.properties)

    @pytest.mark.unit
    def test_idempotent(self):
        """Sanitizing sanitized output changes nothing."""
        once = sanitize(MESSY_BATCH)
        twice = sanitize([e.model_dump(mode="json") for e in once])
        assert twice == once

    @pytest.mark.unit
    def test_accepts_models(self):
        once = sanitize(MESSY_BATCH)
        assert sanitize(once) == once

    @pytest.mark.unit
    def test_corner_icon_shrinks_then_moves_back(self):
        """An icon dropped in the corner shrinks to its floor and moves back."""
        (element,) = sanitize(
            [{"type": "icon", "x": 359, "y": 639, "width": 24, "height": 24}]
        )
        assert (element.width, element.height) == (20, 20)
        assert (element.x, element.y) == (340, 620)

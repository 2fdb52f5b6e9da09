"""Unit tests for shared interpretation rules."""

import pytest

from screenforge.schema import ButtonProperties

from .lib import (
    DEFAULT_ICON,
    LIST_ITEM_ICON,
    CrossAxis,
    MainAxis,
    StackAlignment,
    cell_text,
    dump_structured,
    parse_columns,
    parse_cross_axis,
    parse_list_items,
    parse_main_axis,
    parse_options,
    parse_rows,
    parse_stack_alignment,
    parse_table,
    property_color,
    resolve_color,
    resolve_icon_name,
)


class TestAlignmentParsing:
    """Tests for alignment keyword parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["spaceBetween", "space-between", "space_between", " SpaceBetween "]
    )
    def test_spellings_fold_together(self, value):
        """camelCase, kebab-case and snake_case all parse."""
        assert parse_main_axis(value) == MainAxis.SPACE_BETWEEN

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["diagonal", "", None, 3])
    def test_unknown_main_axis_is_start(self, value):
        assert parse_main_axis(value) == MainAxis.START

    @pytest.mark.unit
    def test_stretch_only_on_cross_axis(self):
        """Stretch is a cross-axis keyword only."""
        assert parse_cross_axis("stretch") == CrossAxis.STRETCH
        assert parse_main_axis("stretch") == MainAxis.START

    @pytest.mark.unit
    def test_stack_anchors(self):
        assert parse_stack_alignment("bottom-right") == StackAlignment.BOTTOM_RIGHT
        assert parse_stack_alignment("center") == StackAlignment.CENTER

    @pytest.mark.unit
    def test_unknown_stack_anchor_is_top_left(self):
        assert parse_stack_alignment("middle") == StackAlignment.TOP_LEFT


class TestParseOptions:
    """Tests for dropdown option parsing."""

    @pytest.mark.unit
    def test_json_text(self):
        value = '[{"label":"Red","value":"r"},{"label":"Blue","value":"b"}]'
        assert parse_options(value) == [
            {"label": "Red", "value": "r"},
            {"label": "Blue", "value": "b"},
        ]

    @pytest.mark.unit
    def test_native_list(self):
        assert parse_options([{"label": "A", "value": "a"}]) == [
            {"label": "A", "value": "a"}
        ]

    @pytest.mark.unit
    def test_missing_half_is_borrowed(self):
        """An option with only a value uses it as the label too."""
        assert parse_options([{"value": 3}]) == [{"label": "3", "value": "3"}]

    @pytest.mark.unit
    def test_malformed_json_falls_back(self):
        """Undecodable text yields the two fallback options."""
        assert parse_options("not json") == [
            {"label": "Option 1", "value": "option1"},
            {"label": "Option 2", "value": "option2"},
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ['{"label":"A"}', "[1, 2]", [{}], None])
    def test_wrong_shape_falls_back(self, value):
        assert len(parse_options(value)) == 2

    @pytest.mark.unit
    def test_empty_list_is_kept(self):
        assert parse_options("[]") == []

    @pytest.mark.unit
    def test_fallback_is_a_fresh_copy(self):
        """Mutating a fallback result does not affect the next call."""
        first = parse_options("bad")
        first[0]["label"] = "Changed"
        assert parse_options("bad")[0]["label"] == "Option 1"


class TestParseTable:
    """Tests for table column and row parsing."""

    @pytest.mark.unit
    def test_columns_normalized(self):
        columns = parse_columns(
            '[{"id":"age"},{"id":"city","title":"City","width":"90"}]'
        )
        assert columns == [
            {"id": "age", "title": "age", "width": 120},
            {"id": "city", "title": "City", "width": 90},
        ]

    @pytest.mark.unit
    def test_column_without_id_falls_back(self):
        columns = parse_columns([{"title": "Nameless"}])
        assert [c["id"] for c in columns] == ["name", "email"]

    @pytest.mark.unit
    def test_rows_fallback(self):
        rows = parse_rows("{")
        assert rows[0]["name"] == "John Doe"
        assert rows[1]["email"] == "jane@example.com"

    @pytest.mark.unit
    def test_parse_table_falls_back_together(self):
        """Bad rows replace the columns too."""
        columns, rows = parse_table('[{"id":"x"}]', "oops")
        assert [c["id"] for c in columns] == ["name", "email"]
        assert len(rows) == 2

    @pytest.mark.unit
    def test_parse_table_valid(self):
        columns, rows = parse_table([{"id": "x"}], [{"x": 1}])
        assert columns == [{"id": "x", "title": "x", "width": 120}]
        assert rows == [{"x": 1}]

    @pytest.mark.unit
    def test_cell_text(self):
        row = {"name": "Ada", "age": 36.0, "admin": True}
        assert cell_text(row, "name") == "Ada"
        assert cell_text(row, "age") == "36"
        assert cell_text(row, "admin") == "true"
        assert cell_text(row, "missing") == ""


class TestParseListItems:
    """Tests for list item parsing."""

    @pytest.mark.unit
    def test_untitled_items_are_numbered(self):
        items = parse_list_items('[{"subtitle":"s"},{"title":"B","icon":"home"}]')
        assert items == [
            {"title": "Item 1", "subtitle": "s", "icon": ""},
            {"title": "B", "subtitle": "", "icon": "home"},
        ]

    @pytest.mark.unit
    def test_fallback(self):
        items = parse_list_items(42)
        assert [i["icon"] for i in items] == ["star", "favorite"]


class TestDumpStructured:
    """Tests for compact JSON encoding."""

    @pytest.mark.unit
    def test_compact(self):
        assert dump_structured([{"label": "A", "value": "a"}]) == (
            '[{"label":"A","value":"a"}]'
        )

    @pytest.mark.unit
    def test_reparses_to_same_options(self):
        """Dumped options parse back to the same records."""
        options = [{"label": "Ünïcode", "value": "u"}]
        assert parse_options(dump_structured(options)) == options


class TestResolveColor:
    """Tests for color property resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_uses_fallback(self, value):
        assert resolve_color(value, "#2196f3") == "#2196F3"

    @pytest.mark.unit
    def test_malformed_is_black(self):
        assert resolve_color("blue", "#FFFFFF") == "#000000"

    @pytest.mark.unit
    def test_normalized(self):
        assert resolve_color("#abcdef", "#000000") == "#ABCDEF"

    @pytest.mark.unit
    def test_property_color_uses_field_default(self):
        """Blank color fields resolve to the record's declared default."""
        props = ButtonProperties(color="", text_color="#ffffff")
        assert property_color(props, "color") == "#2196F3"
        assert property_color(props, "text_color") == "#FFFFFF"


class TestResolveIconName:
    """Tests for Material icon name resolution."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["home", "arrow_back", "looks_3"])
    def test_identifiers_kept(self, name):
        assert resolve_icon_name(name) == name

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["Arrow Back", "Not-An-Icon", "3d", "", None, 42])
    def test_invalid_names_fall_back(self, name):
        assert resolve_icon_name(name) == DEFAULT_ICON == "star"

    @pytest.mark.unit
    def test_list_item_fallback(self):
        assert resolve_icon_name("Not-An-Icon", LIST_ITEM_ICON) == "circle"

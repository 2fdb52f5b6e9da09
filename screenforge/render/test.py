"""Unit tests for the structural preview renderer."""

import pytest

from screenforge.ir import DesignElement, Screen, create_element
from screenforge.schema import ComponentType

from screenforge.interpret import OTHER_BUBBLE_COLOR, OTHER_BUBBLE_TEXT

from .lib import (
    DARK_THEME,
    LIGHT_THEME,
    PreviewRenderer,
    node,
    px,
    render,
    render_canvas,
    render_screen,
)


def _element(component_type: ComponentType, **properties) -> DesignElement:
    element = create_element(component_type, 20, 20, element_id="el")
    element.properties.update(properties)
    return element


def _tags(root) -> list[str]:
    return [n.tag for n in root.walk()]


class TestPreviewNode:
    """Tests for PreviewNode helpers."""

    @pytest.mark.unit
    def test_to_dict_omits_empty_fields(self):
        tree = node("box", node("text", text="Hi"), style={"color": "#000000"})
        assert tree.to_dict() == {
            "tag": "box",
            "style": {"color": "#000000"},
            "children": [{"tag": "text", "text": "Hi"}],
        }

    @pytest.mark.unit
    def test_walk_is_depth_first(self):
        tree = node("a", node("b", node("c")), node("d"))
        assert _tags(tree) == ["a", "b", "c", "d"]

    @pytest.mark.unit
    def test_px(self):
        assert px(12) == "12px"
        assert px(12.0) == "12px"
        assert px(12.5) == "12.5px"


class TestButton:
    """Tests for button previews."""

    @pytest.mark.unit
    def test_primary_uses_contrast_text(self):
        """A light background gets black text, a dark one white."""
        light = render(_element(ComponentType.BUTTON, color="#FFEB3B"))
        dark = render(_element(ComponentType.BUTTON, color="#0D47A1"))
        assert light.style["color"] == "#000000"
        assert dark.style["color"] == "#FFFFFF"

    @pytest.mark.unit
    def test_default_blue_gets_white_text(self):
        tree = render(_element(ComponentType.BUTTON))
        assert tree.style["backgroundColor"] == "#2196F3"
        assert tree.style["color"] == "#FFFFFF"

    @pytest.mark.unit
    def test_outline_variant(self):
        tree = render(_element(ComponentType.BUTTON, variant="outline"))
        assert tree.style["backgroundColor"] == "transparent"
        assert tree.style["border"] == "2px solid #2196F3"

    @pytest.mark.unit
    def test_navigation_indicator(self):
        """Buttons with a target show a chevron and carry the target."""
        tree = render(_element(ComponentType.BUTTON, navigateTo="settings"))
        assert tree.attrs == {"navigateTo": "settings"}
        indicator = tree.children[-1]
        assert indicator.tag == "indicator"
        assert indicator.attrs["name"] == "chevron_right"

    @pytest.mark.unit
    def test_no_navigation_attrs_by_default(self):
        tree = render(_element(ComponentType.BUTTON))
        assert tree.attrs == {}
        assert "indicator" not in _tags(tree)


class TestLayoutPreviews:
    """Tests for row, column and stack previews."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "keyword,expected",
        [
            ("start", "flex-start"),
            ("center", "center"),
            ("end", "flex-end"),
            ("spaceBetween", "space-between"),
            ("space-around", "space-around"),
            ("spaceEvenly", "space-evenly"),
            ("nonsense", "flex-start"),
        ],
    )
    def test_row_justify(self, keyword, expected):
        tree = render(_element(ComponentType.ROW, mainAxisAlignment=keyword))
        assert tree.style["justifyContent"] == expected
        assert tree.style["flexDirection"] == "row"

    @pytest.mark.unit
    def test_column_cross_axis(self):
        tree = render(_element(ComponentType.COLUMN, crossAxisAlignment="stretch"))
        assert tree.style["flexDirection"] == "column"
        assert tree.style["alignItems"] == "stretch"
        assert len(tree.children) == 3

    @pytest.mark.unit
    def test_stack_bottom_right(self):
        tree = render(_element(ComponentType.STACK, alignment="bottomRight"))
        assert tree.attrs["alignment"] == "bottomRight"
        front = tree.children[1]
        assert front.style["bottom"] == "10px"
        assert front.style["right"] == "10px"

    @pytest.mark.unit
    def test_stack_center_translates(self):
        tree = render(_element(ComponentType.STACK))
        back = tree.children[0]
        assert back.style["top"] == "50%"
        assert back.style["transform"] == "translateY(-50%) translateX(-50%)"


class TestStructuredPreviews:
    """Tests for dropdown, list and table previews."""

    @pytest.mark.unit
    def test_dropdown_malformed_options_fall_back(self):
        tree = render(_element(ComponentType.DROPDOWN, options="{not json"))
        select = next(n for n in tree.walk() if n.tag == "select")
        labels = [child.text for child in select.children]
        assert labels == ["Choose...", "Option 1", "Option 2"]

    @pytest.mark.unit
    def test_dropdown_unknown_value_shows_placeholder(self):
        tree = render(_element(ComponentType.DROPDOWN, value="missing"))
        select = next(n for n in tree.walk() if n.tag == "select")
        assert select.attrs["value"] == ""

    @pytest.mark.unit
    def test_dropdown_selected_value(self, interactive_screen):
        tree = render(interactive_screen.elements[2])
        select = next(n for n in tree.walk() if n.tag == "select")
        assert select.attrs["value"] == "option2"
        assert tree.attrs["interactive"] is True

    @pytest.mark.unit
    def test_list_items(self):
        tree = render(_element(ComponentType.LIST, direction="horizontal"))
        items = [n for n in tree.children if n.tag == "item"]
        assert len(items) == 5
        assert tree.style["flexDirection"] == "row"

    @pytest.mark.unit
    def test_table_striping(self):
        tree = render(_element(ComponentType.DYNAMIC_TABLE))
        table = next(n for n in tree.walk() if n.tag == "table")
        header, *rows = table.children
        assert [th.text for th in header.children] == ["Name", "Email", "Role"]
        assert [row.style["backgroundColor"] for row in rows] == [
            "#FFFFFF",
            "#F9FAFB",
            "#FFFFFF",
        ]

    @pytest.mark.unit
    def test_table_fallback_and_blank_cells(self):
        tree = render(
            _element(
                ComponentType.DYNAMIC_TABLE,
                columns='[{"id":"name"},{"id":"age"}]',
                data="garbage",
            )
        )
        table = next(n for n in tree.walk() if n.tag == "table")
        header = table.children[0]
        assert [th.text for th in header.children] == ["Name", "Email"]

        tree = render(
            _element(
                ComponentType.DYNAMIC_TABLE,
                columns='[{"id":"name"},{"id":"age"}]',
                data='[{"name":"Ada"}]',
                showHeader=False,
            )
        )
        table = next(n for n in tree.walk() if n.tag == "table")
        assert [td.text for td in table.children[0].children] == ["Ada", "-"]


class TestControls:
    """Tests for toggles and inputs."""

    @pytest.mark.unit
    def test_switch_on(self):
        tree = render(_element(ComponentType.SWITCH, value=True))
        track = tree.children[0]
        assert track.tag == "switch"
        assert track.attrs["checked"] is True
        assert track.style["backgroundColor"] == "#2196F3"

    @pytest.mark.unit
    def test_labeled_checkbox_left(self):
        tree = render(
            _element(ComponentType.CHECKBOX_WITH_LABEL, labelPosition="left")
        )
        assert [child.tag for child in tree.children] == ["label", "checkbox"]

    @pytest.mark.unit
    def test_input_with_label(self, sample_screen):
        tree = render(sample_screen.elements[2])
        field = next(n for n in tree.walk() if n.tag == "input")
        assert field.attrs["type"] == "password"

    @pytest.mark.unit
    def test_chat_message_sender(self):
        tree = render(_element(ComponentType.CHAT_MESSAGE, isUser=False))
        assert tree.attrs["sender"] == "other"
        assert tree.style["justifyContent"] == "flex-start"

    @pytest.mark.unit
    @pytest.mark.parametrize("dark_mode", [False, True])
    def test_chat_bubble_ignores_theme(self, dark_mode):
        """The other party's bubble keeps its colors in both palettes."""
        element = _element(ComponentType.CHAT_MESSAGE, isUser=False)
        tree = render(element, dark_mode=dark_mode)
        bubble = next(n for n in tree.walk() if n.tag == "bubble")
        assert bubble.style["backgroundColor"] == OTHER_BUBBLE_COLOR
        assert bubble.style["color"] == OTHER_BUBBLE_TEXT


class TestIcons:
    """Tests for icon names in previews."""

    @pytest.mark.unit
    def test_invalid_icon_name_falls_back(self):
        tree = render(_element(ComponentType.ICON, name="Arrow Back"))
        (icon,) = [n for n in tree.walk() if n.tag == "icon"]
        assert icon.attrs["name"] == "star"

    @pytest.mark.unit
    def test_invalid_list_icon_falls_back(self):
        element = _element(
            ComponentType.LIST, data='[{"title":"A","icon":"Not-An-Icon"}]'
        )
        item = render(element).children[0]
        assert [n.attrs["name"] for n in item.walk() if n.tag == "icon"] == [
            "circle",
            "arrow_forward_ios",
        ]


class TestScreens:
    """Tests for screen-level rendering."""

    @pytest.mark.unit
    def test_render_screen_keyed_by_id(self, sample_screen):
        previews = render_screen(sample_screen)
        assert list(previews) == ["header", "email", "password", "submit"]
        submit = previews["submit"]
        assert submit.tag == "positioned"
        assert submit.style["left"] == "120px"
        assert submit.style["top"] == "420px"
        assert submit.attrs["type"] == "button"

    @pytest.mark.unit
    def test_canvas_background(self, sample_screen):
        assert render_canvas(sample_screen).style["backgroundColor"] == (
            LIGHT_THEME.canvas
        )
        dark = render_canvas(sample_screen, dark_mode=True)
        assert dark.style["backgroundColor"] == "#121212" == DARK_THEME.canvas
        assert dark.style["width"] == "360px"

    @pytest.mark.unit
    def test_empty_screen(self):
        assert render_screen(Screen(id="s", name="S")) == {}

    @pytest.mark.unit
    @pytest.mark.parametrize("component_type", list(ComponentType))
    def test_every_type_renders(self, component_type):
        """Default elements of every type render in both palettes."""
        element = create_element(component_type, 0, 0)
        for renderer in (PreviewRenderer(), PreviewRenderer(dark_mode=True)):
            tree = renderer.render(element)
            assert tree.tag
            assert tree.to_dict()["tag"] == tree.tag

    @pytest.mark.unit
    def test_malformed_property_values_do_not_break(self):
        """Values of the wrong kind are read through coercion."""
        element = _element(ComponentType.CARD, elevation="4", showImage="no")
        tree = render(element)
        assert tree.style["boxShadow"].startswith("0 4px 8px")
        assert "image" not in _tags(tree)

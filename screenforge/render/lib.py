"""Structural preview renderer for design elements.

Produces a framework-neutral tree of PreviewNodes (tag, CSS-like style,
text, attributes, children) that an editor front end can paint directly.
Each element is rendered to fill its own box; ``render_screen`` wraps every
element in an absolutely positioned box at its literal canvas geometry.

Alignment keywords, structured JSON sub-properties and colors are read
through ``screenforge.interpret`` so that the preview and the generated
Flutter code agree. ``icon`` nodes name glyphs the exported app draws;
``indicator`` nodes are editor affordances with no widget counterpart.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from screenforge.color import contrast_color
from screenforge.interpret import (
    LIST_ITEM_ICON,
    OTHER_AVATAR_COLOR,
    OTHER_BUBBLE_COLOR,
    OTHER_BUBBLE_TEXT,
    SAMPLE_TIMESTAMP,
    SECONDARY_BUTTON_COLOR,
    SECONDARY_BUTTON_TEXT,
    USER_AVATAR_COLOR,
    USER_BUBBLE_COLOR,
    USER_BUBBLE_TEXT,
    CrossAxis,
    MainAxis,
    StackAlignment,
    cell_text,
    parse_cross_axis,
    parse_list_items,
    parse_main_axis,
    parse_options,
    parse_stack_alignment,
    parse_table,
    property_color,
    resolve_icon_name,
)
from screenforge.ir import DesignElement, Screen
from screenforge.schema import CANVAS_HEIGHT, CANVAS_WIDTH, ComponentType


class PreviewNode(BaseModel):
    """One node of a structural preview tree.

    Attributes:
        tag: Node kind (``box``, ``text``, ``button``, ``icon``, ...).
        style: CSS-like style declarations.
        text: Text content for leaf nodes.
        attrs: Non-style attributes (input type, checked state, ...).
        children: Nested nodes in paint order.
    """

    tag: str = Field(..., description="Node kind")
    style: dict[str, Any] = Field(default_factory=dict)
    text: str | None = Field(None, description="Text content")
    attrs: dict[str, Any] = Field(default_factory=dict)
    children: list["PreviewNode"] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dict, omitting empty fields."""
        data: dict[str, Any] = {"tag": self.tag}
        if self.style:
            data["style"] = dict(self.style)
        if self.text is not None:
            data["text"] = self.text
        if self.attrs:
            data["attrs"] = dict(self.attrs)
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    def walk(self):
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


def node(
    tag: str,
    *children: PreviewNode,
    text: str | None = None,
    style: dict[str, Any] | None = None,
    **attrs: Any,
) -> PreviewNode:
    """Shorthand constructor for PreviewNode."""
    return PreviewNode(
        tag=tag,
        style=style or {},
        text=text,
        attrs=attrs,
        children=list(children),
    )


def px(value: int | float) -> str:
    """Format a length in CSS pixels."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value}px"


@dataclass(frozen=True)
class Theme:
    """Neutral palette for chrome the generated app does not color per widget.

    Element colors and the theme-independent literals in
    ``screenforge.interpret`` never come from here.
    """

    canvas: str
    surface: str
    text: str
    heading: str
    muted: str
    border: str
    placeholder: str
    outline: str
    unchecked: str
    error: str
    on_accent: str


LIGHT_THEME = Theme(
    canvas="#FFFFFF",
    surface="#FFFFFF",
    text="#374151",
    heading="#111827",
    muted="#6B7280",
    border="#D1D5DB",
    placeholder="#D1D5DB",
    outline="#9CA3AF",
    unchecked="#9CA3AF",
    error="#EF4444",
    on_accent="#FFFFFF",
)

DARK_THEME = Theme(
    canvas="#121212",
    surface="#1F2937",
    text="#D1D5DB",
    heading="#F3F4F6",
    muted="#9CA3AF",
    border="#374151",
    placeholder="#374151",
    outline="#6B7280",
    unchecked="#6B7280",
    error="#F87171",
    on_accent="#FFFFFF",
)

DISABLED_OPACITY = 0.6

_JUSTIFY = {
    MainAxis.START: "flex-start",
    MainAxis.CENTER: "center",
    MainAxis.END: "flex-end",
    MainAxis.SPACE_BETWEEN: "space-between",
    MainAxis.SPACE_AROUND: "space-around",
    MainAxis.SPACE_EVENLY: "space-evenly",
}

_ALIGN_ITEMS = {
    CrossAxis.START: "flex-start",
    CrossAxis.CENTER: "center",
    CrossAxis.END: "flex-end",
    CrossAxis.STRETCH: "stretch",
}

# (vertical, horizontal) placement per stack anchor
_STACK_PLACEMENT = {
    StackAlignment.TOP_LEFT: ("start", "start"),
    StackAlignment.TOP_CENTER: ("start", "center"),
    StackAlignment.TOP_RIGHT: ("start", "end"),
    StackAlignment.CENTER_LEFT: ("center", "start"),
    StackAlignment.CENTER: ("center", "center"),
    StackAlignment.CENTER_RIGHT: ("center", "end"),
    StackAlignment.BOTTOM_LEFT: ("end", "start"),
    StackAlignment.BOTTOM_CENTER: ("end", "center"),
    StackAlignment.BOTTOM_RIGHT: ("end", "end"),
}

_FILL = {"width": "100%", "height": "100%"}
_COLUMN = {"display": "flex", "flexDirection": "column"}


class PreviewRenderer:
    """Renders design elements to PreviewNode trees.

    Args:
        dark_mode: Render chrome with the dark palette.
    """

    def __init__(self, dark_mode: bool = False) -> None:
        self.dark_mode = dark_mode
        self.theme = DARK_THEME if dark_mode else LIGHT_THEME

    def render(self, element: DesignElement) -> PreviewNode:
        """Render one element to fill its own box."""
        props = element.typed_properties()

        match element.type:
            case ComponentType.BUTTON:
                return self._button(props)
            case ComponentType.TEXT_FIELD:
                return self._text_field(props)
            case ComponentType.CARD:
                return self._card(props)
            case ComponentType.LIST:
                return self._list(props)
            case ComponentType.ICON:
                return self._icon(props)
            case ComponentType.CONTAINER:
                return self._container(props)
            case ComponentType.ROW:
                return self._flex(props, "row")
            case ComponentType.COLUMN:
                return self._flex(props, "column")
            case ComponentType.STACK:
                return self._stack(props)
            case ComponentType.SWITCH:
                return self._switch(props)
            case ComponentType.CHECKBOX:
                return self._checkbox(props)
            case ComponentType.RADIO:
                return self._radio(props)
            case ComponentType.CHAT_INPUT:
                return self._chat_input(props)
            case ComponentType.CHAT_MESSAGE:
                return self._chat_message(props)
            case ComponentType.DROPDOWN:
                return self._dropdown(props)
            case ComponentType.INPUT_WITH_LABEL:
                return self._input_with_label(props)
            case ComponentType.SWITCH_WITH_LABEL:
                return self._labeled(props, self._switch_track(props))
            case ComponentType.RADIO_WITH_LABEL:
                return self._labeled(props, self._radio_ring(props))
            case ComponentType.CHECKBOX_WITH_LABEL:
                return self._labeled(props, self._checkbox_box(props))
            case ComponentType.DYNAMIC_TABLE:
                return self._table(props)

    def render_positioned(self, element: DesignElement) -> PreviewNode:
        """Render an element inside a box at its canvas geometry."""
        return node(
            "positioned",
            self.render(element),
            style={
                "position": "absolute",
                "left": px(element.x),
                "top": px(element.y),
                "width": px(element.width),
                "height": px(element.height),
            },
            id=element.id,
            type=element.type.value,
        )

    def render_screen(self, screen: Screen) -> dict[str, PreviewNode]:
        """Render every element of a screen keyed by element id."""
        return {
            element.id: self.render_positioned(element) for element in screen.elements
        }

    def render_canvas(self, screen: Screen) -> PreviewNode:
        """Render a whole screen as one canvas node in stacking order."""
        return node(
            "canvas",
            *(self.render_positioned(element) for element in screen.elements),
            style={
                "position": "relative",
                "width": px(CANVAS_WIDTH),
                "height": px(CANVAS_HEIGHT),
                "backgroundColor": self.theme.canvas,
            },
            id=screen.id,
            name=screen.name,
        )

    # === Controls ===

    def _button(self, props) -> PreviewNode:
        color = property_color(props, "color")
        style: dict[str, Any] = {
            **_FILL,
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "center",
            "padding": px(props.padding),
            "borderRadius": "9999px" if props.rounded else "6px",
        }
        if props.variant == "outline":
            style.update(
                backgroundColor="transparent",
                color=color,
                border=f"2px solid {color}",
            )
        elif props.variant == "secondary":
            style.update(
                backgroundColor=SECONDARY_BUTTON_COLOR, color=SECONDARY_BUTTON_TEXT
            )
        else:
            style.update(backgroundColor=color, color=contrast_color(color))

        content = [node("text", text=props.text)]
        attrs: dict[str, Any] = {}
        if props.navigate_to:
            content.append(node("indicator", name="chevron_right"))
            attrs["navigateTo"] = props.navigate_to
        return node("button", *content, style=style, **attrs)

    def _text_field(self, props) -> PreviewNode:
        parts = []
        if props.label:
            parts.append(self._label_text(props.label, self.theme.text))
        field_children = []
        if props.has_icon:
            field_children.append(
                node(
                    "icon",
                    style={"color": self.theme.muted},
                    name=resolve_icon_name(props.icon),
                )
            )
        field_children.append(
            node("text", text=props.hint, style={"color": self.theme.muted})
        )
        border_color = self.theme.error if props.validation else self.theme.border
        parts.append(
            node(
                "field",
                *field_children,
                style={
                    "display": "flex",
                    "alignItems": "center",
                    "flex": "1",
                    "borderRadius": "6px",
                    "border": f"1px solid {border_color}",
                },
            )
        )
        if props.validation:
            parts.append(
                node(
                    "text",
                    text=props.validation_message,
                    style={"color": self.theme.error, "fontSize": "12px"},
                )
            )
        return node("box", *parts, style={**_FILL, **_COLUMN})

    def _switch_track(self, props) -> PreviewNode:
        active = property_color(props, "active_color")
        inactive = property_color(props, "inactive_color")
        style: dict[str, Any] = {
            "position": "relative",
            "width": "48px",
            "height": "24px",
            "borderRadius": "9999px",
            "backgroundColor": active if props.value else inactive,
        }
        if getattr(props, "disabled", False):
            style["opacity"] = DISABLED_OPACITY
        thumb = node(
            "thumb",
            style={
                "position": "absolute",
                "top": "2px",
                "left": "calc(100% - 22px)" if props.value else "2px",
                "width": "20px",
                "height": "20px",
                "borderRadius": "9999px",
                "backgroundColor": self.theme.on_accent,
            },
        )
        return node("switch", thumb, style=style, checked=props.value)

    def _checkbox_box(self, props) -> PreviewNode:
        active = property_color(props, "active_color")
        style: dict[str, Any] = {
            "width": "20px",
            "height": "20px",
            "borderRadius": "4px",
            "border": f"1px solid {active if props.value else self.theme.unchecked}",
            "backgroundColor": active if props.value else self.theme.surface,
        }
        if getattr(props, "disabled", False):
            style["opacity"] = DISABLED_OPACITY
        marks = []
        if props.value:
            marks.append(
                node("checkmark", style={"color": self.theme.on_accent}, name="check")
            )
        return node("checkbox", *marks, style=style, checked=props.value)

    def _radio_ring(self, props) -> PreviewNode:
        active = property_color(props, "active_color")
        style: dict[str, Any] = {
            "width": "20px",
            "height": "20px",
            "borderRadius": "9999px",
            "border": f"1px solid {active if props.value else self.theme.unchecked}",
        }
        if getattr(props, "disabled", False):
            style["opacity"] = DISABLED_OPACITY
        dots = []
        if props.value:
            dots.append(
                node(
                    "dot",
                    style={
                        "width": "12px",
                        "height": "12px",
                        "borderRadius": "9999px",
                        "backgroundColor": active,
                    },
                )
            )
        return node(
            "radio", *dots, style=style, checked=props.value, group=props.group_value
        )

    def _centered(self, control: PreviewNode, label: str = "") -> PreviewNode:
        children = [control]
        if label:
            children.append(self._label_text(label, self.theme.text))
        return node(
            "box",
            *children,
            style={
                **_FILL,
                "display": "flex",
                "alignItems": "center",
                "justifyContent": "center",
                "gap": "8px",
            },
        )

    def _switch(self, props) -> PreviewNode:
        centered = self._centered(self._switch_track(props), props.label)
        centered.attrs["interactive"] = props.interactive
        return centered

    def _checkbox(self, props) -> PreviewNode:
        centered = self._centered(self._checkbox_box(props), props.label)
        centered.attrs["interactive"] = props.interactive
        return centered

    def _radio(self, props) -> PreviewNode:
        return self._centered(self._radio_ring(props))

    def _labeled(self, props, control: PreviewNode) -> PreviewNode:
        label = self._label_text(props.label, property_color(props, "label_color"))
        if props.label_position == "left":
            children = [label, control]
        else:
            children = [control, label]
        return node(
            "box",
            *children,
            style={**_FILL, "display": "flex", "alignItems": "center", "gap": "12px"},
        )

    def _caption(self) -> dict[str, Any]:
        return {"color": self.theme.muted, "fontSize": "12px"}

    def _label_text(self, text: str, color: str, required: bool = False) -> PreviewNode:
        children = []
        if required:
            children.append(node("text", text="*", style={"color": self.theme.error}))
        return node(
            "label",
            *children,
            text=text,
            style={"color": color, "fontSize": "14px", "fontWeight": "500"},
        )

    # === Inputs ===

    def _dropdown(self, props) -> PreviewNode:
        options = parse_options(props.options)
        values = [option["value"] for option in options]
        parts = []
        if props.label:
            parts.append(self._label_text(props.label, self.theme.text, props.required))
        choices = []
        if props.placeholder:
            choices.append(node("option", text=props.placeholder, value=""))
        choices.extend(
            node("option", text=option["label"], value=option["value"])
            for option in options
        )
        select_style: dict[str, Any] = {
            "borderRadius": "6px",
            "border": f"1px solid {property_color(props, 'border_color')}",
            "backgroundColor": property_color(props, "background_color"),
            "color": self.theme.text,
        }
        if props.disabled:
            select_style["opacity"] = DISABLED_OPACITY
        parts.append(
            node(
                "select",
                *choices,
                style=select_style,
                value=props.value if props.value in values else "",
                disabled=props.disabled,
            )
        )
        return node(
            "box",
            *parts,
            style={**_FILL, **_COLUMN},
            interactive=props.interactive,
        )

    def _input_with_label(self, props) -> PreviewNode:
        input_style: dict[str, Any] = {
            "borderRadius": "6px",
            "border": f"1px solid {property_color(props, 'border_color')}",
            "backgroundColor": self.theme.surface,
            "color": self.theme.text,
        }
        if props.disabled:
            input_style["opacity"] = DISABLED_OPACITY
        label_color = property_color(props, "label_color")
        return node(
            "box",
            self._label_text(props.label, label_color, props.required),
            node(
                "input",
                style=input_style,
                type=props.input_type,
                placeholder=props.placeholder,
                value=props.value,
                disabled=props.disabled,
            ),
            style={**_FILL, **_COLUMN},
        )

    def _chat_input(self, props) -> PreviewNode:
        button_color = property_color(props, "button_color")
        return node(
            "box",
            node(
                "field",
                node("text", text=props.placeholder, style={"color": self.theme.muted}),
                style={
                    "flex": "1",
                    "borderRadius": "6px",
                    "backgroundColor": self.theme.surface,
                    "border": f"1px solid {self.theme.border}",
                },
            ),
            node(
                "button",
                node("text", text=props.button_text),
                style={
                    "borderRadius": "6px",
                    "backgroundColor": button_color,
                    "color": contrast_color(button_color),
                },
            ),
            style={
                **_FILL,
                "display": "flex",
                "alignItems": "center",
                "gap": "8px",
                "padding": "8px",
                "border": f"1px solid {self.theme.border}",
                "borderRadius": "8px",
            },
        )

    def _chat_message(self, props) -> PreviewNode:
        bubble_color = USER_BUBBLE_COLOR if props.is_user else OTHER_BUBBLE_COLOR
        text_color = USER_BUBBLE_TEXT if props.is_user else OTHER_BUBBLE_TEXT
        column = [
            node(
                "bubble",
                node("text", text=props.text),
                style={
                    "padding": "12px",
                    "borderRadius": "8px",
                    "backgroundColor": bubble_color,
                    "color": text_color,
                },
            )
        ]
        if props.timestamp:
            column.append(
                node("text", text=SAMPLE_TIMESTAMP, style=self._caption())
            )
        message = node("box", *column, style=dict(_COLUMN))
        row = [message]
        if props.avatar:
            avatar = node(
                "avatar",
                style={
                    "width": "32px",
                    "height": "32px",
                    "borderRadius": "9999px",
                    "backgroundColor": (
                        USER_AVATAR_COLOR if props.is_user else OTHER_AVATAR_COLOR
                    ),
                },
            )
            row = [message, avatar] if props.is_user else [avatar, message]
        return node(
            "box",
            *row,
            style={
                **_FILL,
                "display": "flex",
                "gap": "8px",
                "justifyContent": "flex-end" if props.is_user else "flex-start",
            },
            sender="user" if props.is_user else "other",
        )

    # === Layout ===

    def _card(self, props) -> PreviewNode:
        elevation = props.elevation
        shadow = f"0 {px(elevation)} {px(elevation * 2)} rgba(0, 0, 0, 0.1)"
        parts = []
        if props.show_image:
            parts.append(
                node(
                    "image",
                    node("icon", style={"color": self.theme.muted}, name="image"),
                    style={
                        "width": "100%",
                        "height": px(props.image_height),
                        "borderRadius": "4px",
                        "backgroundColor": self.theme.placeholder,
                    },
                )
            )
        parts.append(
            node(
                "text",
                text=props.title or "Card Title",
                style={
                    "color": self.theme.heading,
                    "fontSize": "18px",
                    "fontWeight": "700",
                },
            )
        )
        if props.subtitle:
            parts.append(
                node(
                    "text",
                    text=props.subtitle,
                    style={"color": self.theme.muted, "fontSize": "14px"},
                )
            )
        parts.append(
            node(
                "text",
                text=props.content or "Card content goes here...",
                style={"color": self.theme.text, "fontSize": "14px"},
            )
        )
        return node(
            "card",
            *parts,
            style={
                **_FILL,
                "overflow": "hidden",
                "backgroundColor": property_color(props, "color"),
                "borderRadius": px(props.border_radius),
                "padding": px(props.padding),
                "boxShadow": shadow,
            },
        )

    def _list(self, props) -> PreviewNode:
        horizontal = props.direction == "horizontal"
        items = []
        for i, item in enumerate(parse_list_items(props.data)):
            texts = node(
                "box",
                node("text", text=item["title"], style={"color": self.theme.heading}),
                node(
                    "text",
                    text=item["subtitle"] or f"Description {i + 1}",
                    style={"color": self.theme.muted, "fontSize": "12px"},
                ),
                style={"flex": "1", "minWidth": "0"},
            )
            icon = resolve_icon_name(item["icon"], LIST_ITEM_ICON)
            row = [node("icon", name=icon), texts]
            if not horizontal:
                chevron = node("icon", style=self._caption(), name="arrow_forward_ios")
                row.append(chevron)
            items.append(
                node(
                    "item",
                    *row,
                    style={
                        "display": "flex",
                        "alignItems": "center",
                        "flexShrink": "0",
                        "width": "192px" if horizontal else "100%",
                        "height": "100%" if horizontal else px(props.item_height),
                        "backgroundColor": self.theme.surface,
                        "border": f"1px solid {self.theme.border}",
                        "borderRadius": "8px",
                    },
                )
            )
        return node(
            "list",
            *items,
            style={
                **_FILL,
                "display": "flex",
                "flexDirection": "row" if horizontal else "column",
                "overflow": "auto" if props.scrollable else "hidden",
            },
        )

    def _icon(self, props) -> PreviewNode:
        return node(
            "box",
            node("icon", name=resolve_icon_name(props.name), size=props.size),
            style={
                **_FILL,
                "display": "flex",
                "alignItems": "center",
                "justifyContent": "center",
                "color": property_color(props, "color"),
            },
        )

    def _container(self, props) -> PreviewNode:
        return node(
            "box",
            node(
                "placeholder",
                style={
                    **_FILL,
                    "border": f"1px dashed {self.theme.border}",
                    "borderRadius": "4px",
                },
            ),
            style={
                **_FILL,
                "backgroundColor": property_color(props, "color"),
                "padding": px(props.padding),
                "margin": px(props.margin),
                "borderRadius": px(props.border_radius),
            },
        )

    def _flex(self, props, direction: str) -> PreviewNode:
        block = (
            {"width": "32px", "height": "32px"}
            if direction == "row"
            else {"width": "96px", "height": "32px"}
        )
        blocks = [
            node(
                "placeholder",
                style={
                    **block,
                    "borderRadius": "4px",
                    "backgroundColor": self.theme.placeholder,
                },
            )
            for _ in range(3)
        ]
        main_axis = parse_main_axis(props.main_axis_alignment)
        cross_axis = parse_cross_axis(props.cross_axis_alignment)
        return node(
            "box",
            *blocks,
            style={
                **_FILL,
                "display": "flex",
                "flexDirection": direction,
                "justifyContent": _JUSTIFY[main_axis],
                "alignItems": _ALIGN_ITEMS[cross_axis],
                "padding": px(props.padding),
                "border": f"1px dashed {self.theme.outline}",
                "gap": "8px",
            },
        )

    def _stack(self, props) -> PreviewNode:
        anchor = parse_stack_alignment(props.alignment)
        layers = [
            node(
                "layer",
                style={
                    **_layer_style(anchor, 0),
                    "width": "64px",
                    "height": "64px",
                    "backgroundColor": self.theme.placeholder,
                },
            ),
            node(
                "layer",
                style={
                    **_layer_style(anchor, 10),
                    "width": "48px",
                    "height": "48px",
                    "backgroundColor": self.theme.border,
                },
            ),
        ]
        return node(
            "box",
            *layers,
            style={
                **_FILL,
                "position": "relative",
                "padding": px(props.padding),
                "border": f"1px dashed {self.theme.outline}",
            },
            alignment=anchor.value,
        )

    def _table(self, props) -> PreviewNode:
        columns, rows = parse_table(props.columns, props.data)
        border_color = property_color(props, "border_color")
        cell_border = {}
        if props.show_border:
            cell_border["border"] = f"1px solid {border_color}"

        sections = []
        if props.show_header:
            sections.append(
                node(
                    "tr",
                    *(
                        node(
                            "th",
                            text=column["title"],
                            style={
                                "width": px(column["width"]),
                                "color": self.theme.text,
                                **cell_border,
                            },
                        )
                        for column in columns
                    ),
                    style={"backgroundColor": property_color(props, "header_color")},
                )
            )
        for index, row in enumerate(rows):
            if props.striped:
                background = property_color(
                    props, "even_row_color" if index % 2 == 0 else "odd_row_color"
                )
            else:
                background = self.theme.surface
            sections.append(
                node(
                    "tr",
                    *(
                        node(
                            "td",
                            text=cell_text(row, column["id"]) or "-",
                            style={"color": self.theme.text, **cell_border},
                        )
                        for column in columns
                    ),
                    style={"backgroundColor": background},
                )
            )

        parts = []
        if props.title:
            parts.append(
                node(
                    "text",
                    text=props.title,
                    style={
                        "color": self.theme.text,
                        "fontWeight": "500",
                        "borderBottom": f"1px solid {self.theme.border}",
                    },
                )
            )
        parts.append(
            node(
                "table",
                *sections,
                style={
                    "width": "100%",
                    "borderCollapse": "collapse" if props.show_border else "separate",
                },
                sortable=props.sortable,
            )
        )
        return node(
            "box",
            *parts,
            style={**_FILL, **_COLUMN, "overflow": "hidden"},
        )


def _layer_style(anchor: StackAlignment, inset: int) -> dict[str, Any]:
    vertical, horizontal = _STACK_PLACEMENT[anchor]
    style: dict[str, Any] = {"position": "absolute", "borderRadius": "4px"}
    translate = []
    if vertical == "start":
        style["top"] = px(inset)
    elif vertical == "end":
        style["bottom"] = px(inset)
    else:
        style["top"] = f"calc(50% + {inset}px)" if inset else "50%"
        translate.append("translateY(-50%)")
    if horizontal == "start":
        style["left"] = px(inset)
    elif horizontal == "end":
        style["right"] = px(inset)
    else:
        style["left"] = f"calc(50% + {inset}px)" if inset else "50%"
        translate.append("translateX(-50%)")
    if translate:
        style["transform"] = " ".join(translate)
    return style


def render(element: DesignElement, dark_mode: bool = False) -> PreviewNode:
    """Render a single element to a preview tree.

    Args:
        element: A canonical element.
        dark_mode: Use the dark palette for chrome.

    Returns:
        Root PreviewNode filling the element's box.
    """
    return PreviewRenderer(dark_mode).render(element)


def render_screen(screen: Screen, dark_mode: bool = False) -> dict[str, PreviewNode]:
    """Render every element of a screen, keyed by element id.

    Each value is a positioned node at the element's literal geometry.
    """
    return PreviewRenderer(dark_mode).render_screen(screen)


def render_canvas(screen: Screen, dark_mode: bool = False) -> PreviewNode:
    """Render a screen as a single canvas node."""
    return PreviewRenderer(dark_mode).render_canvas(screen)


__all__ = [
    "PreviewNode",
    "PreviewRenderer",
    "Theme",
    "LIGHT_THEME",
    "DARK_THEME",
    "node",
    "px",
    "render",
    "render_screen",
    "render_canvas",
]

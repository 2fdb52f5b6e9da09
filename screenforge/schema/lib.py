"""Authoritative Schema Module for design components.

This module serves as the single source of truth for everything known about
a component type:
- Default geometry used when an element is placed on the canvas
- Size floors enforced when untrusted elements are sanitized
- A typed property record per type, whose field defaults form the
  default property bag
- Ordered editor descriptors consumed by the properties panel

All tables are built once at import time and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Fixed logical canvas every element is positioned on
CANVAS_WIDTH = 360
CANVAS_HEIGHT = 640

Number = Union[int, float]


class ComponentType(str, Enum):
    """Closed vocabulary of placeable components.

    Values are the wire names stored in persisted screens and produced by
    the generative collaborator.
    """

    BUTTON = "button"
    TEXT_FIELD = "textField"
    CARD = "card"
    LIST = "list"
    ICON = "icon"
    CONTAINER = "container"
    ROW = "row"
    COLUMN = "column"
    STACK = "stack"
    SWITCH = "switch"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    CHAT_INPUT = "chatInput"
    CHAT_MESSAGE = "chatMessage"
    DROPDOWN = "dropdown"
    INPUT_WITH_LABEL = "inputWithLabel"
    SWITCH_WITH_LABEL = "switchWithLabel"
    RADIO_WITH_LABEL = "radioWithLabel"
    CHECKBOX_WITH_LABEL = "checkboxWithLabel"
    DYNAMIC_TABLE = "dynamicTable"


# Unknown types are coerced to this one
FALLBACK_TYPE = ComponentType.CONTAINER

# Types that receive generated local state when their `interactive` flag is set
INTERACTIVE_TYPES: frozenset[ComponentType] = frozenset(
    {ComponentType.SWITCH, ComponentType.CHECKBOX, ComponentType.DROPDOWN}
)

# Properties holding JSON-encoded sub-structures
STRUCTURED_KEYS: frozenset[str] = frozenset({"options", "columns", "data"})


class EditorKind(str, Enum):
    """Editor widget the properties panel shows for a property."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"
    COLOR = "color"
    SCREEN = "screen"
    OPTIONS = "options"
    COLUMNS = "columns"
    JSON = "json"


class FieldKind(str, Enum):
    """Value kind of a property, derived from its default."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRUCTURED = "structured"


@dataclass(frozen=True)
class SelectOption:
    """One entry of a select-kind editor."""

    label: str
    value: str


@dataclass(frozen=True)
class PropertyDescriptor:
    """Editable property as presented by the properties panel."""

    name: str
    label: str
    kind: EditorKind
    options: tuple[SelectOption, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert descriptor to the panel's JSON shape."""
        data: dict[str, Any] = {
            "name": self.name,
            "label": self.label,
            "type": self.kind.value,
        }
        if self.options:
            data["options"] = [
                {"label": option.label, "value": option.value}
                for option in self.options
            ]
        return data


# === TYPED PROPERTY RECORDS ===


class ComponentProperties(BaseModel):
    """Base for per-type property records.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    keys are preserved as extras so caller-supplied additions survive.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase property bag stored on elements."""
        return self.model_dump(by_alias=True)


class ButtonProperties(ComponentProperties):
    text: str = "Button"
    variant: str = "primary"
    rounded: bool = True
    color: str = "#2196F3"
    text_color: str = "#FFFFFF"
    padding: Number = 16
    navigate_to: str = ""


class TextFieldProperties(ComponentProperties):
    hint: str = "Enter text"
    label: str = "Label"
    has_icon: bool = False
    icon: str = "search"
    validation: bool = False
    validation_message: str = "Please enter a valid value"


class CardProperties(ComponentProperties):
    elevation: Number = 2
    border_radius: Number = 8
    color: str = "#FFFFFF"
    padding: Number = 16
    title: str = "Card Title"
    subtitle: str = "Card Subtitle"
    content: str = (
        "This is the main content of the card. "
        "You can add any text or description here."
    )
    show_image: bool = True
    image_height: Number = 120


class ListProperties(ComponentProperties):
    direction: str = "vertical"
    scrollable: bool = True
    item_count: Number = 5
    item_height: Number = 50
    data: str = (
        '[{"title":"Item 1","subtitle":"Description 1","icon":"star"},'
        '{"title":"Item 2","subtitle":"Description 2","icon":"favorite"},'
        '{"title":"Item 3","subtitle":"Description 3","icon":"home"},'
        '{"title":"Item 4","subtitle":"Description 4","icon":"settings"},'
        '{"title":"Item 5","subtitle":"Description 5","icon":"person"}]'
    )


class IconProperties(ComponentProperties):
    name: str = "star"
    color: str = "#000000"
    size: Number = 24


class ContainerProperties(ComponentProperties):
    color: str = "#E0E0E0"
    padding: Number = 16
    margin: Number = 8
    border_radius: Number = 0


class FlexProperties(ComponentProperties):
    """Shared record for rows and columns."""

    main_axis_alignment: str = "start"
    cross_axis_alignment: str = "center"
    padding: Number = 8


class StackProperties(ComponentProperties):
    alignment: str = "center"
    padding: Number = 8


class SwitchProperties(ComponentProperties):
    label: str = ""
    value: bool = False
    active_color: str = "#2196F3"
    inactive_color: str = "#9E9E9E"
    interactive: bool = False


class CheckboxProperties(ComponentProperties):
    label: str = ""
    value: bool = False
    active_color: str = "#2196F3"
    interactive: bool = False


class RadioProperties(ComponentProperties):
    value: bool = False
    active_color: str = "#2196F3"
    group_value: str = "option1"


class ChatInputProperties(ComponentProperties):
    placeholder: str = "Type a message..."
    button_text: str = "Send"
    button_color: str = "#2196F3"


class ChatMessageProperties(ComponentProperties):
    text: str = "Hello! This is a sample message."
    is_user: bool = True
    avatar: bool = True
    timestamp: bool = True


class DropdownProperties(ComponentProperties):
    label: str = "Select an option"
    placeholder: str = "Choose..."
    options: str = (
        '[{"label":"Option 1","value":"option1"},'
        '{"label":"Option 2","value":"option2"},'
        '{"label":"Option 3","value":"option3"}]'
    )
    value: str = ""
    required: bool = False
    disabled: bool = False
    border_color: str = "#D1D5DB"
    background_color: str = "#FFFFFF"
    interactive: bool = False


class InputWithLabelProperties(ComponentProperties):
    label: str = "Input Label"
    placeholder: str = "Enter text..."
    value: str = ""
    input_type: str = Field(default="text", alias="type")
    required: bool = False
    disabled: bool = False
    border_color: str = "#D1D5DB"
    label_color: str = "#374151"


class SwitchWithLabelProperties(ComponentProperties):
    label: str = "Toggle Switch"
    value: bool = False
    active_color: str = "#2196F3"
    inactive_color: str = "#9E9E9E"
    label_position: str = "right"
    disabled: bool = False
    label_color: str = "#374151"


class RadioWithLabelProperties(ComponentProperties):
    label: str = "Radio Option"
    value: bool = False
    active_color: str = "#2196F3"
    group_value: str = "option1"
    label_position: str = "right"
    disabled: bool = False
    label_color: str = "#374151"


class CheckboxWithLabelProperties(ComponentProperties):
    label: str = "Checkbox Option"
    value: bool = False
    active_color: str = "#2196F3"
    label_position: str = "right"
    disabled: bool = False
    label_color: str = "#374151"


class DynamicTableProperties(ComponentProperties):
    title: str = "Data Table"
    columns: str = (
        '[{"id":"name","title":"Name","width":120},'
        '{"id":"email","title":"Email","width":180},'
        '{"id":"role","title":"Role","width":100}]'
    )
    data: str = (
        '[{"name":"John Doe","email":"john@example.com","role":"Admin"},'
        '{"name":"Jane Smith","email":"jane@example.com","role":"User"},'
        '{"name":"Bob Johnson","email":"bob@example.com","role":"Editor"}]'
    )
    show_header: bool = True
    show_border: bool = True
    striped: bool = True
    header_color: str = "#F3F4F6"
    border_color: str = "#E5E7EB"
    even_row_color: str = "#FFFFFF"
    odd_row_color: str = "#F9FAFB"
    sortable: bool = True


# === EDITOR DESCRIPTORS ===


def _select(name: str, label: str, *pairs: tuple[str, str]) -> PropertyDescriptor:
    return PropertyDescriptor(
        name, label, EditorKind.SELECT, tuple(SelectOption(*p) for p in pairs)
    )


_MAIN_AXIS_SELECT = _select(
    "mainAxisAlignment",
    "Main Axis Alignment",
    ("Start", "start"),
    ("Center", "center"),
    ("End", "end"),
    ("Space Between", "spaceBetween"),
    ("Space Around", "spaceAround"),
    ("Space Evenly", "spaceEvenly"),
)

_CROSS_AXIS_SELECT = _select(
    "crossAxisAlignment",
    "Cross Axis Alignment",
    ("Start", "start"),
    ("Center", "center"),
    ("End", "end"),
    ("Stretch", "stretch"),
)

_LABEL_POSITION_SELECT = _select(
    "labelPosition", "Label Position", ("Left", "left"), ("Right", "right")
)

_FLEX_DESCRIPTORS = (
    _MAIN_AXIS_SELECT,
    _CROSS_AXIS_SELECT,
    PropertyDescriptor("padding", "Padding", EditorKind.NUMBER),
)


# === REGISTRY ===


@dataclass(frozen=True)
class ComponentSchema:
    """Registry entry for one component type.

    Attributes:
        type: The component type described.
        description: One-line summary for palettes and prompts.
        default_width: Width assigned on placement.
        default_height: Height assigned on placement.
        properties_model: Typed property record; its defaults are the
            default property bag.
        descriptors: Editable properties in panel order.
        min_width: Smallest width the sanitizer lets through.
        min_height: Smallest height the sanitizer lets through.
    """

    type: ComponentType
    description: str
    default_width: int
    default_height: int
    properties_model: type[ComponentProperties]
    descriptors: tuple[PropertyDescriptor, ...] = field(default_factory=tuple)
    min_width: int = 50
    min_height: int = 30


COMPONENT_REGISTRY: Mapping[ComponentType, ComponentSchema] = MappingProxyType(
    {
        ComponentType.BUTTON: ComponentSchema(
            type=ComponentType.BUTTON,
            description="Tappable action with optional screen navigation",
            default_width=120,
            default_height=40,
            properties_model=ButtonProperties,
            descriptors=(
                PropertyDescriptor("text", "Text", EditorKind.TEXT),
                _select(
                    "variant",
                    "Variant",
                    ("Primary", "primary"),
                    ("Secondary", "secondary"),
                    ("Outline", "outline"),
                ),
                PropertyDescriptor("rounded", "Rounded", EditorKind.BOOLEAN),
                PropertyDescriptor("color", "Color", EditorKind.COLOR),
                PropertyDescriptor("textColor", "Text Color", EditorKind.COLOR),
                PropertyDescriptor("padding", "Padding", EditorKind.NUMBER),
                PropertyDescriptor(
                    "navigateTo", "Navigate To Screen", EditorKind.SCREEN
                ),
            ),
        ),
        ComponentType.TEXT_FIELD: ComponentSchema(
            type=ComponentType.TEXT_FIELD,
            description="Single-line text entry with label and hint",
            default_width=200,
            default_height=56,
            properties_model=TextFieldProperties,
            descriptors=(
                PropertyDescriptor("hint", "Hint Text", EditorKind.TEXT),
                PropertyDescriptor("label", "Label", EditorKind.TEXT),
                PropertyDescriptor("hasIcon", "Has Icon", EditorKind.BOOLEAN),
                PropertyDescriptor("icon", "Icon", EditorKind.TEXT),
                PropertyDescriptor(
                    "validation", "Enable Validation", EditorKind.BOOLEAN
                ),
                PropertyDescriptor(
                    "validationMessage", "Validation Message", EditorKind.TEXT
                ),
            ),
        ),
        ComponentType.CARD: ComponentSchema(
            type=ComponentType.CARD,
            description="Elevated surface with image, title, subtitle and body",
            default_width=300,
            default_height=200,
            properties_model=CardProperties,
            descriptors=(
                PropertyDescriptor("title", "Title", EditorKind.TEXT),
                PropertyDescriptor("subtitle", "Subtitle", EditorKind.TEXT),
                PropertyDescriptor("content", "Content", EditorKind.TEXT),
                PropertyDescriptor("showImage", "Show Image", EditorKind.BOOLEAN),
                PropertyDescriptor("imageHeight", "Image Height", EditorKind.NUMBER),
                PropertyDescriptor("elevation", "Elevation", EditorKind.NUMBER),
                PropertyDescriptor(
                    "borderRadius", "Border Radius", EditorKind.NUMBER
                ),
                PropertyDescriptor("color", "Background Color", EditorKind.COLOR),
                PropertyDescriptor("padding", "Padding", EditorKind.NUMBER),
            ),
        ),
        ComponentType.LIST: ComponentSchema(
            type=ComponentType.LIST,
            description="Scrollable list of titled items",
            default_width=300,
            default_height=300,
            properties_model=ListProperties,
            descriptors=(
                _select(
                    "direction",
                    "Direction",
                    ("Vertical", "vertical"),
                    ("Horizontal", "horizontal"),
                ),
                PropertyDescriptor("scrollable", "Scrollable", EditorKind.BOOLEAN),
                PropertyDescriptor("itemHeight", "Item Height", EditorKind.NUMBER),
                PropertyDescriptor("data", "List Data", EditorKind.JSON),
            ),
        ),
        ComponentType.ICON: ComponentSchema(
            type=ComponentType.ICON,
            description="Material icon glyph",
            default_width=24,
            default_height=24,
            properties_model=IconProperties,
            descriptors=(
                PropertyDescriptor("name", "Icon Name", EditorKind.TEXT),
                PropertyDescriptor("color", "Color", EditorKind.COLOR),
                PropertyDescriptor("size", "Size", EditorKind.NUMBER),
            ),
            min_width=20,
            min_height=20,
        ),
        ComponentType.CONTAINER: ComponentSchema(
            type=ComponentType.CONTAINER,
            description="Colored box; also the fallback for unknown types",
            default_width=200,
            default_height=200,
            properties_model=ContainerProperties,
            descriptors=(
                PropertyDescriptor("color", "Color", EditorKind.COLOR),
                PropertyDescriptor("padding", "Padding", EditorKind.NUMBER),
                PropertyDescriptor("margin", "Margin", EditorKind.NUMBER),
                PropertyDescriptor(
                    "borderRadius", "Border Radius", EditorKind.NUMBER
                ),
            ),
        ),
        ComponentType.ROW: ComponentSchema(
            type=ComponentType.ROW,
            description="Horizontal flex placeholder",
            default_width=300,
            default_height=50,
            properties_model=FlexProperties,
            descriptors=_FLEX_DESCRIPTORS,
        ),
        ComponentType.COLUMN: ComponentSchema(
            type=ComponentType.COLUMN,
            description="Vertical flex placeholder",
            default_width=200,
            default_height=200,
            properties_model=FlexProperties,
            descriptors=_FLEX_DESCRIPTORS,
        ),
        ComponentType.STACK: ComponentSchema(
            type=ComponentType.STACK,
            description="Overlapping layers anchored to one of nine positions",
            default_width=200,
            default_height=200,
            properties_model=StackProperties,
            descriptors=(
                _select(
                    "alignment",
                    "Alignment",
                    ("Top Left", "topLeft"),
                    ("Top Center", "topCenter"),
                    ("Top Right", "topRight"),
                    ("Center Left", "centerLeft"),
                    ("Center", "center"),
                    ("Center Right", "centerRight"),
                    ("Bottom Left", "bottomLeft"),
                    ("Bottom Center", "bottomCenter"),
                    ("Bottom Right", "bottomRight"),
                ),
                PropertyDescriptor("padding", "Padding", EditorKind.NUMBER),
            ),
        ),
        ComponentType.SWITCH: ComponentSchema(
            type=ComponentType.SWITCH,
            description="On/off toggle, optionally stateful",
            default_width=60,
            default_height=24,
            properties_model=SwitchProperties,
            descriptors=(
                PropertyDescriptor("label", "Label", EditorKind.TEXT),
                PropertyDescriptor("value", "Initial Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                PropertyDescriptor(
                    "inactiveColor", "Inactive Color", EditorKind.COLOR
                ),
                PropertyDescriptor(
                    "interactive", "Interactive", EditorKind.BOOLEAN
                ),
            ),
            min_width=40,
            min_height=20,
        ),
        ComponentType.CHECKBOX: ComponentSchema(
            type=ComponentType.CHECKBOX,
            description="Check box, optionally stateful",
            default_width=24,
            default_height=24,
            properties_model=CheckboxProperties,
            descriptors=(
                PropertyDescriptor("label", "Label", EditorKind.TEXT),
                PropertyDescriptor("value", "Initial Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                PropertyDescriptor(
                    "interactive", "Interactive", EditorKind.BOOLEAN
                ),
            ),
            min_width=20,
            min_height=20,
        ),
        ComponentType.RADIO: ComponentSchema(
            type=ComponentType.RADIO,
            description="Single radio button",
            default_width=24,
            default_height=24,
            properties_model=RadioProperties,
            descriptors=(
                PropertyDescriptor("value", "Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                PropertyDescriptor("groupValue", "Group Value", EditorKind.TEXT),
            ),
            min_width=20,
            min_height=20,
        ),
        ComponentType.CHAT_INPUT: ComponentSchema(
            type=ComponentType.CHAT_INPUT,
            description="Message composer with send button",
            default_width=300,
            default_height=50,
            properties_model=ChatInputProperties,
            descriptors=(
                PropertyDescriptor("placeholder", "Placeholder", EditorKind.TEXT),
                PropertyDescriptor("buttonText", "Button Text", EditorKind.TEXT),
                PropertyDescriptor("buttonColor", "Button Color", EditorKind.COLOR),
            ),
        ),
        ComponentType.CHAT_MESSAGE: ComponentSchema(
            type=ComponentType.CHAT_MESSAGE,
            description="Chat bubble aligned by sender",
            default_width=250,
            default_height=80,
            properties_model=ChatMessageProperties,
            descriptors=(
                PropertyDescriptor("text", "Message Text", EditorKind.TEXT),
                PropertyDescriptor("isUser", "Is User Message", EditorKind.BOOLEAN),
                PropertyDescriptor("avatar", "Show Avatar", EditorKind.BOOLEAN),
                PropertyDescriptor(
                    "timestamp", "Show Timestamp", EditorKind.BOOLEAN
                ),
            ),
        ),
        ComponentType.DROPDOWN: ComponentSchema(
            type=ComponentType.DROPDOWN,
            description="Labeled select box, optionally stateful",
            default_width=200,
            default_height=70,
            properties_model=DropdownProperties,
            descriptors=(
                PropertyDescriptor("label", "Label", EditorKind.TEXT),
                PropertyDescriptor("placeholder", "Placeholder", EditorKind.TEXT),
                PropertyDescriptor("options", "Options", EditorKind.OPTIONS),
                PropertyDescriptor("value", "Initial Value", EditorKind.TEXT),
                PropertyDescriptor("required", "Required", EditorKind.BOOLEAN),
                PropertyDescriptor("disabled", "Disabled", EditorKind.BOOLEAN),
                PropertyDescriptor("borderColor", "Border Color", EditorKind.COLOR),
                PropertyDescriptor(
                    "backgroundColor", "Background Color", EditorKind.COLOR
                ),
                PropertyDescriptor(
                    "interactive", "Interactive", EditorKind.BOOLEAN
                ),
            ),
        ),
        ComponentType.INPUT_WITH_LABEL: ComponentSchema(
            type=ComponentType.INPUT_WITH_LABEL,
            description="Text input with a label above it",
            default_width=200,
            default_height=70,
            properties_model=InputWithLabelProperties,
            descriptors=(
                PropertyDescriptor("label", "Label Text", EditorKind.TEXT),
                PropertyDescriptor("placeholder", "Placeholder", EditorKind.TEXT),
                PropertyDescriptor("value", "Value", EditorKind.TEXT),
                _select(
                    "type",
                    "Input Type",
                    ("Text", "text"),
                    ("Email", "email"),
                    ("Password", "password"),
                    ("Number", "number"),
                    ("Tel", "tel"),
                ),
                PropertyDescriptor("required", "Required", EditorKind.BOOLEAN),
                PropertyDescriptor("disabled", "Disabled", EditorKind.BOOLEAN),
                PropertyDescriptor("borderColor", "Border Color", EditorKind.COLOR),
                PropertyDescriptor("labelColor", "Label Color", EditorKind.COLOR),
            ),
        ),
        ComponentType.SWITCH_WITH_LABEL: ComponentSchema(
            type=ComponentType.SWITCH_WITH_LABEL,
            description="Switch with a side label",
            default_width=200,
            default_height=40,
            properties_model=SwitchWithLabelProperties,
            descriptors=(
                PropertyDescriptor("label", "Label Text", EditorKind.TEXT),
                PropertyDescriptor("value", "Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                PropertyDescriptor(
                    "inactiveColor", "Inactive Color", EditorKind.COLOR
                ),
                _LABEL_POSITION_SELECT,
                PropertyDescriptor("disabled", "Disabled", EditorKind.BOOLEAN),
                PropertyDescriptor("labelColor", "Label Color", EditorKind.COLOR),
            ),
        ),
        ComponentType.RADIO_WITH_LABEL: ComponentSchema(
            type=ComponentType.RADIO_WITH_LABEL,
            description="Radio button with a side label",
            default_width=200,
            default_height=40,
            properties_model=RadioWithLabelProperties,
            descriptors=(
                PropertyDescriptor("label", "Label Text", EditorKind.TEXT),
                PropertyDescriptor("value", "Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                PropertyDescriptor("groupValue", "Group Value", EditorKind.TEXT),
                _LABEL_POSITION_SELECT,
                PropertyDescriptor("disabled", "Disabled", EditorKind.BOOLEAN),
                PropertyDescriptor("labelColor", "Label Color", EditorKind.COLOR),
            ),
        ),
        ComponentType.CHECKBOX_WITH_LABEL: ComponentSchema(
            type=ComponentType.CHECKBOX_WITH_LABEL,
            description="Check box with a side label",
            default_width=200,
            default_height=40,
            properties_model=CheckboxWithLabelProperties,
            descriptors=(
                PropertyDescriptor("label", "Label Text", EditorKind.TEXT),
                PropertyDescriptor("value", "Value", EditorKind.BOOLEAN),
                PropertyDescriptor("activeColor", "Active Color", EditorKind.COLOR),
                _LABEL_POSITION_SELECT,
                PropertyDescriptor("disabled", "Disabled", EditorKind.BOOLEAN),
                PropertyDescriptor("labelColor", "Label Color", EditorKind.COLOR),
            ),
        ),
        ComponentType.DYNAMIC_TABLE: ComponentSchema(
            type=ComponentType.DYNAMIC_TABLE,
            description="Data table driven by column and row JSON",
            default_width=350,
            default_height=200,
            properties_model=DynamicTableProperties,
            descriptors=(
                PropertyDescriptor("title", "Table Title", EditorKind.TEXT),
                PropertyDescriptor("columns", "Columns", EditorKind.COLUMNS),
                PropertyDescriptor("data", "Table Data", EditorKind.JSON),
                PropertyDescriptor("showHeader", "Show Header", EditorKind.BOOLEAN),
                PropertyDescriptor("showBorder", "Show Border", EditorKind.BOOLEAN),
                PropertyDescriptor("striped", "Striped Rows", EditorKind.BOOLEAN),
                PropertyDescriptor("sortable", "Sortable", EditorKind.BOOLEAN),
                PropertyDescriptor("headerColor", "Header Color", EditorKind.COLOR),
                PropertyDescriptor("borderColor", "Border Color", EditorKind.COLOR),
                PropertyDescriptor(
                    "evenRowColor", "Even Row Color", EditorKind.COLOR
                ),
                PropertyDescriptor("oddRowColor", "Odd Row Color", EditorKind.COLOR),
            ),
        ),
    }
)


def _field_kind(key: str, value: Any) -> FieldKind:
    # bool is checked before int: bool is an int subclass
    if isinstance(value, bool):
        return FieldKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldKind.NUMBER
    if key in STRUCTURED_KEYS:
        return FieldKind.STRUCTURED
    return FieldKind.TEXT


# Default bags and field kinds, computed once
_DEFAULTS: Mapping[ComponentType, Mapping[str, Any]] = MappingProxyType(
    {
        ct: MappingProxyType(schema.properties_model().to_wire())
        for ct, schema in COMPONENT_REGISTRY.items()
    }
)

_FIELD_KINDS: Mapping[ComponentType, Mapping[str, FieldKind]] = MappingProxyType(
    {
        ct: MappingProxyType({k: _field_kind(k, v) for k, v in defaults.items()})
        for ct, defaults in _DEFAULTS.items()
    }
)


# === LOOKUP FUNCTIONS ===


def get_schema(component_type: ComponentType) -> ComponentSchema:
    """Get the registry entry for a component type.

    Raises:
        KeyError: If component type not found in registry.
    """
    return COMPONENT_REGISTRY[component_type]


def get_default_width(component_type: ComponentType) -> int:
    """Width assigned when an element of this type is placed."""
    return COMPONENT_REGISTRY[component_type].default_width


def get_default_height(component_type: ComponentType) -> int:
    """Height assigned when an element of this type is placed."""
    return COMPONENT_REGISTRY[component_type].default_height


def get_min_size(component_type: ComponentType) -> tuple[int, int]:
    """Smallest ``(width, height)`` an element of this type may have."""
    schema = COMPONENT_REGISTRY[component_type]
    return schema.min_width, schema.min_height


def get_default_properties(component_type: ComponentType) -> dict[str, Any]:
    """Get a fresh copy of the default property bag for a type.

    Every key the renderer or generator reads for the type is present.
    """
    return dict(_DEFAULTS[component_type])


def get_field_kinds(component_type: ComponentType) -> Mapping[str, FieldKind]:
    """Map each default property key to its value kind."""
    return _FIELD_KINDS[component_type]


def get_numeric_keys(component_type: ComponentType) -> frozenset[str]:
    """Property keys holding numbers (padding, sizes, radii, ...)."""
    return frozenset(
        key
        for key, kind in _FIELD_KINDS[component_type].items()
        if kind is FieldKind.NUMBER
    )


def get_property_descriptors(
    component_type: ComponentType,
) -> tuple[PropertyDescriptor, ...]:
    """Editable properties for a type, in panel order."""
    return COMPONENT_REGISTRY[component_type].descriptors


def resolve_component_type(value: Any) -> ComponentType | None:
    """Resolve a raw value to a member of the closed vocabulary.

    Matching is exact on the wire name; anything else returns None.
    """
    if isinstance(value, ComponentType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return ComponentType(value)
    except ValueError:
        return None


def is_interactive_type(component_type: ComponentType) -> bool:
    """Check whether a type can carry generated local state."""
    return component_type in INTERACTIVE_TYPES


# === SCHEMA GENERATION ===


class DesignElementSchema(BaseModel):
    """Pydantic model for element JSON Schema generation.

    Mirrors the IR DesignElement but carries field documentation for
    prompting the generative collaborator.
    """

    type: ComponentType = Field(
        ...,
        description="Component type from the closed palette",
    )
    x: int = Field(
        default=20,
        ge=0,
        le=CANVAS_WIDTH,
        description="Left edge in logical canvas units",
    )
    y: int = Field(
        default=50,
        ge=0,
        le=CANVAS_HEIGHT,
        description="Top edge in logical canvas units",
    )
    width: int = Field(
        default=100,
        ge=20,
        le=CANVAS_WIDTH,
        description="Width in logical units; x + width must fit the canvas",
    )
    height: int = Field(
        default=50,
        ge=20,
        le=CANVAS_HEIGHT,
        description="Height in logical units; y + height must fit the canvas",
    )
    properties: dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Per-type property bag with camelCase keys; options, columns and "
            "data may be JSON strings or arrays"
        ),
    )

    model_config = {"use_enum_values": True}


def export_json_schema() -> dict[str, Any]:
    """Export the element record JSON Schema.

    Returns:
        JSON Schema dict suitable for validation or LLM prompts.
    """
    return DesignElementSchema.model_json_schema()


def export_component_enum_schema() -> dict[str, Any]:
    """Export schema for ComponentType enum with descriptions.

    Returns:
        Dict mapping component values to their descriptions.
    """
    return {ct.value: COMPONENT_REGISTRY[ct].description for ct in ComponentType}


def export_component_catalog() -> dict[str, Any]:
    """Export the palette as plain data for the properties panel.

    Returns:
        Dict keyed by type value with default geometry, size floors,
        default properties and editor descriptors.
    """
    return {
        ct.value: {
            "description": schema.description,
            "defaultWidth": schema.default_width,
            "defaultHeight": schema.default_height,
            "minWidth": schema.min_width,
            "minHeight": schema.min_height,
            "properties": get_default_properties(ct),
            "editors": [d.to_dict() for d in schema.descriptors],
        }
        for ct, schema in COMPONENT_REGISTRY.items()
    }


def export_llm_schema() -> dict[str, Any]:
    """Export an LLM-oriented schema with canvas bounds and an example.

    This schema is designed for injection into prompts that ask for a
    flat list of positioned elements.

    Returns:
        Dict with schema, component descriptions, defaults and an example.
    """
    return {
        "schema": export_json_schema(),
        "component_types": export_component_enum_schema(),
        "canvas": {"width": CANVAS_WIDTH, "height": CANVAS_HEIGHT},
        "defaults": {
            ct.value: get_default_properties(ct) for ct in COMPONENT_REGISTRY
        },
        "examples": {
            "login": [
                {
                    "type": "inputWithLabel",
                    "x": 20,
                    "y": 80,
                    "width": 320,
                    "height": 70,
                    "properties": {"label": "Email", "type": "email"},
                },
                {
                    "type": "button",
                    "x": 20,
                    "y": 170,
                    "width": 320,
                    "height": 48,
                    "properties": {"text": "Sign In", "navigateTo": "home"},
                },
            ],
        },
    }


__all__ = [
    # Constants
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "FALLBACK_TYPE",
    "INTERACTIVE_TYPES",
    "STRUCTURED_KEYS",
    # Enums
    "ComponentType",
    "EditorKind",
    "FieldKind",
    # Descriptors
    "SelectOption",
    "PropertyDescriptor",
    # Property records
    "ComponentProperties",
    "ButtonProperties",
    "TextFieldProperties",
    "CardProperties",
    "ListProperties",
    "IconProperties",
    "ContainerProperties",
    "FlexProperties",
    "StackProperties",
    "SwitchProperties",
    "CheckboxProperties",
    "RadioProperties",
    "ChatInputProperties",
    "ChatMessageProperties",
    "DropdownProperties",
    "InputWithLabelProperties",
    "SwitchWithLabelProperties",
    "RadioWithLabelProperties",
    "CheckboxWithLabelProperties",
    "DynamicTableProperties",
    # Registry
    "ComponentSchema",
    "COMPONENT_REGISTRY",
    # Lookup functions
    "get_schema",
    "get_default_width",
    "get_default_height",
    "get_min_size",
    "get_default_properties",
    "get_field_kinds",
    "get_numeric_keys",
    "get_property_descriptors",
    "resolve_component_type",
    "is_interactive_type",
    # Schema generation
    "DesignElementSchema",
    "export_json_schema",
    "export_component_enum_schema",
    "export_component_catalog",
    "export_llm_schema",
]

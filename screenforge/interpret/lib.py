"""Interpretation rules shared by the preview renderer and the code generator.

Both consumers must agree on how alignment keywords, JSON-encoded
sub-structures, colors and icon names are read from an element's property
bag, and on the literal colors that do not change with the theme. This
module is the one place those rules live.

Structured values (dropdown options, table columns and rows, list items)
arrive either as JSON text or as native lists. Anything that fails to decode
or has the wrong shape is replaced by a fixed fallback dataset so that both
consumers always have something to draw.
"""

import json
import re
from enum import Enum
from typing import Any

from screenforge.color import normalize_hex
from screenforge.core.log import get_logger
from screenforge.schema import ComponentProperties

logger = get_logger(__name__)

DEFAULT_COLUMN_WIDTH = 120

DEFAULT_ICON = "star"
LIST_ITEM_ICON = "circle"

# Literal colors drawn the same way in every theme
USER_BUBBLE_COLOR = "#3B82F6"
USER_BUBBLE_TEXT = "#FFFFFF"
OTHER_BUBBLE_COLOR = "#E5E7EB"
OTHER_BUBBLE_TEXT = "#1F2937"
USER_AVATAR_COLOR = "#93C5FD"
OTHER_AVATAR_COLOR = "#D1D5DB"
SECONDARY_BUTTON_COLOR = "#E5E7EB"
SECONDARY_BUTTON_TEXT = "#1F2937"
SAMPLE_TIMESTAMP = "12:34 PM"

_ICON_NAME = re.compile(r"^[a-z_][a-z0-9_]*$")


# === ALIGNMENT ===


class MainAxis(str, Enum):
    """Distribution of children along a flex container's main axis."""

    START = "start"
    CENTER = "center"
    END = "end"
    SPACE_BETWEEN = "spaceBetween"
    SPACE_AROUND = "spaceAround"
    SPACE_EVENLY = "spaceEvenly"


class CrossAxis(str, Enum):
    """Placement of children across a flex container's main axis."""

    START = "start"
    CENTER = "center"
    END = "end"
    STRETCH = "stretch"


class StackAlignment(str, Enum):
    """Anchor for the layers of a stack."""

    TOP_LEFT = "topLeft"
    TOP_CENTER = "topCenter"
    TOP_RIGHT = "topRight"
    CENTER_LEFT = "centerLeft"
    CENTER = "center"
    CENTER_RIGHT = "centerRight"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_CENTER = "bottomCenter"
    BOTTOM_RIGHT = "bottomRight"


def _keyword(value: Any) -> str:
    """Fold camelCase, kebab-case and snake_case spellings together."""
    if not isinstance(value, str):
        return ""
    return value.strip().replace("-", "").replace("_", "").lower()


def _lookup(enum_cls: type[Enum]) -> dict[str, Any]:
    return {_keyword(member.value): member for member in enum_cls}


_MAIN_AXIS_LOOKUP = _lookup(MainAxis)
_CROSS_AXIS_LOOKUP = _lookup(CrossAxis)
_STACK_LOOKUP = _lookup(StackAlignment)


def parse_main_axis(value: Any) -> MainAxis:
    """Parse a main-axis keyword; unknown values mean ``start``.

    Example:
        >>> parse_main_axis("space-between")
        <MainAxis.SPACE_BETWEEN: 'spaceBetween'>
    """
    return _MAIN_AXIS_LOOKUP.get(_keyword(value), MainAxis.START)


def parse_cross_axis(value: Any) -> CrossAxis:
    """Parse a cross-axis keyword; unknown values mean ``start``."""
    return _CROSS_AXIS_LOOKUP.get(_keyword(value), CrossAxis.START)


def parse_stack_alignment(value: Any) -> StackAlignment:
    """Parse a stack anchor keyword; unknown values mean ``topLeft``."""
    return _STACK_LOOKUP.get(_keyword(value), StackAlignment.TOP_LEFT)


# === STRUCTURED SUB-PROPERTIES ===

_FALLBACK_OPTIONS: tuple[dict[str, str], ...] = (
    {"label": "Option 1", "value": "option1"},
    {"label": "Option 2", "value": "option2"},
)

_FALLBACK_COLUMNS: tuple[dict[str, Any], ...] = (
    {"id": "name", "title": "Name", "width": 120},
    {"id": "email", "title": "Email", "width": 180},
)

_FALLBACK_ROWS: tuple[dict[str, Any], ...] = (
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
)

_FALLBACK_LIST_ITEMS: tuple[dict[str, str], ...] = (
    {"title": "Item 1", "subtitle": "Description 1", "icon": "star"},
    {"title": "Item 2", "subtitle": "Description 2", "icon": "favorite"},
)


def _copy(dataset: tuple[dict[str, Any], ...]) -> list[dict[str, Any]]:
    return [dict(entry) for entry in dataset]


def _decode_records(value: Any) -> list[dict[str, Any]] | None:
    """Decode a JSON text or native list into a list of dicts.

    Returns:
        The records, or None when the value is not a list of objects.
    """
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return None
    if not isinstance(value, list):
        return None
    if not all(isinstance(entry, dict) for entry in value):
        return None
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _width(value: Any) -> int | float:
    if isinstance(value, bool):
        return DEFAULT_COLUMN_WIDTH
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return DEFAULT_COLUMN_WIDTH
        return int(number) if number.is_integer() else number
    return DEFAULT_COLUMN_WIDTH


def _normalize_options(records: list[dict[str, Any]]) -> list[dict[str, str]] | None:
    options = []
    for record in records:
        label = record.get("label")
        value = record.get("value")
        if label is None and value is None:
            return None
        label_text = _text(label if label is not None else value)
        value_text = _text(value if value is not None else label)
        options.append({"label": label_text, "value": value_text})
    return options


def _normalize_columns(records: list[dict[str, Any]]) -> list[dict[str, Any]] | None:
    columns = []
    for record in records:
        column_id = record.get("id")
        if column_id is None or column_id == "":
            return None
        column_id = _text(column_id)
        title = record.get("title")
        columns.append(
            {
                "id": column_id,
                "title": _text(title) if title is not None else column_id,
                "width": _width(record.get("width")),
            }
        )
    return columns


def parse_options(value: Any) -> list[dict[str, str]]:
    """Read dropdown options as ``{label, value}`` pairs.

    Entries missing one of the pair borrow the other. An entry with neither,
    a non-object entry or undecodable JSON yields the two-option fallback.
    """
    records = _decode_records(value)
    options = _normalize_options(records) if records is not None else None
    if options is None:
        logger.debug(f"Malformed options, using fallback: {value!r}")
        return _copy(_FALLBACK_OPTIONS)
    return options


def parse_columns(value: Any) -> list[dict[str, Any]]:
    """Read table columns as ``{id, title, width}`` records.

    Title defaults to the id and width to 120.
    """
    records = _decode_records(value)
    columns = _normalize_columns(records) if records is not None else None
    if columns is None:
        logger.debug(f"Malformed columns, using fallback: {value!r}")
        return _copy(_FALLBACK_COLUMNS)
    return columns


def parse_rows(value: Any) -> list[dict[str, Any]]:
    """Read table rows as plain dicts keyed by column id."""
    records = _decode_records(value)
    if records is None:
        logger.debug(f"Malformed rows, using fallback: {value!r}")
        return _copy(_FALLBACK_ROWS)
    return [dict(record) for record in records]


def parse_table(
    columns: Any, rows: Any
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Read columns and rows together.

    If either half is malformed, both fall back so that the fallback rows
    always line up with the fallback columns.
    """
    column_records = _decode_records(columns)
    parsed_columns = (
        _normalize_columns(column_records) if column_records is not None else None
    )
    row_records = _decode_records(rows)
    if parsed_columns is None or row_records is None:
        logger.debug("Malformed table data, using fallback table")
        return _copy(_FALLBACK_COLUMNS), _copy(_FALLBACK_ROWS)
    return parsed_columns, [dict(record) for record in row_records]


def parse_list_items(value: Any) -> list[dict[str, str]]:
    """Read list items as ``{title, subtitle, icon}`` records.

    Missing titles are numbered from 1 by position.
    """
    records = _decode_records(value)
    if records is None:
        logger.debug(f"Malformed list data, using fallback: {value!r}")
        return _copy(_FALLBACK_LIST_ITEMS)
    items = []
    for i, record in enumerate(records):
        title = record.get("title")
        items.append(
            {
                "title": _text(title) if title else f"Item {i + 1}",
                "subtitle": _text(record.get("subtitle")),
                "icon": _text(record.get("icon")),
            }
        )
    return items


def dump_structured(value: Any) -> str:
    """Encode a structured value as compact JSON text.

    Example:
        >>> dump_structured([{"label": "A", "value": "a"}])
        '[{"label":"A","value":"a"}]'
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


# === COLORS AND CELLS ===


def resolve_color(value: Any, fallback: str) -> str:
    """Resolve a color property to canonical ``#RRGGBB``.

    Args:
        value: The property value as stored on the element.
        fallback: The type's default color, used when the value is missing
            or blank.

    Returns:
        Upper-case hex color. Present but malformed values become black.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return normalize_hex(fallback)
    return normalize_hex(value)


def property_color(props: ComponentProperties, field: str) -> str:
    """Resolve a color field of a typed property record.

    Blank values fall back to the field's declared default.

    Example:
        >>> property_color(ButtonProperties(color=""), "color")
        '#2196F3'
    """
    default = type(props).model_fields[field].default
    return resolve_color(getattr(props, field), default)


def cell_text(row: dict[str, Any], column_id: str) -> str:
    """Text shown in a table cell; missing cells are blank."""
    return _text(row.get(column_id))


# === ICONS ===


def resolve_icon_name(name: Any, fallback: str = DEFAULT_ICON) -> str:
    """Resolve a Material icon name, replacing names that are not identifiers.

    Example:
        >>> resolve_icon_name("Arrow Back")
        'star'
        >>> resolve_icon_name("", LIST_ITEM_ICON)
        'circle'
    """
    if isinstance(name, str) and _ICON_NAME.match(name):
        return name
    return fallback


__all__ = [
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_ICON",
    "LIST_ITEM_ICON",
    "USER_BUBBLE_COLOR",
    "USER_BUBBLE_TEXT",
    "OTHER_BUBBLE_COLOR",
    "OTHER_BUBBLE_TEXT",
    "USER_AVATAR_COLOR",
    "OTHER_AVATAR_COLOR",
    "SECONDARY_BUTTON_COLOR",
    "SECONDARY_BUTTON_TEXT",
    "SAMPLE_TIMESTAMP",
    "MainAxis",
    "CrossAxis",
    "StackAlignment",
    "parse_main_axis",
    "parse_cross_axis",
    "parse_stack_alignment",
    "parse_options",
    "parse_columns",
    "parse_rows",
    "parse_table",
    "parse_list_items",
    "dump_structured",
    "resolve_color",
    "property_color",
    "cell_text",
    "resolve_icon_name",
]

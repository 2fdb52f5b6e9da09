"""Shared interpretation of alignment keywords, structured JSON, colors and icons."""

from .lib import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_ICON,
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

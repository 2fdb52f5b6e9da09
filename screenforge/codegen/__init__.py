"""Codegen module - Flutter application source from screen designs."""

from .lib import (
    DEFAULT_APP_TITLE,
    EMPTY_BODY_MARKER,
    FlutterGenerator,
    GenerationResult,
    GenerationWarning,
    assign_class_names,
    class_name,
    dart_color,
    dart_double,
    dart_icon,
    dart_string,
    generate,
    generate_with_warnings,
)

__all__ = [
    "DEFAULT_APP_TITLE",
    "EMPTY_BODY_MARKER",
    "GenerationWarning",
    "GenerationResult",
    "FlutterGenerator",
    "dart_string",
    "dart_double",
    "dart_color",
    "dart_icon",
    "class_name",
    "assign_class_names",
    "generate",
    "generate_with_warnings",
]

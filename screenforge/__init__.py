"""screenforge: screen design IR, sanitizer, previews and Flutter export."""

from screenforge.codegen import FlutterGenerator, GenerationResult, generate
from screenforge.ir import DesignElement, Screen, create_element, load_screens
from screenforge.render import PreviewNode, render, render_screen
from screenforge.sanitize import sanitize
from screenforge.schema import ComponentType, export_json_schema
from screenforge.validation import ValidationError, is_valid, validate_screens

__all__ = [
    # IR
    "DesignElement",
    "Screen",
    "ComponentType",
    "create_element",
    "load_screens",
    "export_json_schema",
    # Ingestion
    "sanitize",
    # Preview
    "PreviewNode",
    "render",
    "render_screen",
    # Code generation
    "FlutterGenerator",
    "GenerationResult",
    "generate",
    # Validation
    "validate_screens",
    "is_valid",
    "ValidationError",
]

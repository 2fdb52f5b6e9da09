"""Command-line interface for screenforge.

Provides ``python . <command>`` (and the ``screenforge`` console script) for
ingesting generated element batches, exporting Flutter source, inspecting
structural previews, dumping the component schema and validating designs.

Design files are JSON: either a list of screens or ``{"screens": [...]}``.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from screenforge.codegen import FlutterGenerator
from screenforge.config import (
    EnvVar,
    get_environment,
    get_log_level,
    get_output_dir,
)
from screenforge.core.log import get_logger, setup_logging
from screenforge.ir import Screen, dump_screens, load_screens
from screenforge.output import format_design_tree, format_preview_tree
from screenforge.render import PreviewRenderer
from screenforge.sanitize import sanitize
from screenforge.schema import (
    export_component_catalog,
    export_json_schema,
    export_llm_schema,
    resolve_component_type,
)
from screenforge.validation import validate_screens

logger = get_logger("cli")


# =============================================================================
# Helpers
# =============================================================================


def _read_json(path: Path) -> Any:
    """Read a JSON document from a file, or stdin when path is ``-``."""
    if str(path) == "-":
        return json.load(sys.stdin)
    return json.loads(path.read_text(encoding="utf-8"))


def _load_design(path: Path) -> list[Screen]:
    screens = load_screens(_read_json(path))
    logger.debug(f"Loaded {len(screens)} screen(s) from {path}")
    return screens


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


# =============================================================================
# Sanitize Command
# =============================================================================


def cmd_sanitize(args: argparse.Namespace) -> int:
    """Handle the sanitize command."""
    try:
        data = _read_json(args.file)
        if isinstance(data, dict) and "elements" in data:
            data = data["elements"]
        prefix = get_environment(EnvVar.ID_PREFIX, override=args.prefix)
        elements = sanitize(data, id_prefix=prefix)

        if args.screen:
            screen = Screen(
                id=args.screen, name=args.name or args.screen, elements=elements
            )
            _print_json(dump_screens([screen]))
        else:
            _print_json([element.model_dump(mode="json") for element in elements])

        logger.info(f"Sanitized {len(elements)} element(s)")
        return 0

    except Exception as e:
        logger.error(f"Sanitize failed: {e}")
        return 1


def handle_sanitize_command(argv: list[str]) -> int:
    """Handle sanitize-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . sanitize",
        description="Coerce a generated element batch into canonical elements",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="JSON list of raw elements, or {\"elements\": [...]} (- for stdin)",
    )
    parser.add_argument(
        "--prefix",
        "-p",
        type=str,
        default=None,
        help="Id prefix for sanitized elements (default: SCREENFORGE_ID_PREFIX)",
    )
    parser.add_argument(
        "--screen",
        "-s",
        type=str,
        default=None,
        help="Wrap the elements in a screen with this id",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Display name for --screen (defaults to its id)",
    )
    return cmd_sanitize(parser.parse_args(argv))


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    try:
        screens = _load_design(args.file)
        dark_mode = get_environment(EnvVar.DARK_MODE, override=args.dark or None)
        app_title = get_environment(EnvVar.APP_TITLE, override=args.title)

        generator = FlutterGenerator(dark_mode=dark_mode, app_title=app_title)
        result = generator.generate_with_warnings(screens)

        if args.tree:
            logger.info(f"Design:\n{format_design_tree(screens)}")

        if args.output:
            output = args.output
            if not output.is_absolute():
                output = get_output_dir() / output
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result.code, encoding="utf-8")
            logger.info(f"Flutter source saved to {output}")
        else:
            print(result.code, end="")

        if result.has_warnings:
            logger.info(f"Generated with {len(result.warnings)} warning(s)")
        return 0

    except Exception as e:
        logger.error(f"Generation failed: {e}")
        return 1


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate a Flutter application from a design file",
    )
    parser.add_argument("file", type=Path, help="Design JSON file (- for stdin)")
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Generate the dark theme (default: SCREENFORGE_DARK_MODE)",
    )
    parser.add_argument(
        "--title",
        "-t",
        type=str,
        default=None,
        help="MaterialApp title (default: SCREENFORGE_APP_TITLE)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Log a summary tree of the design",
    )
    return cmd_generate(parser.parse_args(argv))


# =============================================================================
# Preview Command
# =============================================================================


def cmd_preview(args: argparse.Namespace) -> int:
    """Handle the preview command."""
    try:
        screens = _load_design(args.file)
        if args.screen:
            screens = [screen for screen in screens if screen.id == args.screen]
            if not screens:
                logger.error(f"Screen not found: {args.screen}")
                return 1

        dark_mode = get_environment(EnvVar.DARK_MODE, override=args.dark or None)
        renderer = PreviewRenderer(dark_mode=dark_mode)

        if args.json:
            _print_json(
                {
                    screen.id: {
                        element_id: preview.to_dict()
                        for element_id, preview in renderer.render_screen(
                            screen
                        ).items()
                    }
                    for screen in screens
                }
            )
        else:
            trees = [format_preview_tree(renderer.render_canvas(s)) for s in screens]
            print("\n\n".join(trees))
        return 0

    except Exception as e:
        logger.error(f"Preview failed: {e}")
        return 1


def handle_preview_command(argv: list[str]) -> int:
    """Handle preview-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . preview",
        description="Show structural previews of a design's screens",
    )
    parser.add_argument("file", type=Path, help="Design JSON file (- for stdin)")
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Use the dark palette (default: SCREENFORGE_DARK_MODE)",
    )
    parser.add_argument(
        "--screen",
        "-s",
        type=str,
        default=None,
        help="Only preview the screen with this id",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print preview nodes keyed by element id as JSON",
    )
    return cmd_preview(parser.parse_args(argv))


# =============================================================================
# Schema Command
# =============================================================================


def cmd_schema(args: argparse.Namespace) -> int:
    """Handle the schema command."""
    if args.json_schema:
        _print_json(export_json_schema())
        return 0
    if args.llm:
        _print_json(export_llm_schema())
        return 0

    catalog = export_component_catalog()
    if args.type is None:
        _print_json(catalog)
        return 0

    component_type = resolve_component_type(args.type)
    if component_type is None:
        logger.error(f"Unknown component type: {args.type}")
        logger.info(f"Available types: {', '.join(catalog)}")
        return 1
    _print_json(catalog[component_type.value])
    return 0


def handle_schema_command(argv: list[str]) -> int:
    """Handle schema-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . schema",
        description="Show the component catalog or its JSON Schema",
    )
    parser.add_argument(
        "type",
        nargs="?",
        default=None,
        help="Only show this component type (e.g. button, dynamicTable)",
    )
    parser.add_argument(
        "--json-schema",
        action="store_true",
        help="Print the JSON Schema for design elements",
    )
    parser.add_argument(
        "--llm",
        action="store_true",
        help="Print the schema bundle for prompting a generative model",
    )
    return cmd_schema(parser.parse_args(argv))


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        screens = _load_design(args.file)
        errors = validate_screens(screens)

        if not errors:
            logger.info(f"Design is valid ({len(screens)} screen(s))")
            return 0

        for error in errors:
            print(f"{error.element_id}: [{error.error_type}] {error.message}")
        logger.warning(f"Found {len(errors)} validation error(s)")
        return 1

    except Exception as e:
        logger.error(f"Validation failed: {e}")
        return 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific arguments."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Check a design for geometry, id and navigation problems",
    )
    parser.add_argument("file", type=Path, help="Design JSON file (- for stdin)")
    return cmd_validate(parser.parse_args(argv))


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Commands ===")
    print("  sanitize   Coerce a generated element batch into canonical elements")
    print("  generate   Generate a Flutter application from a design file")
    print("  preview    Show structural previews of a design's screens")
    print("  schema     Show the component catalog or its JSON Schema")
    print("  validate   Check a design for geometry, id and navigation problems")
    print("\nExamples:")
    print("  python . sanitize batch.json --screen home")
    print("  python . generate design.json --dark -o lib/main.dart")
    print("  python . preview design.json --screen home")
    print("  python . schema dynamicTable")
    print("  python . schema --json-schema")
    print("  python . validate design.json")


COMMANDS = {
    "sanitize": handle_sanitize_command,
    "generate": handle_generate_command,
    "preview": handle_preview_command,
    "schema": handle_schema_command,
    "validate": handle_validate_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    load_dotenv()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        show_help()
        return 1

    command, rest_args = argv[0], argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    if command in COMMANDS:
        setup_logging(get_log_level())
        return COMMANDS[command](rest_args)

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


__all__ = ["main", "show_help", "COMMANDS"]

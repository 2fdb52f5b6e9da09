"""Output formatting for design review.

Generates human-readable text representations of screens and preview trees
for command-line feedback, and bundles them with the generated Dart source.
"""

from dataclasses import dataclass, field

from screenforge.codegen import FlutterGenerator, GenerationWarning
from screenforge.ir import DesignElement, Screen
from screenforge.render import PreviewNode
from screenforge.schema import ComponentType


@dataclass
class DesignOutput:
    """Complete output for one design.

    Attributes:
        text_tree: Human-readable summary of every screen.
        dart_code: Generated Flutter source.
        screens: Screens the output was produced from.
        warnings: Generator warnings.
    """

    text_tree: str
    dart_code: str
    screens: list[Screen]
    warnings: list[GenerationWarning] = field(default_factory=list)


def _element_label(element: DesignElement) -> str:
    attrs = [
        element.type.value,
        f"{element.width}x{element.height} @ ({element.x}, {element.y})",
    ]
    if element.type == ComponentType.BUTTON:
        target = element.properties.get("navigateTo")
        if target:
            attrs.append(f"-> {target}")
    return f"{element.id} [{', '.join(attrs)}]"


def format_screen_tree(screen: Screen) -> str:
    """Format a screen and its elements as a tree.

    Example output:
        Login [login, 2 elements]
        ├── email [inputWithLabel, 320x70 @ (20, 240)]
        └── submit [button, 120x40 @ (120, 420), -> home]

    Args:
        screen: Screen to format.

    Returns:
        Formatted tree string.
    """
    count = len(screen.elements)
    noun = "element" if count == 1 else "elements"
    lines = [f"{screen.name} [{screen.id}, {count} {noun}]"]
    for i, element in enumerate(screen.elements):
        connector = "└── " if i == count - 1 else "├── "
        lines.append(f"{connector}{_element_label(element)}")
    return "\n".join(lines)


def format_design_tree(screens: list[Screen]) -> str:
    """Format every screen of a design, separated by blank lines."""
    return "\n\n".join(format_screen_tree(screen) for screen in screens)


def format_preview_tree(node: PreviewNode) -> str:
    """Format a structural preview tree.

    Example output:
        button {navigateTo=home}
        ├── text "Login"
        └── indicator {name=chevron_right}

    Args:
        node: Root PreviewNode to format.

    Returns:
        Formatted tree string.
    """
    lines: list[str] = []
    _format_node(node, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_node(
    node: PreviewNode,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    """Recursively format a node and its children."""
    # Build connector
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    node_str = node.tag
    if node.text is not None:
        node_str += f' "{node.text}"'
    if node.attrs:
        attrs = ", ".join(f"{key}={value}" for key, value in node.attrs.items())
        node_str += f" {{{attrs}}}"
    lines.append(f"{prefix}{connector}{node_str}")

    # Format children
    for i, child in enumerate(node.children):
        is_last_child = i == len(node.children) - 1
        _format_node(child, lines, child_prefix, is_last_child)


class OutputGenerator:
    """Generates the text summary and Dart source for a design."""

    def __init__(self, dark_mode: bool = False, app_title: str | None = None):
        """Initialize generator.

        Args:
            dark_mode: Generate the dark theme.
            app_title: MaterialApp title override.
        """
        self._generator = (
            FlutterGenerator(dark_mode, app_title)
            if app_title
            else FlutterGenerator(dark_mode)
        )

    def generate(self, screens: list[Screen]) -> DesignOutput:
        """Generate output for a design.

        Args:
            screens: Screens in route order.

        Returns:
            DesignOutput with text tree, Dart code and warnings.
        """
        result = self._generator.generate_with_warnings(screens)
        return DesignOutput(
            text_tree=format_design_tree(screens),
            dart_code=result.code,
            screens=screens,
            warnings=result.warnings,
        )


__all__ = [
    "DesignOutput",
    "OutputGenerator",
    "format_screen_tree",
    "format_design_tree",
    "format_preview_tree",
]

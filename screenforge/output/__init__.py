"""Output generation module for design review.

Provides human-readable text representations of screens and preview trees
and bundles them with the generated Flutter source.
"""

from screenforge.output.lib import (
    DesignOutput,
    OutputGenerator,
    format_design_tree,
    format_preview_tree,
    format_screen_tree,
)

__all__ = [
    "DesignOutput",
    "OutputGenerator",
    "format_screen_tree",
    "format_design_tree",
    "format_preview_tree",
]

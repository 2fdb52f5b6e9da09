"""Render module - structural previews of design elements and screens."""

from .lib import (
    DARK_THEME,
    LIGHT_THEME,
    PreviewNode,
    PreviewRenderer,
    Theme,
    node,
    px,
    render,
    render_canvas,
    render_screen,
)

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

"""IR module - screens and absolutely positioned design elements."""

from .lib import (
    DesignElement,
    Screen,
    create_element,
    create_screen,
    dump_screens,
    load_screens,
)

__all__ = [
    "DesignElement",
    "Screen",
    "create_element",
    "create_screen",
    "load_screens",
    "dump_screens",
]

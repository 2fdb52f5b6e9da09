"""Design validation and static analysis.

This module provides validation functions for screens and elements,
detecting issues before export. Sanitized and placed elements always pass
the element checks; persisted or hand-edited designs may not.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from screenforge.ir import DesignElement, Screen
from screenforge.schema import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ComponentType,
    get_default_properties,
    get_min_size,
)


@dataclass
class ValidationError:
    """Represents a validation error in a design.

    Attributes:
        element_id: ID of the element (or screen) with the error.
        message: Human-readable error description.
        error_type: Category of the error.
    """

    element_id: str
    message: str
    error_type: str


def validate_element(element: DesignElement) -> list[ValidationError]:
    """Validate one element against the IR invariants.

    Performs the following checks:
        - Position within the canvas
        - Far edges within the canvas
        - Size at least the type's floor
        - Every default property key present

    Args:
        element: The element to validate.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).
    """
    errors: list[ValidationError] = []

    if not (0 <= element.x <= CANVAS_WIDTH and 0 <= element.y <= CANVAS_HEIGHT):
        errors.append(
            ValidationError(
                element_id=element.id,
                message=f"Position ({element.x}, {element.y}) is off the canvas",
                error_type="out_of_bounds",
            )
        )
    elif element.right > CANVAS_WIDTH or element.bottom > CANVAS_HEIGHT:
        errors.append(
            ValidationError(
                element_id=element.id,
                message=(
                    f"Element extends to ({element.right}, {element.bottom}), "
                    f"past the {CANVAS_WIDTH}x{CANVAS_HEIGHT} canvas"
                ),
                error_type="out_of_bounds",
            )
        )

    min_width, min_height = get_min_size(element.type)
    if element.width < min_width or element.height < min_height:
        errors.append(
            ValidationError(
                element_id=element.id,
                message=(
                    f"Size {element.width}x{element.height} below "
                    f"{element.type.value} minimum {min_width}x{min_height}"
                ),
                error_type="below_min_size",
            )
        )

    defaults = get_default_properties(element.type)
    missing = sorted(set(defaults) - set(element.properties))
    if missing:
        errors.append(
            ValidationError(
                element_id=element.id,
                message=f"Missing properties: {', '.join(missing)}",
                error_type="missing_properties",
            )
        )

    return errors


def validate_screen(
    screen: Screen, screen_ids: Iterable[str] | None = None
) -> list[ValidationError]:
    """Validate every element of a screen and their ids.

    Args:
        screen: The screen to validate.
        screen_ids: Known screen ids. When given, button navigation targets
            are checked against them.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).
    """
    errors: list[ValidationError] = []

    id_counts: dict[str, int] = {}
    for element in screen.elements:
        id_counts[element.id] = id_counts.get(element.id, 0) + 1
        errors.extend(validate_element(element))

    for element_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    element_id=element_id,
                    message=(
                        f"Duplicate ID '{element_id}' appears {count} times "
                        f"on screen '{screen.id}'"
                    ),
                    error_type="duplicate_id",
                )
            )

    if screen_ids is not None:
        errors.extend(_validate_navigation(screen, set(screen_ids)))

    return errors


def validate_screens(screens: list[Screen]) -> list[ValidationError]:
    """Validate a whole design.

    Adds duplicate screen ids and unresolved navigation targets to the
    per-screen checks.

    Example:
        >>> errors = validate_screens(screens)
        >>> for e in errors:
        ...     print(f"{e.element_id}: {e.message}")
    """
    errors: list[ValidationError] = []
    screen_ids = [screen.id for screen in screens]

    seen: set[str] = set()
    for screen_id in screen_ids:
        if screen_id in seen:
            errors.append(
                ValidationError(
                    element_id=screen_id,
                    message=f"Duplicate screen ID '{screen_id}'",
                    error_type="duplicate_screen_id",
                )
            )
        seen.add(screen_id)

    for screen in screens:
        errors.extend(validate_screen(screen, screen_ids))

    return errors


def is_valid(screens: list[Screen]) -> bool:
    """Check if a design is valid.

    Convenience function that returns True if no validation errors exist.
    """
    return not validate_screens(screens)


def _validate_navigation(
    screen: Screen, screen_ids: set[str]
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for element in screen.elements:
        if element.type != ComponentType.BUTTON:
            continue
        target = element.properties.get("navigateTo")
        if isinstance(target, str) and target and target not in screen_ids:
            errors.append(
                ValidationError(
                    element_id=element.id,
                    message=f"Navigation target '{target}' is not a screen",
                    error_type="unresolved_navigation",
                )
            )
    return errors


__all__ = [
    "ValidationError",
    "validate_element",
    "validate_screen",
    "validate_screens",
    "is_valid",
]

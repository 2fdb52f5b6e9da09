"""Sanitizer for untrusted element batches.

Turns arbitrary records, typically produced by a generative model, into
canonical DesignElements. Sanitizing never raises: every malformed field is
replaced, clamped or coerced, and every element that comes out satisfies the
IR invariants:

- the type is a member of the closed vocabulary (unknown types become
  ``container``)
- the element lies entirely on the 360x640 canvas and is at least as large
  as its type's size floor
- the property bag holds every default key for the type

Output ids are positional (``<prefix>-<index>``), so sanitizing an already
sanitized batch returns it unchanged.
"""

import math
from typing import Any

from pydantic import BaseModel

from screenforge.core.log import get_logger
from screenforge.interpret import dump_structured
from screenforge.ir import DesignElement
from screenforge.schema import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FALLBACK_TYPE,
    ComponentType,
    FieldKind,
    get_default_properties,
    get_field_kinds,
    get_min_size,
    resolve_component_type,
)

logger = get_logger(__name__)

# Keys never accepted from outside; ids are reassigned and the IR is flat
DISALLOWED_KEYS: frozenset[str] = frozenset({"id", "children"})

DEFAULT_X = 20
DEFAULT_Y = 50
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 50

_TRUE_WORDS = frozenset({"true", "1", "yes"})
_FALSE_WORDS = frozenset({"false", "0", "no"})


# === VALUE COERCION ===


def _to_number(value: Any) -> float | int | None:
    """Read a finite number from a number or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def coerce_number(value: Any) -> int | float | None:
    """Coerce to a number; integral values become ints.

    Returns:
        The number, or None if the value is not numeric.
    """
    number = _to_number(value)
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def coerce_bool(value: Any) -> bool | None:
    """Coerce booleans, 0/1 and the words true/false/yes/no."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return None


def coerce_text(value: Any) -> str | None:
    """Accept strings as-is and stringify numbers."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    number = coerce_number(value)
    if number is None:
        return None
    return str(number)


def coerce_structured(value: Any) -> str | None:
    """Keep JSON text as-is and encode native lists as compact JSON."""
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        try:
            return dump_structured(value)
        except (TypeError, ValueError):
            return None
    return None


_COERCERS = {
    FieldKind.NUMBER: coerce_number,
    FieldKind.BOOLEAN: coerce_bool,
    FieldKind.TEXT: coerce_text,
    FieldKind.STRUCTURED: coerce_structured,
}


def _is_scalar(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, (str, int, bool))


def coerce_properties(
    component_type: ComponentType, properties: Any
) -> dict[str, Any]:
    """Merge a caller's property bag over the type's defaults.

    Known keys are kept when their value can be coerced to the default's
    kind; otherwise the default stays. Unknown keys are kept when they hold
    a scalar.

    Args:
        component_type: Type whose defaults and value kinds apply.
        properties: Caller-supplied bag; anything but a dict counts as empty.

    Returns:
        A new dict containing every default key.
    """
    merged = get_default_properties(component_type)
    if not isinstance(properties, dict):
        return merged

    kinds = get_field_kinds(component_type)
    for key, value in properties.items():
        if not isinstance(key, str) or value is None:
            continue
        kind = kinds.get(key)
        if kind is None:
            if _is_scalar(value):
                merged[key] = value
            else:
                logger.debug(f"Dropping non-scalar extra property '{key}'")
            continue
        coerced = _COERCERS[kind](value)
        if coerced is None:
            logger.debug(
                f"Property '{key}' of {component_type.value} is not "
                f"{kind.value}: {value!r}, using default"
            )
            continue
        merged[key] = coerced
    return merged


# === GEOMETRY ===


def _coordinate(value: Any, default: int, limit: int) -> int:
    number = _to_number(value)
    if number is None:
        number = default
    return max(0, min(limit, int(round(number))))


def _extent(value: Any, default: int) -> int:
    number = _to_number(value)
    if number is None:
        number = default
    return int(round(number))


def fit_axis(position: int, size: int, floor: int, limit: int) -> tuple[int, int]:
    """Fit one axis of an element onto the canvas.

    The size is raised to the floor and capped at the canvas. If the element
    then overhangs the far edge it is shrunk, but never below the floor; if
    the floor alone still overhangs, the element is moved back.

    Args:
        position: Start coordinate, already within ``[0, limit]``.
        size: Requested extent.
        floor: Minimum extent for the type.
        limit: Canvas extent on this axis.

    Returns:
        ``(position, size)`` with ``position + size <= limit``.

    Example:
        >>> fit_axis(640, 5, 30, 640)
        (610, 30)
    """
    size = max(floor, min(limit, size))
    if position + size > limit:
        size = max(floor, limit - position)
        if position + size > limit:
            position = limit - size
    return position, size


# === SANITIZATION ===


def _as_record(raw: Any) -> dict[str, Any]:
    if isinstance(raw, BaseModel):
        return raw.model_dump(mode="json")
    if isinstance(raw, dict):
        return raw
    return {}


def sanitize_element(raw: Any, element_id: str) -> DesignElement:
    """Sanitize a single element record.

    Args:
        raw: Arbitrary value; non-dicts are treated as an empty record.
        element_id: Id assigned to the resulting element.

    Returns:
        A DesignElement satisfying the IR invariants.
    """
    record = {k: v for k, v in _as_record(raw).items() if k not in DISALLOWED_KEYS}

    component_type = resolve_component_type(record.get("type"))
    if component_type is None:
        logger.warning(
            f"Unsupported element type {record.get('type')!r}, "
            f"using {FALLBACK_TYPE.value}"
        )
        component_type = FALLBACK_TYPE

    min_width, min_height = get_min_size(component_type)
    x, width = fit_axis(
        _coordinate(record.get("x"), DEFAULT_X, CANVAS_WIDTH),
        _extent(record.get("width"), DEFAULT_WIDTH),
        min_width,
        CANVAS_WIDTH,
    )
    y, height = fit_axis(
        _coordinate(record.get("y"), DEFAULT_Y, CANVAS_HEIGHT),
        _extent(record.get("height"), DEFAULT_HEIGHT),
        min_height,
        CANVAS_HEIGHT,
    )

    return DesignElement(
        id=element_id,
        type=component_type,
        x=x,
        y=y,
        width=width,
        height=height,
        properties=coerce_properties(component_type, record.get("properties")),
    )


def sanitize(raw_elements: Any, id_prefix: str = "element") -> list[DesignElement]:
    """Sanitize a batch of untrusted element records.

    Args:
        raw_elements: Expected to be a list; anything else yields no elements.
        id_prefix: Prefix for the positional ids assigned to the output.

    Returns:
        Canonical elements in input order.

    Example:
        >>> [e.type.value for e in sanitize([{"type": "bogus"}, {"type": "button"}])]
        ['container', 'button']
    """
    if not isinstance(raw_elements, list):
        if raw_elements is not None:
            logger.warning(
                f"Expected a list of elements, got {type(raw_elements).__name__}"
            )
        return []

    elements = [
        sanitize_element(raw, f"{id_prefix}-{index}")
        for index, raw in enumerate(raw_elements)
    ]
    logger.debug(f"Sanitized {len(elements)} element(s)")
    return elements


__all__ = [
    "DISALLOWED_KEYS",
    "DEFAULT_X",
    "DEFAULT_Y",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "coerce_number",
    "coerce_bool",
    "coerce_text",
    "coerce_structured",
    "coerce_properties",
    "fit_axis",
    "sanitize_element",
    "sanitize",
]

"""Core IR models for screen designs.

This module defines the Intermediate Representation (IR) shared by every
consumer: the preview renderer, the Flutter code generator, validation and
persistence. A design is a list of screens; each screen holds a flat,
ordered list of absolutely positioned elements on a 360x640 canvas.

Elements produced by the generative collaborator must pass through
``screenforge.sanitize`` before they are trusted. Elements created through
``create_element`` satisfy the IR invariants by construction.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from screenforge.core.log import get_logger
from screenforge.schema import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    ComponentProperties,
    ComponentType,
    get_default_height,
    get_default_properties,
    get_default_width,
    get_schema,
)

logger = get_logger(__name__)


class DesignElement(BaseModel):
    """One absolutely positioned component on a screen.

    Attributes:
        id: Identifier, unique within its screen.
        type: Component type from the closed vocabulary.
        x: Left edge in logical canvas units.
        y: Top edge in logical canvas units.
        width: Width in logical units.
        height: Height in logical units.
        properties: camelCase property bag; always a superset of the
            type's default keys once sanitized.

    Example:
        >>> element = DesignElement(
        ...     id="submit",
        ...     type=ComponentType.BUTTON,
        ...     x=20, y=500, width=320, height=48,
        ...     properties={"text": "Submit"},
        ... )
    """

    id: str = Field(..., description="Identifier unique within the screen")
    type: ComponentType = Field(..., description="Component type")
    x: int = Field(..., description="Left edge in canvas units")
    y: int = Field(..., description="Top edge in canvas units")
    width: int = Field(..., description="Width in canvas units")
    height: int = Field(..., description="Height in canvas units")
    properties: dict[str, Any] = Field(
        default_factory=dict, description="camelCase property bag"
    )

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def typed_properties(self) -> ComponentProperties:
        """Read the property bag through the type's typed record.

        Values that do not validate as-is (numeric strings, ``"yes"`` for a
        flag, native lists for JSON sub-properties) are coerced with the
        sanitizer's rules first; keys that still fail fall back to defaults.

        Returns:
            Instance of the type's ``properties_model``.
        """
        model = get_schema(self.type).properties_model
        try:
            return model.model_validate(self.properties)
        except ValidationError:
            from screenforge.sanitize import coerce_properties

            logger.debug(f"Coercing properties of element '{self.id}'")
            return model.model_validate(coerce_properties(self.type, self.properties))


class Screen(BaseModel):
    """A named screen holding an ordered list of elements.

    Element order is stacking order (later elements paint on top) and also
    fixes the names of generated state fields.
    """

    id: str = Field(..., description="Screen identifier, used as route name")
    name: str = Field(..., description="Display name")
    elements: list[DesignElement] = Field(
        default_factory=list, description="Elements in stacking order"
    )

    def find_element(self, element_id: str) -> DesignElement | None:
        """Find an element by id, or None if absent."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None


def _clamp(value: float, low: int, high: int) -> int:
    return int(max(low, min(high, round(value))))


def create_element(
    component_type: ComponentType,
    x: float,
    y: float,
    element_id: str | None = None,
) -> DesignElement:
    """Place a new element with the type's default size and properties.

    The drop position is clamped so the whole element stays on the canvas.

    Args:
        component_type: Type of element to place.
        x: Requested left edge.
        y: Requested top edge.
        element_id: Identifier to use; a fresh ``element-<hex>`` id when
            omitted.

    Returns:
        A DesignElement satisfying the IR invariants.
    """
    width = get_default_width(component_type)
    height = get_default_height(component_type)
    return DesignElement(
        id=element_id or f"element-{uuid.uuid4().hex}",
        type=component_type,
        x=_clamp(x, 0, CANVAS_WIDTH - width),
        y=_clamp(y, 0, CANVAS_HEIGHT - height),
        width=width,
        height=height,
        properties=get_default_properties(component_type),
    )


def create_screen(name: str, screen_id: str | None = None) -> Screen:
    """Create an empty screen with a fresh ``screen-<hex>`` id when omitted."""
    return Screen(id=screen_id or f"screen-{uuid.uuid4().hex}", name=name)


def load_screens(data: Any) -> list[Screen]:
    """Validate persisted screens.

    Accepts either a list of screen records or a mapping with a
    ``screens`` key.

    Raises:
        ValueError: If the payload is neither shape.
        pydantic.ValidationError: If a record does not match the IR.
    """
    if isinstance(data, dict):
        data = data.get("screens")
    if not isinstance(data, list):
        raise ValueError("Expected a list of screens or {'screens': [...]}")
    return [Screen.model_validate(record) for record in data]


def dump_screens(screens: list[Screen]) -> list[dict[str, Any]]:
    """Serialize screens to JSON-compatible records."""
    return [screen.model_dump(mode="json") for screen in screens]


__all__ = [
    "DesignElement",
    "Screen",
    "create_element",
    "create_screen",
    "load_screens",
    "dump_screens",
]

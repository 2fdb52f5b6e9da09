"""Schema module - authoritative registry of design components.

This module provides:
- The closed ComponentType vocabulary and canvas dimensions
- Per-type default geometry, size floors and typed property records
- Property editor descriptors
- JSON Schema generation for the generative collaborator

Example usage:
    >>> from screenforge.schema import ComponentType, get_default_properties
    >>> get_default_properties(ComponentType.BUTTON)["text"]
    'Button'
"""

from .lib import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COMPONENT_REGISTRY,
    FALLBACK_TYPE,
    INTERACTIVE_TYPES,
    STRUCTURED_KEYS,
    ButtonProperties,
    CardProperties,
    ChatInputProperties,
    ChatMessageProperties,
    CheckboxProperties,
    CheckboxWithLabelProperties,
    ComponentProperties,
    ComponentSchema,
    ComponentType,
    ContainerProperties,
    DesignElementSchema,
    DropdownProperties,
    DynamicTableProperties,
    EditorKind,
    FieldKind,
    FlexProperties,
    IconProperties,
    InputWithLabelProperties,
    ListProperties,
    PropertyDescriptor,
    RadioProperties,
    RadioWithLabelProperties,
    SelectOption,
    StackProperties,
    SwitchProperties,
    SwitchWithLabelProperties,
    TextFieldProperties,
    export_component_catalog,
    export_component_enum_schema,
    export_json_schema,
    export_llm_schema,
    get_default_height,
    get_default_properties,
    get_default_width,
    get_field_kinds,
    get_min_size,
    get_numeric_keys,
    get_property_descriptors,
    get_schema,
    is_interactive_type,
    resolve_component_type,
)

__all__ = [
    # Constants
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "FALLBACK_TYPE",
    "INTERACTIVE_TYPES",
    "STRUCTURED_KEYS",
    # Enums
    "ComponentType",
    "EditorKind",
    "FieldKind",
    # Descriptors
    "SelectOption",
    "PropertyDescriptor",
    # Property records
    "ComponentProperties",
    "ButtonProperties",
    "TextFieldProperties",
    "CardProperties",
    "ListProperties",
    "IconProperties",
    "ContainerProperties",
    "FlexProperties",
    "StackProperties",
    "SwitchProperties",
    "CheckboxProperties",
    "RadioProperties",
    "ChatInputProperties",
    "ChatMessageProperties",
    "DropdownProperties",
    "InputWithLabelProperties",
    "SwitchWithLabelProperties",
    "RadioWithLabelProperties",
    "CheckboxWithLabelProperties",
    "DynamicTableProperties",
    # Registry
    "ComponentSchema",
    "COMPONENT_REGISTRY",
    "get_schema",
    "get_default_width",
    "get_default_height",
    "get_min_size",
    "get_default_properties",
    "get_field_kinds",
    "get_numeric_keys",
    "get_property_descriptors",
    "resolve_component_type",
    "is_interactive_type",
    # Schema generation
    "DesignElementSchema",
    "export_json_schema",
    "export_component_enum_schema",
    "export_component_catalog",
    "export_llm_schema",
]

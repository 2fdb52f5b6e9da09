"""Unit tests for the Schema module."""

import pytest

from screenforge.schema import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    COMPONENT_REGISTRY,
    FALLBACK_TYPE,
    ButtonProperties,
    ComponentType,
    DesignElementSchema,
    EditorKind,
    FieldKind,
    InputWithLabelProperties,
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


class TestComponentRegistry:
    """Tests for COMPONENT_REGISTRY completeness."""

    @pytest.mark.unit
    def test_all_component_types_registered(self):
        """Every ComponentType has an entry in the registry."""
        for ct in ComponentType:
            assert ct in COMPONENT_REGISTRY, f"Missing schema for {ct}"

    @pytest.mark.unit
    def test_registry_has_20_entries(self):
        """Registry contains exactly 20 component definitions."""
        assert len(COMPONENT_REGISTRY) == 20

    @pytest.mark.unit
    def test_entries_keyed_by_own_type(self):
        """Each entry describes the type it is registered under."""
        for ct, schema in COMPONENT_REGISTRY.items():
            assert schema.type == ct

    @pytest.mark.unit
    def test_all_entries_have_descriptions(self):
        """Every component has a non-empty description."""
        for ct, schema in COMPONENT_REGISTRY.items():
            assert len(schema.description) > 10, f"{ct} description too short"

    @pytest.mark.unit
    def test_registry_is_read_only(self):
        """The registry mapping cannot be mutated."""
        with pytest.raises(TypeError):
            COMPONENT_REGISTRY[ComponentType.BUTTON] = None  # type: ignore[index]

    @pytest.mark.unit
    def test_fallback_is_container(self):
        """Unknown types are coerced to container."""
        assert FALLBACK_TYPE == ComponentType.CONTAINER

    @pytest.mark.unit
    def test_wire_values_are_camel_case(self):
        """Wire names keep their camelCase spelling."""
        assert ComponentType.TEXT_FIELD.value == "textField"
        assert ComponentType.DYNAMIC_TABLE.value == "dynamicTable"
        assert ComponentType.CHECKBOX_WITH_LABEL.value == "checkboxWithLabel"


class TestGeometry:
    """Tests for default sizes and size floors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "component_type,width,height",
        [
            (ComponentType.BUTTON, 120, 40),
            (ComponentType.TEXT_FIELD, 200, 56),
            (ComponentType.ICON, 24, 24),
            (ComponentType.SWITCH, 60, 24),
            (ComponentType.DROPDOWN, 200, 70),
            (ComponentType.DYNAMIC_TABLE, 350, 200),
        ],
    )
    def test_default_sizes(self, component_type, width, height):
        """Placement sizes match the palette."""
        assert get_default_width(component_type) == width
        assert get_default_height(component_type) == height

    @pytest.mark.unit
    def test_small_controls_have_small_floors(self):
        """Icons, check boxes and radios may shrink to 20x20."""
        for ct in (ComponentType.ICON, ComponentType.CHECKBOX, ComponentType.RADIO):
            assert get_min_size(ct) == (20, 20)
        assert get_min_size(ComponentType.SWITCH) == (40, 20)

    @pytest.mark.unit
    def test_default_floor(self):
        """Everything else has a 50x30 floor."""
        assert get_min_size(ComponentType.BUTTON) == (50, 30)
        assert get_min_size(ComponentType.CARD) == (50, 30)

    @pytest.mark.unit
    def test_defaults_fit_canvas(self):
        """Default sizes never exceed the canvas."""
        for ct in ComponentType:
            assert get_default_width(ct) <= CANVAS_WIDTH
            assert get_default_height(ct) <= CANVAS_HEIGHT


class TestDefaultProperties:
    """Tests for default property bags."""

    @pytest.mark.unit
    def test_button_defaults(self):
        """Button defaults use camelCase keys."""
        props = get_default_properties(ComponentType.BUTTON)
        assert props == {
            "text": "Button",
            "variant": "primary",
            "rounded": True,
            "color": "#2196F3",
            "textColor": "#FFFFFF",
            "padding": 16,
            "navigateTo": "",
        }

    @pytest.mark.unit
    def test_returns_fresh_copy(self):
        """Mutating a returned bag does not leak into later calls."""
        first = get_default_properties(ComponentType.CARD)
        first["title"] = "Changed"
        assert get_default_properties(ComponentType.CARD)["title"] == "Card Title"

    @pytest.mark.unit
    def test_input_type_uses_wire_alias(self):
        """The input type field is stored under 'type'."""
        props = get_default_properties(ComponentType.INPUT_WITH_LABEL)
        assert props["type"] == "text"
        assert "inputType" not in props

    @pytest.mark.unit
    def test_interactive_types_default_off(self):
        """Stateful types start non-interactive."""
        for ct in ComponentType:
            if is_interactive_type(ct):
                assert get_default_properties(ct)["interactive"] is False

    @pytest.mark.unit
    def test_structured_defaults_are_json_text(self):
        """Structured sub-properties are stored as JSON strings."""
        table = get_default_properties(ComponentType.DYNAMIC_TABLE)
        assert isinstance(table["columns"], str)
        assert table["columns"].startswith("[")
        assert isinstance(get_default_properties(ComponentType.LIST)["data"], str)

    @pytest.mark.unit
    def test_properties_model_matches_defaults(self):
        """The typed record reproduces the default bag."""
        for ct, schema in COMPONENT_REGISTRY.items():
            assert schema.properties_model().to_wire() == get_default_properties(ct)


class TestFieldKinds:
    """Tests for value-kind classification."""

    @pytest.mark.unit
    def test_numeric_keys(self):
        """Numeric keys are derived from numeric defaults."""
        assert get_numeric_keys(ComponentType.CARD) == {
            "elevation",
            "borderRadius",
            "padding",
            "imageHeight",
        }
        assert get_numeric_keys(ComponentType.SWITCH) == frozenset()

    @pytest.mark.unit
    def test_booleans_are_not_numbers(self):
        """Boolean defaults are classified before numbers."""
        kinds = get_field_kinds(ComponentType.BUTTON)
        assert kinds["rounded"] == FieldKind.BOOLEAN
        assert kinds["padding"] == FieldKind.NUMBER

    @pytest.mark.unit
    def test_structured_keys(self):
        """options, columns and data are structured."""
        dropdown = get_field_kinds(ComponentType.DROPDOWN)
        assert dropdown["options"] == FieldKind.STRUCTURED
        table = get_field_kinds(ComponentType.DYNAMIC_TABLE)
        assert table["columns"] == FieldKind.STRUCTURED
        assert table["data"] == FieldKind.STRUCTURED
        assert table["title"] == FieldKind.TEXT


class TestPropertyDescriptors:
    """Tests for editor descriptors."""

    @pytest.mark.unit
    def test_descriptor_names_are_default_keys(self):
        """Every editable property has a default value."""
        for ct in ComponentType:
            defaults = get_default_properties(ct)
            for descriptor in get_property_descriptors(ct):
                assert descriptor.name in defaults, f"{ct}.{descriptor.name}"

    @pytest.mark.unit
    def test_select_descriptors_have_options(self):
        """Select editors carry an option list, others do not."""
        for ct in ComponentType:
            for descriptor in get_property_descriptors(ct):
                if descriptor.kind == EditorKind.SELECT:
                    assert descriptor.options
                else:
                    assert descriptor.options == ()

    @pytest.mark.unit
    def test_button_navigation_editor(self):
        """Buttons expose a screen picker for navigation."""
        kinds = {d.name: d.kind for d in get_property_descriptors(ComponentType.BUTTON)}
        assert kinds["navigateTo"] == EditorKind.SCREEN
        assert kinds["textColor"] == EditorKind.COLOR

    @pytest.mark.unit
    def test_stack_has_nine_anchors(self):
        """Stack alignment offers all nine anchors."""
        descriptor = get_property_descriptors(ComponentType.STACK)[0]
        assert descriptor.name == "alignment"
        assert len(descriptor.options) == 9
        assert descriptor.options[0].value == "topLeft"

    @pytest.mark.unit
    def test_descriptor_to_dict(self):
        """Descriptors convert to the panel's JSON shape."""
        descriptor = get_property_descriptors(ComponentType.BUTTON)[1]
        d = descriptor.to_dict()
        assert d["name"] == "variant"
        assert d["type"] == "select"
        assert {"label": "Outline", "value": "outline"} in d["options"]


class TestTypedProperties:
    """Tests for the typed property records."""

    @pytest.mark.unit
    def test_populate_by_wire_name(self):
        """Records accept camelCase keys."""
        props = ButtonProperties.model_validate({"textColor": "#000000"})
        assert props.text_color == "#000000"

    @pytest.mark.unit
    def test_populate_by_field_name(self):
        """Records also accept snake_case field names."""
        props = ButtonProperties(navigate_to="home")
        assert props.to_wire()["navigateTo"] == "home"

    @pytest.mark.unit
    def test_extra_keys_preserved(self):
        """Unknown keys survive as extras."""
        props = ButtonProperties.model_validate({"tooltip": "Save"})
        assert props.to_wire()["tooltip"] == "Save"

    @pytest.mark.unit
    def test_input_type_alias(self):
        """The aliased input type round-trips through the wire name."""
        props = InputWithLabelProperties.model_validate({"type": "email"})
        assert props.input_type == "email"
        assert props.to_wire()["type"] == "email"


class TestResolveComponentType:
    """Tests for resolve_component_type."""

    @pytest.mark.unit
    def test_exact_wire_name(self):
        """Exact wire names resolve."""
        assert resolve_component_type("chatInput") == ComponentType.CHAT_INPUT

    @pytest.mark.unit
    def test_enum_passthrough(self):
        """Enum members resolve to themselves."""
        assert resolve_component_type(ComponentType.CARD) == ComponentType.CARD

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["chatinput", "image", "", None, 3])
    def test_unknown_returns_none(self, value):
        """Anything outside the vocabulary returns None."""
        assert resolve_component_type(value) is None

    @pytest.mark.unit
    def test_get_schema_rejects_strings(self):
        """Registry lookups require enum members."""
        with pytest.raises(KeyError):
            get_schema("image")  # type: ignore[arg-type]


class TestSchemaGeneration:
    """Tests for JSON Schema export functions."""

    @pytest.mark.unit
    def test_export_json_schema_structure(self):
        """Exported schema has the element fields."""
        schema = export_json_schema()
        assert schema["type"] == "object"
        for key in ("type", "x", "y", "width", "height", "properties"):
            assert key in schema["properties"]
        assert "type" in schema["required"]

    @pytest.mark.unit
    def test_schema_model_accepts_wire_type(self):
        """The schema model stores the type as its wire value."""
        record = DesignElementSchema.model_validate({"type": "button"})
        assert record.type == "button"

    @pytest.mark.unit
    def test_export_component_enum_schema(self):
        """Enum schema maps every type to its description."""
        schema = export_component_enum_schema()
        assert len(schema) == 20
        assert "dynamicTable" in schema

    @pytest.mark.unit
    def test_export_component_catalog(self):
        """Catalog carries defaults and editors per type."""
        catalog = export_component_catalog()
        assert catalog["button"]["defaultWidth"] == 120
        assert catalog["icon"]["minWidth"] == 20
        assert catalog["button"]["editors"][0]["name"] == "text"

    @pytest.mark.unit
    def test_export_llm_schema(self):
        """LLM schema includes canvas bounds and an example."""
        schema = export_llm_schema()
        assert schema["canvas"] == {"width": 360, "height": 640}
        assert "schema" in schema
        assert schema["examples"]["login"][1]["type"] == "button"

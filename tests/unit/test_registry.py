"""Tests for the component registry."""

import pytest

from llm2ui.registry import (
    ComponentDefinition,
    ComponentNotFoundError,
    ComponentRegistry,
    DuplicateComponentError,
    InvalidDefinitionError,
    Platform,
    PropSchema,
    PropType,
)


@pytest.mark.unit
def test_lookup(registry):
    assert registry.get("Button").category == "input"
    assert registry.get("Nope") is None
    assert registry.has("Text")
    assert "Input" in registry
    assert len(registry) == 4
    assert registry.types() == ["Container", "Text", "Button", "Input"]


@pytest.mark.unit
def test_require_raises(registry):
    with pytest.raises(ComponentNotFoundError) as exc_info:
        registry.require("Nope")
    assert exc_info.value.type == "Nope"


@pytest.mark.unit
def test_duplicate_registration(registry):
    with pytest.raises(DuplicateComponentError):
        registry.register(ComponentDefinition(type="Button"))
    assert registry.get("Button").description == "Clickable button"


@pytest.mark.unit
def test_register_mapping():
    registry = ComponentRegistry()
    definition = registry.register(
        {
            "type": "Badge",
            "displayName": "Status badge",
            "propsSchema": {"tone": {"type": "string", "enum": ["info", "warn"]}},
            "platforms": ["pc-web"],
        }
    )
    assert definition.label == "Status badge"
    assert definition.props_schema["tone"].enum == ("info", "warn")
    assert definition.supports(Platform.PC_WEB)
    assert not definition.supports(Platform.MOBILE_NATIVE)


@pytest.mark.unit
@pytest.mark.parametrize("payload", [{"type": "  "}, {"type": "X", "version": ""}, {"displayName": "no type"}])
def test_register_invalid_mapping(payload):
    with pytest.raises(InvalidDefinitionError) as exc_info:
        ComponentRegistry().register(payload)
    assert exc_info.value.errors


@pytest.mark.unit
def test_unregister_and_clear(registry):
    assert registry.unregister("Text") is True
    assert registry.unregister("Text") is False
    assert "Text" not in registry
    registry.clear()
    assert len(registry) == 0
    assert registry.get_all() == []


@pytest.mark.unit
def test_category_and_search(registry):
    assert [d.type for d in registry.get_by_category("input")] == ["Button", "Input"]
    assert [d.type for d in registry.search("CLICK")] == ["Button"]
    assert [d.type for d in registry.search("action")] == ["Button"]
    assert [d.type for d in registry.search("tex")] == ["Text"]
    assert len(registry.search("  ")) == 4


@pytest.mark.unit
def test_iteration_is_snapshot(registry):
    for definition in registry:
        registry.unregister(definition.type)
    assert len(registry) == 0


@pytest.mark.unit
def test_validate_props(registry):
    assert registry.validate_props("Button", {"variant": "outline", "disabled": False}) == []
    assert registry.validate_props("Button", {"variant": "ghost", "disabled": "yes"}) == [
        "Button.variant: 'ghost' is not one of default, outline",
        "Button.disabled: expected boolean, got string",
    ]
    assert registry.validate_props("Input", {}) == ["Input.placeholder: required prop is missing"]


@pytest.mark.unit
def test_validate_props_skips_bindings_and_unknowns(registry):
    assert registry.validate_props("Button", {"disabled": "{{form.locked}}", "variant": None}) == []
    assert registry.validate_props("Unknown", {"anything": 1}) == []
    assert registry.validate_props("Button", {"extra": 1}) == []


@pytest.mark.unit
def test_required_prop_satisfied_by_default():
    registry = ComponentRegistry()
    registry.register(
        ComponentDefinition(
            type="Icon",
            props_schema={"name": PropSchema(type=PropType.STRING, required=True)},
            default_props={"name": "circle"},
        )
    )
    assert registry.validate_props("Icon", {}) == []


@pytest.mark.unit
def test_number_rejects_boolean():
    registry = ComponentRegistry()
    registry.register(ComponentDefinition(type="Progress", props_schema={"value": PropSchema(type=PropType.NUMBER)}))
    assert registry.validate_props("Progress", {"value": 3.5}) == []
    assert registry.validate_props("Progress", {"value": True}) == ["Progress.value: expected number, got boolean"]

"""Tests for template layering."""

import pytest
from hypothesis import given, strategies as st

from llm2ui.layering import (
    ComponentTemplate,
    TemplateError,
    TemplateLayer,
    TemplateManager,
    deep_merge,
    merge_component,
    merge_layers,
    merge_schemas,
    merge_templates,
)
from llm2ui.registry import Platform
from llm2ui.schema import UIComponent, UISchema


def _schema(root, **extra):
    return UISchema.model_validate({"root": root, **extra})


BASE = _schema(
    {
        "id": "btn",
        "type": "Button",
        "props": {"variant": "default", "size": "md"},
        "style": {"className": "base", "style": {"cursor": "pointer"}, "padding": 4},
        "text": "Click",
        "children": [{"id": "icon", "type": "Icon"}],
    },
    version="1.0",
    data={"user": {"name": "Ada", "roles": ["a"]}},
    meta={"title": "Base"},
)
PLATFORM = _schema(
    {"id": "btn", "type": "Button", "props": {"size": "lg"}, "style": {"style": {"minHeight": 44}}},
)
THEME = _schema(
    {"id": "btn", "type": "Button", "props": {"variant": "ghost"}, "style": {"className": "themed"}, "children": []},
    version="2.0",
    data={"user": {"roles": ["b"]}},
)


@pytest.mark.unit
def test_deep_merge():
    assert deep_merge({"a": {"x": 1, "y": 2}, "l": [1]}, {"a": {"y": 3}, "l": [2], "n": None}) == {
        "a": {"x": 1, "y": 3},
        "l": [2],
        "n": None,
    }


@pytest.mark.unit
def test_three_layer_precedence():
    merged = merge_layers(BASE, PLATFORM, THEME)
    assert merged.version == "2.0"
    assert merged.root.props == {"variant": "ghost", "size": "lg"}
    assert merged.root.style.class_name == "themed"
    assert merged.root.style.padding == 4
    assert merged.root.style.style == {"cursor": "pointer", "minHeight": 44}
    assert merged.root.children == []
    assert merged.root.text == "Click"
    assert merged.data == {"user": {"name": "Ada", "roles": ["b"]}}
    assert merged.meta.title == "Base"


@pytest.mark.unit
def test_default_version_does_not_override():
    assert merge_schemas(BASE, PLATFORM).version == "1.0"


@pytest.mark.unit
def test_missing_layers_degrade():
    assert merge_layers(BASE) == BASE
    assert merge_layers(BASE, None, THEME) == merge_schemas(BASE, THEME)
    assert merge_templates(BASE, None, PLATFORM, None) == merge_schemas(BASE, PLATFORM)


@pytest.mark.unit
def test_children_kept_when_override_silent():
    merged = merge_schemas(BASE, PLATFORM)
    assert [child.id for child in merged.root.children] == ["icon"]


@pytest.mark.unit
def test_inputs_untouched():
    before = BASE.model_dump()
    merge_layers(BASE, PLATFORM, THEME)
    assert BASE.model_dump() == before


@pytest.mark.unit
def test_merge_component_last_defined():
    base = UIComponent(id="a", type="Text", text="one", condition="{{x}}")
    override = UIComponent(id="b", type="Label", binding="{{y}}")
    merged = merge_component(base, override)
    assert (merged.id, merged.type) == ("b", "Label")
    assert merged.text == "one"
    assert merged.condition == "{{x}}"
    assert merged.binding == "{{y}}"
    assert merged.props is None


@pytest.mark.unit
def test_manager_resolves_layers():
    manager = TemplateManager()
    manager.register_template("Button", ComponentTemplate(layer=TemplateLayer.BASE, template=BASE, styles={"a": "1"}))
    manager.register_template(
        "Button",
        ComponentTemplate(layer="platform", platform="mobile-web", template=PLATFORM, styles={"a": "2", "b": "1"}),
    )
    manager.register_template("Button", ComponentTemplate(layer="theme", theme="dark", template=THEME))

    assert len(manager) == 3
    assert manager.get_template("Button", "pc-web").root.props == BASE.root.props
    assert manager.get_template("Button", Platform.MOBILE_WEB).root.props == {"variant": "default", "size": "lg"}
    assert manager.get_template("Button", "mobile-web", theme="dark") == merge_layers(BASE, PLATFORM, THEME)
    assert manager.get_template("Button", "pc-web", theme="light") == BASE
    assert manager.get_styles("Button", "mobile-web") == {"a": "2", "b": "1"}
    assert manager.get_styles("Button", "pc-web") == {"a": "1"}


@pytest.mark.unit
def test_manager_without_base():
    manager = TemplateManager()
    manager.register_template("Card", ComponentTemplate(layer="platform", platform="pc-web", template=PLATFORM))
    assert manager.get_template("Card", "pc-web") is None
    assert manager.get_template("Nope", "pc-web") is None


@pytest.mark.unit
def test_manager_bookkeeping():
    manager = TemplateManager()
    manager.register_template("Button", ComponentTemplate(layer="base", template=BASE))
    manager.register_template("Button", ComponentTemplate(layer="base", template=THEME))
    assert len(manager) == 1
    assert manager.get_template_by_layer("Button", "base").template == THEME
    assert manager.has_template("Button", TemplateLayer.BASE)
    assert not manager.has_template("Button", "platform", platform="pc-web")
    assert [t.layer for t in manager.get_component_templates("Button")] == [TemplateLayer.BASE]
    assert manager.remove_template("Button", "base") is True
    assert manager.remove_template("Button", "base") is False
    manager.register_template("Button", ComponentTemplate(layer="base", template=BASE))
    manager.clear()
    assert len(manager) == 0


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, template",
    [
        ("  ", ComponentTemplate(layer="base", template=BASE)),
        ("Button", ComponentTemplate(layer="platform", template=PLATFORM)),
        ("Button", ComponentTemplate(layer="theme", template=THEME)),
        ("Button", ComponentTemplate(layer="base", theme="dark", template=BASE)),
    ],
)
def test_manager_rejects_inconsistent_templates(name, template):
    with pytest.raises(TemplateError):
        TemplateManager().register_template(name, template)


@pytest.mark.unit
def test_unknown_platform():
    manager = TemplateManager()
    with pytest.raises(TemplateError):
        manager.get_template_by_layer("Button", "platform", platform="smart-tv")


_props = st.dictionaries(st.sampled_from(["variant", "size", "label", "tone"]), st.integers(), max_size=4)


@pytest.mark.unit
@given(_props, _props, _props)
def test_props_precedence(base, platform, theme):
    def layer(props):
        return _schema({"id": "c", "type": "Button", "props": props})

    merged = merge_layers(layer(base), layer(platform), layer(theme))
    assert merged.root.props == {**base, **platform, **theme}


@pytest.mark.unit
def test_null_in_later_layer_overrides_data():
    cleared = _schema({"id": "btn", "type": "Button"}, data={"user": {"name": None}, "flags": None})
    merged = merge_schemas(_schema({"id": "btn", "type": "Button"}, data={"user": {"name": "Ada"}, "flags": {"x": 1}}), cleared)
    assert merged.data == {"user": {"name": None}, "flags": None}
    assert merge_schemas(BASE, PLATFORM).meta.title == "Base"

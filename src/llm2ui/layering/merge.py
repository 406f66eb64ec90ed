"""
Layer merge rules.

Layers fold left to right (base < platform < theme):

- ``version``, ``root.id``, ``root.type``: last defined value wins
- ``root.props``: shallow merge, later keys overwrite
- ``root.style``: field-wise, inline ``style`` maps merged key-wise
- ``root.children``: replaced wholesale by a layer that defines it
- ``text``, ``binding``, ``condition``, ``loop``, ``events``: last defined wins
- ``data``, ``meta``: deep merge; an explicit null in a later layer wins
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..schema import SchemaMeta, StyleProps, UIComponent, UISchema

_LAST_DEFINED = ("text", "binding", "condition", "loop", "events")


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursive mapping merge. Non-mapping values (lists included) are
    replaced, and an explicit None (JSON null) in override replaces too.
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def merge_style(base: Optional[StyleProps], override: Optional[StyleProps]) -> Optional[StyleProps]:
    if base is None or override is None:
        return override if base is None else base

    update: dict[str, Any] = {}
    for name in StyleProps.model_fields:
        value = getattr(override, name)
        if value is not None:
            update[name] = value
    if base.style and override.style:
        update["style"] = {**base.style, **override.style}
    return base.model_copy(update=update)


def merge_component(base: UIComponent, override: UIComponent) -> UIComponent:
    update: dict[str, Any] = {
        "id": override.id or base.id,
        "type": override.type or base.type,
    }

    if base.props is not None or override.props is not None:
        update["props"] = {**(base.props or {}), **(override.props or {})}

    update["style"] = merge_style(base.style, override.style)

    if override.children is not None:
        update["children"] = override.children

    for name in _LAST_DEFINED:
        value = getattr(override, name)
        if value is not None:
            update[name] = value

    return base.model_copy(update=update)


def _merge_meta(base: Optional[SchemaMeta], override: Optional[SchemaMeta]) -> Optional[SchemaMeta]:
    if base is None or override is None:
        return override if base is None else base
    return SchemaMeta.model_validate(deep_merge(base.to_wire(), override.to_wire()))


def merge_schemas(base: UISchema, override: UISchema) -> UISchema:
    """Merge one override layer onto base"""
    fields: dict[str, Any] = {"root": merge_component(base.root, override.root)}

    # A default version does not override an explicit one
    if "version" in override.model_fields_set:
        fields["version"] = override.version
    elif "version" in base.model_fields_set:
        fields["version"] = base.version

    if base.data is not None and override.data is not None:
        fields["data"] = deep_merge(base.data, override.data)
    else:
        fields["data"] = override.data if override.data is not None else base.data

    fields["meta"] = _merge_meta(base.meta, override.meta)
    return UISchema(**fields)


def merge_templates(base: UISchema, *overrides: Optional[UISchema]) -> UISchema:
    """Fold overrides onto base in order; None layers are skipped"""
    result = base
    for override in overrides:
        if override is not None:
            result = merge_schemas(result, override)
    return result


def merge_layers(
    base: UISchema,
    platform_override: Optional[UISchema] = None,
    theme_override: Optional[UISchema] = None,
) -> UISchema:
    """Three-layer merge with fixed precedence base < platform < theme"""
    return merge_templates(base, platform_override, theme_override)

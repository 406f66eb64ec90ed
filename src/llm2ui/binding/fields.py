"""Inventory of the data paths a schema binds to."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..schema.models import UIComponent, UISchema
from .path import PathSegment, PathSyntaxError, parse_path
from .resolver import BINDING_PATTERN, unwrap_binding


@dataclass(frozen=True)
class DataField:
    """One binding occurrence."""

    binding: str  # as written, e.g. "{{user.name}}"
    path: str
    segments: tuple[PathSegment, ...]
    component_id: str
    property: str  # e.g. "props.label", "children[0].text"


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _from_string(value: str, component_id: str, prop: str, out: list[DataField]) -> None:
    for match in BINDING_PATTERN.finditer(value):
        path = match.group(1).strip()
        try:
            segments = parse_path(path)
        except PathSyntaxError:
            continue
        out.append(DataField(match.group(0), path, segments, component_id, prop))


def _from_value(value: Any, component_id: str, prop: str, out: list[DataField]) -> None:
    if isinstance(value, str):
        _from_string(value, component_id, prop, out)
    elif isinstance(value, Mapping):
        for key, item in value.items():
            _from_value(item, component_id, f"{prop}.{key}", out)
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _from_value(item, component_id, f"{prop}[{index}]", out)


def _from_bare(expression: str, component_id: str, prop: str, out: list[DataField]) -> None:
    path = unwrap_binding(expression)
    try:
        segments = parse_path(path)
    except PathSyntaxError:
        return
    out.append(DataField(f"{{{{{path}}}}}", path, segments, component_id, prop))


def _walk(component: UIComponent, prefix: str, out: list[DataField]) -> None:
    cid = component.id

    if component.binding:
        _from_bare(component.binding, cid, _join(prefix, "binding"), out)
    if component.text:
        _from_string(component.text, cid, _join(prefix, "text"), out)
    if component.props:
        _from_value(component.props, cid, _join(prefix, "props"), out)
    if component.loop:
        _from_bare(component.loop.source, cid, _join(prefix, "loop.source"), out)
    if component.condition:
        _from_bare(component.condition, cid, _join(prefix, "condition"), out)

    for index, child in enumerate(component.children or ()):
        _walk(child, _join(prefix, f"children[{index}]"), out)


def extract_data_fields(schema: UISchema) -> list[DataField]:
    """List every binding in the schema, in document order."""
    fields: list[DataField] = []
    _walk(schema.root, "", fields)
    return fields


def get_unique_paths(schema: UISchema) -> list[str]:
    """Distinct bound paths, first occurrence first."""
    return list(dict.fromkeys(field.path for field in extract_data_fields(schema)))

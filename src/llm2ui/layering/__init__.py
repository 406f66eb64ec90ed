"""Layered component templates and their merge rules."""

from .merge import deep_merge, merge_component, merge_layers, merge_schemas, merge_style, merge_templates
from .templates import ComponentTemplate, TemplateError, TemplateLayer, TemplateManager

__all__ = [
    "deep_merge",
    "merge_component",
    "merge_layers",
    "merge_schemas",
    "merge_style",
    "merge_templates",
    "ComponentTemplate",
    "TemplateError",
    "TemplateLayer",
    "TemplateManager",
]

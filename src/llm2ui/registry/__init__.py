"""Component registry: type name to component definition."""

from .definitions import ComponentDefinition, Platform, PropSchema, PropType, RenderFn
from .registry import (
    ComponentNotFoundError,
    ComponentRegistry,
    DuplicateComponentError,
    InvalidDefinitionError,
    type_name,
)

__all__ = [
    "ComponentDefinition",
    "Platform",
    "PropSchema",
    "PropType",
    "RenderFn",
    "ComponentNotFoundError",
    "ComponentRegistry",
    "DuplicateComponentError",
    "InvalidDefinitionError",
    "type_name",
]

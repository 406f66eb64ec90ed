"""
Component Registry
Instance-scoped lookup from component type to its definition.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..core import get_logger
from .definitions import ComponentDefinition, PropSchema, PropType

logger = get_logger(__name__)


class DuplicateComponentError(Exception):
    """Component type already registered."""

    def __init__(self, type: str) -> None:
        super().__init__(f"Component already registered: {type}")
        self.type = type


class ComponentNotFoundError(Exception):
    """Component type not registered."""

    def __init__(self, type: str) -> None:
        super().__init__(f"Component not registered: {type}")
        self.type = type


class InvalidDefinitionError(Exception):
    """Definition rejected at registration."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid component definition: " + "; ".join(errors))
        self.errors = errors


def _matches(schema: PropSchema, value: Any) -> bool:
    match schema.type:
        case PropType.STRING:
            return isinstance(value, str)
        case PropType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        case PropType.BOOLEAN:
            return isinstance(value, bool)
        case PropType.OBJECT:
            return isinstance(value, Mapping)
        case PropType.ARRAY:
            return isinstance(value, (list, tuple))
        case PropType.FUNCTION:
            return callable(value)
    return False


class ComponentRegistry:
    """
    Registry of component definitions for one theme.

    Never shared process-wide: each theme builds its own and clears it
    when deactivated.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._definitions: dict[str, ComponentDefinition] = {}

    def register(self, definition: Union[ComponentDefinition, Mapping[str, Any]]) -> ComponentDefinition:
        """
        Register a component definition.

        Args:
            definition: Definition model, or a mapping that validates into one

        Raises:
            DuplicateComponentError: Type already registered
            InvalidDefinitionError: Mapping failed validation
        """
        if not isinstance(definition, ComponentDefinition):
            try:
                definition = ComponentDefinition.model_validate(definition)
            except ValidationError as e:
                raise InvalidDefinitionError(
                    [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
                ) from e

        if definition.type in self._definitions:
            raise DuplicateComponentError(definition.type)

        self._definitions[definition.type] = definition
        logger.debug("component_registered", registry=self.name, type=definition.type)
        return definition

    def unregister(self, type: str) -> bool:
        """Remove a type; returns whether it was present"""
        removed = self._definitions.pop(type, None) is not None
        if removed:
            logger.debug("component_unregistered", registry=self.name, type=type)
        return removed

    def get(self, type: str) -> Optional[ComponentDefinition]:
        return self._definitions.get(type)

    def require(self, type: str) -> ComponentDefinition:
        """Like get() but raises ComponentNotFoundError on a miss"""
        definition = self._definitions.get(type)
        if definition is None:
            raise ComponentNotFoundError(type)
        return definition

    def has(self, type: str) -> bool:
        return type in self._definitions

    def get_all(self) -> list[ComponentDefinition]:
        """All definitions in registration order"""
        return list(self._definitions.values())

    def get_by_category(self, category: str) -> list[ComponentDefinition]:
        return [d for d in self._definitions.values() if d.category == category]

    def types(self) -> list[str]:
        return list(self._definitions)

    def search(self, query: str) -> list[ComponentDefinition]:
        """
        Case-insensitive substring search over type, display name,
        description and tags.
        """
        needle = query.strip().lower()
        if not needle:
            return self.get_all()

        results = []
        for definition in self._definitions.values():
            haystack = [definition.type, definition.display_name, definition.description, *definition.tags]
            if any(needle in text.lower() for text in haystack):
                results.append(definition)
        return results

    def validate_props(self, type: str, props: Mapping[str, Any]) -> list[str]:
        """
        Structural prop check against the declared props schema.

        Binding strings are skipped; their type is only known at render time.
        Unknown types and undeclared props are not errors.
        """
        from ..binding.resolver import is_binding

        definition = self._definitions.get(type)
        if definition is None:
            return []

        problems: list[str] = []
        for prop, schema in definition.props_schema.items():
            if prop not in props:
                if schema.required and prop not in definition.default_props:
                    problems.append(f"{type}.{prop}: required prop is missing")
                continue

            value = props[prop]
            if value is None or is_binding(value):
                continue
            if not _matches(schema, value):
                problems.append(f"{type}.{prop}: expected {schema.type.value}, got {type_name(value)}")
            elif schema.enum is not None and value not in schema.enum:
                problems.append(f"{type}.{prop}: {value!r} is not one of {', '.join(schema.enum)}")
        return problems

    def clear(self) -> None:
        """Drop every definition (theme disposal)"""
        count = len(self._definitions)
        self._definitions.clear()
        logger.debug("registry_cleared", registry=self.name, count=count)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, type: object) -> bool:
        return type in self._definitions

    def __iter__(self) -> Iterator[ComponentDefinition]:
        return iter(list(self._definitions.values()))

    def __repr__(self) -> str:
        return f"ComponentRegistry(name={self.name!r}, components={len(self)})"


def type_name(value: Any) -> str:
    """JSON type name of a Python value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    if callable(value):
        return "function"
    return type(value).__name__

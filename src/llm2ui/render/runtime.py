"""
Host UI runtime boundary.

The renderer never builds host widgets itself; it calls a ``HostRuntime``.
``TreeRuntime`` is the default host: it materializes plain ``Node`` objects
that can be inspected, serialized or post-processed.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from ..core import get_settings
from ..registry import ComponentDefinition

FRAGMENT = "Fragment"


@runtime_checkable
class HostRuntime(Protocol):
    """What a host UI toolkit must provide to receive a rendered schema"""

    def create_element(
        self,
        definition: ComponentDefinition,
        props: dict[str, Any],
        children: Sequence[Any],
        key: str,
    ) -> Any:
        ...

    def create_fragment(self, children: Sequence[Any], key: str) -> Any:
        ...

    def create_placeholder(self, type: str, id: str, key: str) -> Any:
        ...


@dataclass
class Node:
    """A materialized host node"""

    type: str
    key: Optional[str] = None
    props: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Concatenated string content of this subtree"""
        parts = []
        for child in self.children:
            if isinstance(child, Node):
                parts.append(child.text)
            elif isinstance(child, str):
                parts.append(child)
        return "".join(parts)

    def walk(self) -> Iterator["Node"]:
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.walk()

    def find(self, key: str) -> Optional["Node"]:
        """First node in the subtree with the given key"""
        return next((node for node in self.walk() if node.key == key), None)

    def find_all(self, type: str) -> list["Node"]:
        return [node for node in self.walk() if node.type == type]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "key": self.key,
            "props": {k: v for k, v in self.props.items() if not callable(v)},
            "children": [c.to_dict() if isinstance(c, Node) else c for c in self.children],
        }


class TreeRuntime:
    """Host runtime producing ``Node`` trees"""

    def __init__(self, placeholder_type: Optional[str] = None) -> None:
        self.placeholder_type = placeholder_type or get_settings().unknown_component_type

    def create_element(
        self,
        definition: ComponentDefinition,
        props: dict[str, Any],
        children: Sequence[Any],
        key: str,
    ) -> Any:
        if definition.render is not None:
            return definition.render(props, list(children))
        return Node(definition.type, key, props, list(children))

    def create_fragment(self, children: Sequence[Any], key: str) -> Node:
        return Node(FRAGMENT, key, {}, list(children))

    def create_placeholder(self, type: str, id: str, key: str) -> Node:
        return Node(self.placeholder_type, key, {"type": type, "id": id}, [])

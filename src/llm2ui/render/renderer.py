"""
Schema Renderer
Walks a UI Schema tree and emits host runtime calls.

Every node is processed in a fixed order: condition, loop expansion, type
lookup, props, style, events, content. Failures stay local to the node:
a missing path renders nothing or keeps its ``{{path}}`` text, and an
unknown type renders a placeholder.
"""

import dataclasses
from collections import ChainMap
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from returns.result import Success

from ..binding import (
    PathSyntaxError,
    evaluate_condition,
    resolve_binding,
    resolve_bindings,
    resolve_value,
    stringify_value,
)
from ..core import LogContext, get_logger
from ..registry import ComponentRegistry
from ..schema import STYLE_SHORTHANDS, StyleProps, UIComponent, UISchema
from .runtime import HostRuntime, TreeRuntime

logger = get_logger(__name__)

# (action, raw host event, component id)
EventCallback = Callable[[str, Any, str], None]
# (type, id, key) -> host node
UnknownComponentFn = Callable[[str, str, str], Any]

DEFAULT_ITEM_NAME = "item"
DEFAULT_INDEX_NAME = "index"


def handler_name(event: str) -> str:
    """``click`` -> ``onClick``"""
    return f"on{event[:1].upper()}{event[1:]}"


@dataclass(frozen=True)
class EventHandler:
    """Host-facing handler reporting one event binding to the app callback"""

    event: str
    action: str
    component_id: str
    callback: EventCallback = field(repr=False, compare=False)
    payload: Any = None

    @property
    def name(self) -> str:
        return handler_name(self.event)

    def __call__(self, event: Any = None) -> None:
        self.callback(self.action, event, self.component_id)


@dataclass(frozen=True)
class RenderContext:
    """
    Immutable state for one recursion step.

    Loop iterations derive a new context with an extended overlay; the
    caller's data is never modified.
    """

    registry: ComponentRegistry
    runtime: HostRuntime
    data: Mapping[str, Any]
    overlay: Mapping[str, Any] = field(default_factory=dict)
    on_event: Optional[EventCallback] = None
    unknown_component: Optional[UnknownComponentFn] = None

    @property
    def scope(self) -> Mapping[str, Any]:
        """Data visible to bindings, loop variables shadowing data keys"""
        if not self.overlay:
            return self.data
        return ChainMap(dict(self.overlay), self.data)  # type: ignore[arg-type]

    def with_loop(self, item_name: str, item: Any, index_name: str, index: int) -> "RenderContext":
        return dataclasses.replace(self, overlay={**self.overlay, item_name: item, index_name: index})


def _css_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def resolve_style(style: Optional[StyleProps]) -> dict[str, Any]:
    """Inline style map first, then shorthand fields over it (camelCase keys)"""
    if style is None:
        return {}
    css: dict[str, Any] = dict(style.style or {})
    for name in STYLE_SHORTHANDS:
        value = getattr(style, name)
        if value is not None and value != "":
            css[_css_name(name)] = value
    return css


def create_event_handlers(component: UIComponent, on_event: Optional[EventCallback]) -> dict[str, EventHandler]:
    if not component.events or on_event is None:
        return {}
    handlers = {}
    for binding in component.events:
        handler = EventHandler(binding.event, binding.action, component.id, on_event, binding.payload)
        handlers[handler.name] = handler
    return handlers


def _loop_items(source: str, scope: Mapping[str, Any]) -> list[Any]:
    try:
        result = resolve_binding(source, scope)
    except PathSyntaxError as e:
        logger.warning("loop_source_invalid", source=source, reason=e.reason)
        return []
    match result:
        case Success(list() | tuple() as items):
            return list(items)
        case Success(other):
            logger.debug("loop_source_not_sequence", source=source, kind=type(other).__name__)
        case _:
            logger.debug("loop_source_unresolved", source=source)
    return []


def _binding_content(binding: str, scope: Mapping[str, Any]) -> Optional[str]:
    try:
        result = resolve_binding(binding, scope)
    except PathSyntaxError as e:
        logger.warning("binding_syntax_error", expression=binding, reason=e.reason)
        return None
    match result:
        case Success(None):
            return None
        case Success(value):
            return stringify_value(value)
    return None


def render_component(component: UIComponent, context: RenderContext) -> Any:
    """Render one component (and its subtree); None when nothing renders"""
    scope = context.scope

    if component.condition and not evaluate_condition(component.condition, scope):
        return None

    if component.loop is not None:
        loop = component.loop
        item_name = loop.item_name or DEFAULT_ITEM_NAME
        index_name = loop.index_name or DEFAULT_INDEX_NAME
        rendered = []
        for index, item in enumerate(_loop_items(loop.source, scope)):
            clone = component.model_copy(update={"loop": None, "id": f"{component.id}-{index}"})
            node = render_component(clone, context.with_loop(item_name, item, index_name, index))
            if node is not None:
                rendered.append(node)
        return context.runtime.create_fragment(rendered, component.id)

    definition = context.registry.get(component.type)
    if definition is None:
        logger.warning("unknown_component", type=component.type, id=component.id)
        if context.unknown_component is not None:
            return context.unknown_component(component.type, component.id, component.id)
        return context.runtime.create_placeholder(component.type, component.id, component.id)

    props: dict[str, Any] = dict(definition.default_props)
    props.update(resolve_value(component.props or {}, scope))

    css = resolve_style(component.style)
    if css:
        existing = props.get("style")
        props["style"] = {**existing, **css} if isinstance(existing, Mapping) else css
    if component.style is not None and component.style.class_name:
        props["className"] = component.style.class_name

    props.update(create_event_handlers(component, context.on_event))

    children: list[Any] = []
    if component.children:
        for child in component.children:
            node = render_component(child, context)
            if node is not None:
                children.append(node)
    elif component.text:
        children.append(resolve_bindings(component.text, scope))
    elif component.binding:
        content = _binding_content(component.binding, scope)
        if content is not None:
            children.append(content)

    return context.runtime.create_element(definition, props, children, component.id)


def render(
    schema: UISchema,
    registry: ComponentRegistry,
    runtime: Optional[HostRuntime] = None,
    on_event: Optional[EventCallback] = None,
    unknown_component: Optional[UnknownComponentFn] = None,
    data: Optional[Mapping[str, Any]] = None,
) -> Any:
    """
    Render a schema.

    Args:
        schema: Schema to render (never mutated)
        registry: Component lookup for this theme
        runtime: Host runtime; defaults to a ``TreeRuntime``
        on_event: Receives ``(action, event, component_id)`` from handlers
        unknown_component: Placeholder factory for unregistered types
        data: Data Context; defaults to ``schema.data``

    Returns:
        Whatever the runtime produced for the root, or None if the root's
        condition is false
    """
    context = RenderContext(
        registry=registry,
        runtime=runtime if runtime is not None else TreeRuntime(),
        data=data if data is not None else (schema.data or {}),
        on_event=on_event,
        unknown_component=unknown_component,
    )
    with LogContext(render_root=schema.root.id):
        return render_component(schema.root, context)


class SchemaRenderer:
    """Reusable renderer bound to a registry, runtime and callbacks"""

    def __init__(
        self,
        registry: ComponentRegistry,
        runtime: Optional[HostRuntime] = None,
        on_event: Optional[EventCallback] = None,
        unknown_component: Optional[UnknownComponentFn] = None,
    ):
        self.registry = registry
        self.runtime = runtime if runtime is not None else TreeRuntime()
        self.on_event = on_event
        self.unknown_component = unknown_component

    def render(self, schema: UISchema, data: Optional[Mapping[str, Any]] = None) -> Any:
        return render(
            schema,
            self.registry,
            runtime=self.runtime,
            on_event=self.on_event,
            unknown_component=self.unknown_component,
            data=data,
        )

    def __call__(self, schema: UISchema, data: Optional[Mapping[str, Any]] = None) -> Any:
        return self.render(schema, data)

"""Schema rendering into a host UI runtime."""

from .renderer import (
    EventCallback,
    EventHandler,
    RenderContext,
    SchemaRenderer,
    UnknownComponentFn,
    create_event_handlers,
    handler_name,
    render,
    render_component,
    resolve_style,
)
from .runtime import FRAGMENT, HostRuntime, Node, TreeRuntime

__all__ = [
    "EventCallback",
    "EventHandler",
    "RenderContext",
    "SchemaRenderer",
    "UnknownComponentFn",
    "create_event_handlers",
    "handler_name",
    "render",
    "render_component",
    "resolve_style",
    "FRAGMENT",
    "HostRuntime",
    "Node",
    "TreeRuntime",
]

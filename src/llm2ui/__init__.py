"""
llm2ui
Interpret LLM-generated UI Schema JSON: bind data, render through a host
runtime, layer templates, and build theme-aware generation prompts.
"""

from .binding import evaluate_condition, extract_data_fields, get_unique_paths, resolve_binding, resolve_bindings
from .context import DEFAULT_CONTEXT_SETTINGS, ContextBuilder, ContextBuildResult, ContextSettings, estimate_tokens
from .core import Settings, configure_logging, get_settings
from .layering import ComponentTemplate, TemplateLayer, TemplateManager, merge_layers, merge_templates
from .registry import ComponentDefinition, ComponentRegistry, DuplicateComponentError, Platform, PropSchema
from .render import HostRuntime, Node, SchemaRenderer, TreeRuntime, render
from .schema import UIComponent, UISchema, dump_schema, load_schema, validate_ui_schema
from .streaming import SchemaStream, collect_schema, collect_schema_sync, extract_ui_schema
from .themes import ThemeError, ThemeManager, ThemePack

__version__ = "0.1.0"

__all__ = [
    "evaluate_condition",
    "extract_data_fields",
    "get_unique_paths",
    "resolve_binding",
    "resolve_bindings",
    "DEFAULT_CONTEXT_SETTINGS",
    "ContextBuilder",
    "ContextBuildResult",
    "ContextSettings",
    "estimate_tokens",
    "Settings",
    "configure_logging",
    "get_settings",
    "ComponentTemplate",
    "TemplateLayer",
    "TemplateManager",
    "merge_layers",
    "merge_templates",
    "ComponentDefinition",
    "ComponentRegistry",
    "DuplicateComponentError",
    "Platform",
    "PropSchema",
    "HostRuntime",
    "Node",
    "SchemaRenderer",
    "TreeRuntime",
    "render",
    "UIComponent",
    "UISchema",
    "dump_schema",
    "load_schema",
    "validate_ui_schema",
    "SchemaStream",
    "collect_schema",
    "collect_schema_sync",
    "extract_ui_schema",
    "ThemeError",
    "ThemeManager",
    "ThemePack",
    "__version__",
]

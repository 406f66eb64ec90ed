"""Prompt context building under a token budget."""

from .builder import (
    ContextBreakdown,
    ContextBuilder,
    ContextBuildResult,
    color_info,
    component_docs,
    example_docs,
    select_components,
    select_examples,
)
from .settings import (
    COMPONENT_PRESETS,
    DEFAULT_CONTEXT_SETTINGS,
    ColorSchemeSelection,
    ComponentSelection,
    ContextSettings,
    ExampleSelection,
    TokenBudget,
)
from .tokens import TokenEstimate, estimate_tokens, tokens_per_char

__all__ = [
    "ContextBreakdown",
    "ContextBuilder",
    "ContextBuildResult",
    "color_info",
    "component_docs",
    "example_docs",
    "select_components",
    "select_examples",
    "COMPONENT_PRESETS",
    "DEFAULT_CONTEXT_SETTINGS",
    "ColorSchemeSelection",
    "ComponentSelection",
    "ContextSettings",
    "ExampleSelection",
    "TokenBudget",
    "TokenEstimate",
    "estimate_tokens",
    "tokens_per_char",
]

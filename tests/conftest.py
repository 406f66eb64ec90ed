"""Pytest configuration and fixtures."""

import os

import pytest

from llm2ui.core import get_settings
from llm2ui.registry import ComponentDefinition, ComponentRegistry, PropSchema, PropType
from llm2ui.render import TreeRuntime
from llm2ui.schema import UISchema
from llm2ui.themes import ThemeManager


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["LLM2UI_LOG_LEVEL"] = "DEBUG"
    os.environ["LLM2UI_DEFAULT_THEME_ID"] = "shadcn-ui"
    os.environ["LLM2UI_LANGUAGE"] = "en"
    get_settings.cache_clear()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def registry():
    """Fresh registry with a handful of components."""
    registry = ComponentRegistry(name="test")
    registry.register(ComponentDefinition(type="Container", category="layout"))
    registry.register(ComponentDefinition(type="Text", category="display"))
    registry.register(
        ComponentDefinition(
            type="Button",
            category="input",
            description="Clickable button",
            props_schema={
                "variant": PropSchema(type=PropType.STRING, enum=("default", "outline")),
                "disabled": PropSchema(type=PropType.BOOLEAN),
            },
            tags=("action",),
        )
    )
    registry.register(
        ComponentDefinition(
            type="Input",
            category="input",
            props_schema={"placeholder": PropSchema(type=PropType.STRING, required=True)},
        )
    )
    return registry


@pytest.fixture
def runtime():
    """Tree runtime producing inspectable nodes."""
    return TreeRuntime()


# ============================================================================
# Schema Fixtures
# ============================================================================

@pytest.fixture
def simple_schema():
    """Card-like schema with bindings, a condition and an event."""
    return UISchema.model_validate(
        {
            "version": "1.0",
            "root": {
                "id": "root",
                "type": "Container",
                "children": [
                    {"id": "greeting", "type": "Text", "text": "Hello {{user.name}}"},
                    {"id": "admin-only", "type": "Text", "text": "Admin", "condition": "{{user.admin}}"},
                    {
                        "id": "save",
                        "type": "Button",
                        "props": {"variant": "outline", "label": "Save {{user.name}}"},
                        "events": [{"event": "click", "action": "save", "payload": {"id": 1}}],
                        "text": "Save",
                    },
                ],
            },
            "data": {"user": {"name": "Ada", "admin": False}},
        }
    )


@pytest.fixture
def loop_schema():
    """Schema repeating a row per item."""
    return UISchema.model_validate(
        {
            "version": "1.0",
            "root": {
                "id": "list",
                "type": "Container",
                "children": [
                    {
                        "id": "row",
                        "type": "Text",
                        "loop": {"source": "items"},
                        "text": "{{index}}: {{item.label}}",
                    }
                ],
            },
            "data": {"items": [{"label": "a"}, {"label": "b"}, {"label": "c"}]},
        }
    )


# ============================================================================
# Theme Fixtures
# ============================================================================

@pytest.fixture
def theme_manager():
    """Manager with builtin themes, default active."""
    return ThemeManager.with_builtins()


@pytest.fixture
def shadcn_theme(theme_manager):
    """Builtin shadcn-ui theme pack."""
    return theme_manager.get_theme("shadcn-ui")

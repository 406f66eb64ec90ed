"""
Theme Pack Types
A theme bundles component definitions, example schemas, prompt text,
color schemes and layered templates for one visual style.
"""

from collections import Counter
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..layering import ComponentTemplate, TemplateManager
from ..registry import ComponentDefinition, ComponentRegistry
from ..schema import UISchema


class ThemeErrorCode(str, Enum):
    THEME_NOT_FOUND = "THEME_NOT_FOUND"
    THEME_ALREADY_EXISTS = "THEME_ALREADY_EXISTS"
    INVALID_THEME_PACK = "INVALID_THEME_PACK"
    CANNOT_UNINSTALL_BUILTIN = "CANNOT_UNINSTALL_BUILTIN"
    CANNOT_UNINSTALL_ACTIVE = "CANNOT_UNINSTALL_ACTIVE"


class ThemeError(Exception):
    """Theme lookup, registration or activation failure"""

    def __init__(self, code: ThemeErrorCode, message: str, theme_id: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.theme_id = theme_id

    def __repr__(self) -> str:
        return f"ThemeError(code={self.code.value}, theme_id={self.theme_id!r})"


class ThemeModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ThemeExample(ThemeModel):
    """Worked example schema shown to the model"""

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    category: str = "general"
    tags: tuple[str, ...] = ()
    ui_schema: UISchema = Field(..., alias="schema")


class PromptTemplates(ThemeModel):
    """Prompt sections for one language"""

    system_intro: str
    icon_guidelines: str = ""
    negative_examples: str = ""
    closing: str = ""
    components_heading: str = "## Available Components"
    examples_heading: str = "## Examples"
    negative_heading: str = "## Negative Examples (avoid)"
    colors_heading: str = "## Color Scheme"


class ColorScheme(ThemeModel):
    id: str = Field(..., min_length=1)
    name: str
    type: str = Field(default="light", pattern="^(light|dark)$")
    colors: dict[str, str] = Field(default_factory=dict)


class ThemePack(BaseModel):
    """Everything one theme contributes"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    version: str = "1.0.0"
    author: Optional[str] = None
    components: tuple[ComponentDefinition, ...] = ()
    examples: tuple[ThemeExample, ...] = ()
    prompts: dict[str, PromptTemplates] = Field(default_factory=dict)
    color_schemes: tuple[ColorScheme, ...] = ()
    # component name -> its layered templates
    templates: dict[str, tuple[ComponentTemplate, ...]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_uniqueness(self) -> "ThemePack":
        for label, ids in (
            ("example", [e.id for e in self.examples]),
            ("component", [c.type for c in self.components]),
            ("color scheme", [s.id for s in self.color_schemes]),
        ):
            duplicates = sorted(i for i, count in Counter(ids).items() if count > 1)
            if duplicates:
                raise ValueError(f"duplicate {label} ids in theme {self.id}: {', '.join(duplicates)}")
        return self

    def create_registry(self) -> ComponentRegistry:
        """Fresh registry holding this theme's components"""
        registry = ComponentRegistry(name=self.id)
        for definition in self.components:
            registry.register(definition)
        return registry

    def create_template_manager(self) -> TemplateManager:
        manager = TemplateManager()
        for name, layers in self.templates.items():
            for template in layers:
                manager.register_template(name, template)
        return manager

    def prompts_for(self, language: str) -> Optional[PromptTemplates]:
        """Templates for language, falling back to English"""
        return self.prompts.get(language) or self.prompts.get("en")

    def get_example(self, example_id: str) -> Optional[ThemeExample]:
        return next((e for e in self.examples if e.id == example_id), None)

    def get_color_scheme(self, scheme_id: str) -> Optional[ColorScheme]:
        return next((s for s in self.color_schemes if s.id == scheme_id), None)

    def summary(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "components": len(self.components),
            "examples": len(self.examples),
        }

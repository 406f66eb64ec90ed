"""
Template Manager
Layered component templates: base -> platform -> theme.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core import get_logger
from ..registry import Platform
from ..schema import UISchema
from .merge import merge_templates

logger = get_logger(__name__)

TemplateKey = tuple[str, "TemplateLayer", Optional[Platform], Optional[str]]


class TemplateError(Exception):
    """Template is inconsistent with its layer."""


class TemplateLayer(str, Enum):
    BASE = "base"
    PLATFORM = "platform"
    THEME = "theme"


class ComponentTemplate(BaseModel):
    """One layer's schema for a component"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    layer: TemplateLayer
    platform: Optional[Platform] = None
    theme: Optional[str] = None
    template: UISchema
    styles: dict[str, str] = Field(default_factory=dict)


def _platform(value: Union[Platform, str, None]) -> Optional[Platform]:
    if value is None or isinstance(value, Platform):
        return value
    try:
        return Platform(value)
    except ValueError as e:
        raise TemplateError(f"Unknown platform: {value}") from e


def _key(name: str, layer: TemplateLayer, platform: Union[Platform, str, None], theme: Optional[str]) -> TemplateKey:
    return (name, TemplateLayer(layer), _platform(platform), theme)


class TemplateManager:
    """
    Stores templates keyed by (component, layer, platform, theme) and
    resolves the effective schema for a platform/theme pair.
    """

    def __init__(self) -> None:
        self._templates: dict[TemplateKey, ComponentTemplate] = {}

    def register_template(self, name: str, template: ComponentTemplate) -> None:
        """
        Store a template, replacing any existing one with the same key.

        Raises:
            TemplateError: Layer and platform/theme qualifiers disagree
        """
        if not name.strip():
            raise TemplateError("Template component name cannot be empty")
        if template.layer is TemplateLayer.PLATFORM and template.platform is None:
            raise TemplateError(f"Platform template for {name} has no platform")
        if template.layer is TemplateLayer.THEME and not template.theme:
            raise TemplateError(f"Theme template for {name} has no theme")
        if template.layer is TemplateLayer.BASE and (template.platform or template.theme):
            raise TemplateError(f"Base template for {name} cannot target a platform or theme")

        key = _key(name, template.layer, template.platform, template.theme)
        if key in self._templates:
            logger.debug("template_replaced", component=name, layer=template.layer.value)
        self._templates[key] = template

    def get_template_by_layer(
        self,
        name: str,
        layer: Union[TemplateLayer, str],
        platform: Union[Platform, str, None] = None,
        theme: Optional[str] = None,
    ) -> Optional[ComponentTemplate]:
        return self._templates.get(_key(name, TemplateLayer(layer), platform, theme))

    def _layers(
        self, name: str, platform: Union[Platform, str], theme: Optional[str]
    ) -> list[ComponentTemplate]:
        layers = [
            self.get_template_by_layer(name, TemplateLayer.BASE),
            self.get_template_by_layer(name, TemplateLayer.PLATFORM, platform=platform),
            self.get_template_by_layer(name, TemplateLayer.THEME, theme=theme) if theme else None,
        ]
        return [layer for layer in layers if layer is not None]

    def get_template(
        self,
        name: str,
        platform: Union[Platform, str],
        theme: Optional[str] = None,
    ) -> Optional[UISchema]:
        """
        Effective schema for a component.

        Returns None when the component has no base template; missing
        platform or theme layers are skipped.
        """
        base = self.get_template_by_layer(name, TemplateLayer.BASE)
        if base is None:
            return None
        overrides = [t.template for t in self._layers(name, platform, theme) if t is not base]
        return merge_templates(base.template, *overrides)

    def get_styles(
        self,
        name: str,
        platform: Union[Platform, str],
        theme: Optional[str] = None,
    ) -> dict[str, str]:
        """Style maps of the matching layers, folded in layer order"""
        styles: dict[str, str] = {}
        for template in self._layers(name, platform, theme):
            styles.update(template.styles)
        return styles

    def merge_templates(self, base: UISchema, *overrides: UISchema) -> UISchema:
        return merge_templates(base, *overrides)

    def has_template(
        self,
        name: str,
        layer: Union[TemplateLayer, str],
        platform: Union[Platform, str, None] = None,
        theme: Optional[str] = None,
    ) -> bool:
        return _key(name, TemplateLayer(layer), platform, theme) in self._templates

    def remove_template(
        self,
        name: str,
        layer: Union[TemplateLayer, str],
        platform: Union[Platform, str, None] = None,
        theme: Optional[str] = None,
    ) -> bool:
        return self._templates.pop(_key(name, TemplateLayer(layer), platform, theme), None) is not None

    def get_component_templates(self, name: str) -> list[ComponentTemplate]:
        return [template for key, template in self._templates.items() if key[0] == name]

    def clear(self) -> None:
        self._templates.clear()

    def __len__(self) -> int:
        return len(self._templates)

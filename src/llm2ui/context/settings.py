"""
Context Settings
What to put into a generation prompt and how many tokens it may use.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core import get_settings

ComponentMode = Literal["all", "selected", "preset"]
ExampleMode = Literal["auto", "selected", "none"]

COMPONENT_PRESETS: dict[str, tuple[str, ...]] = {
    "layout-only": ("Container", "Card", "CardHeader", "CardContent", "CardFooter"),
    "forms-only": ("Input", "Button", "Label", "Textarea", "Select", "Checkbox"),
    "display-only": ("Text", "Icon", "Badge", "Table"),
    # empty means every component
    "all": (),
}


class SettingsModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ComponentSelection(SettingsModel):
    mode: ComponentMode = "all"
    selected_ids: Optional[tuple[str, ...]] = None
    preset_name: Optional[str] = None


class ExampleSelection(SettingsModel):
    mode: ExampleMode = "auto"
    selected_ids: Optional[tuple[str, ...]] = None
    max_count: Optional[int] = Field(default_factory=lambda: get_settings().max_examples, ge=0)


class ColorSchemeSelection(SettingsModel):
    id: str = "light"
    include_in_prompt: bool = True


class TokenBudget(SettingsModel):
    max: int = Field(default_factory=lambda: get_settings().token_budget, gt=0)
    auto_optimize: bool = True


class ContextSettings(SettingsModel):
    """Prompt composition for one theme"""

    theme_id: str = Field(default_factory=lambda: get_settings().default_theme_id)
    components: ComponentSelection = Field(default_factory=ComponentSelection)
    examples: ExampleSelection = Field(default_factory=ExampleSelection)
    color_scheme: ColorSchemeSelection = Field(default_factory=ColorSchemeSelection)
    token_budget: TokenBudget = Field(default_factory=TokenBudget)


DEFAULT_CONTEXT_SETTINGS = ContextSettings(
    theme_id="shadcn-ui",
    components=ComponentSelection(mode="all"),
    examples=ExampleSelection(mode="auto", max_count=5),
    color_scheme=ColorSchemeSelection(id="light", include_in_prompt=True),
    token_budget=TokenBudget(max=4000, auto_optimize=True),
)

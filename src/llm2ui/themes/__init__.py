"""Theme packs and the theme manager."""

from .manager import ThemeChangeEvent, ThemeChangeListener, ThemeManager
from .models import (
    ColorScheme,
    PromptTemplates,
    ThemeError,
    ThemeErrorCode,
    ThemeExample,
    ThemePack,
)

__all__ = [
    "ThemeChangeEvent",
    "ThemeChangeListener",
    "ThemeManager",
    "ColorScheme",
    "PromptTemplates",
    "ThemeError",
    "ThemeErrorCode",
    "ThemeExample",
    "ThemePack",
]

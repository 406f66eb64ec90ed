"""Theme packs shipped with the package."""

from .shadcn import SHADCN_THEME

BUILTIN_THEMES = (SHADCN_THEME,)

__all__ = ["BUILTIN_THEMES", "SHADCN_THEME"]

"""
shadcn/ui theme pack.
"""

from ....layering import ComponentTemplate, TemplateLayer
from ....registry import Platform
from ...models import ColorScheme, ThemePack
from .components import COMPONENTS
from .examples import EXAMPLES
from .prompts import PROMPTS

THEME_ID = "shadcn-ui"

COLOR_SCHEMES = (
    ColorScheme(
        id="light",
        name="Light",
        type="light",
        colors={
            "background": "hsl(0 0% 100%)",
            "foreground": "hsl(222.2 84% 4.9%)",
            "primary": "hsl(222.2 47.4% 11.2%)",
            "secondary": "hsl(210 40% 96.1%)",
            "accent": "hsl(210 40% 96.1%)",
            "muted": "hsl(210 40% 96.1%)",
            "border": "hsl(214.3 31.8% 91.4%)",
            "destructive": "hsl(0 84.2% 60.2%)",
        },
    ),
    ColorScheme(
        id="dark",
        name="Dark",
        type="dark",
        colors={
            "background": "hsl(222.2 84% 4.9%)",
            "foreground": "hsl(210 40% 98%)",
            "primary": "hsl(210 40% 98%)",
            "secondary": "hsl(217.2 32.6% 17.5%)",
            "accent": "hsl(217.2 32.6% 17.5%)",
            "muted": "hsl(217.2 32.6% 17.5%)",
            "border": "hsl(217.2 32.6% 17.5%)",
            "destructive": "hsl(0 62.8% 30.6%)",
        },
    ),
)

# Button: base shape, larger touch target on mobile, theme styling on top
TEMPLATES = {
    "Button": (
        ComponentTemplate(
            layer=TemplateLayer.BASE,
            template={
                "version": "1.0",
                "root": {"id": "button", "type": "Button", "props": {"variant": "default", "size": "default"}},
            },
            styles={"cursor": "pointer"},
        ),
        ComponentTemplate(
            layer=TemplateLayer.PLATFORM,
            platform=Platform.MOBILE_WEB,
            template={
                "root": {"id": "button", "type": "Button", "props": {"size": "lg"}, "style": {"style": {"minHeight": 44}}},
            },
            styles={"touchAction": "manipulation"},
        ),
        ComponentTemplate(
            layer=TemplateLayer.THEME,
            theme=THEME_ID,
            template={
                "root": {
                    "id": "button",
                    "type": "Button",
                    "props": {"className": "rounded-md font-medium"},
                },
            },
            styles={"borderRadius": "0.5rem"},
        ),
    ),
}

SHADCN_THEME = ThemePack(
    id=THEME_ID,
    name="shadcn/ui",
    description="Clean, modern components built on Tailwind CSS",
    version="1.0.0",
    author="llm2ui",
    components=COMPONENTS,
    examples=EXAMPLES,
    prompts=PROMPTS,
    color_schemes=COLOR_SCHEMES,
    templates=TEMPLATES,
)

__all__ = ["SHADCN_THEME", "THEME_ID"]

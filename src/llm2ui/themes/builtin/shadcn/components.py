"""shadcn/ui component definitions."""

from ....registry import ComponentDefinition, Platform, PropSchema, PropType

_CLASS_NAME = PropSchema(type=PropType.STRING, description="Tailwind CSS class names")

_WEB = (Platform.PC_WEB, Platform.MOBILE_WEB, Platform.PC_DESKTOP)


def _layout(type: str, description: str, tags: tuple[str, ...] = ()) -> ComponentDefinition:
    return ComponentDefinition(
        type=type,
        display_name=type,
        category="layout",
        description=description,
        props_schema={"className": _CLASS_NAME},
        platforms=_WEB,
        tags=("layout", *tags),
    )


COMPONENTS: tuple[ComponentDefinition, ...] = (
    _layout("Container", "Generic container for layout and styling", ("div", "flex", "grid")),
    _layout("Card", "Card surface grouping related content", ("panel",)),
    _layout("CardHeader", "Card header holding title and description", ("card",)),
    _layout("CardTitle", "Card heading text", ("card", "heading")),
    _layout("CardDescription", "Muted text under a card title", ("card",)),
    _layout("CardContent", "Card body", ("card",)),
    _layout("CardFooter", "Card footer, usually actions", ("card",)),
    ComponentDefinition(
        type="Button",
        display_name="Button",
        category="input",
        description="Button with variants: default, destructive, outline, secondary, ghost, link",
        props_schema={
            "variant": PropSchema(
                type=PropType.STRING,
                default="default",
                enum=("default", "destructive", "outline", "secondary", "ghost", "link"),
            ),
            "size": PropSchema(type=PropType.STRING, default="default", enum=("default", "sm", "lg", "icon")),
            "disabled": PropSchema(type=PropType.BOOLEAN, default=False),
            "className": _CLASS_NAME,
        },
        default_props={"variant": "default", "size": "default"},
        platforms=_WEB,
        tags=("action", "form", "click"),
        icon="mouse-pointer-click",
    ),
    ComponentDefinition(
        type="Input",
        display_name="Input",
        category="input",
        description="Single-line text input",
        props_schema={
            "type": PropSchema(
                type=PropType.STRING,
                default="text",
                enum=("text", "password", "email", "number", "tel", "url", "search"),
            ),
            "placeholder": PropSchema(type=PropType.STRING),
            "value": PropSchema(type=PropType.STRING),
            "className": _CLASS_NAME,
        },
        platforms=_WEB,
        tags=("form", "text field"),
    ),
    ComponentDefinition(
        type="Label",
        display_name="Label",
        category="input",
        description="Form field label",
        props_schema={"htmlFor": PropSchema(type=PropType.STRING), "className": _CLASS_NAME},
        tags=("form",),
    ),
    ComponentDefinition(
        type="Textarea",
        display_name="Textarea",
        category="input",
        description="Multi-line text input",
        props_schema={
            "placeholder": PropSchema(type=PropType.STRING),
            "rows": PropSchema(type=PropType.NUMBER),
            "className": _CLASS_NAME,
        },
        tags=("form", "text field"),
    ),
    ComponentDefinition(
        type="Select",
        display_name="Select",
        category="input",
        description="Dropdown choice from a list of options",
        props_schema={
            "options": PropSchema(type=PropType.ARRAY, required=True, description="[{label, value}]"),
            "value": PropSchema(type=PropType.STRING),
            "placeholder": PropSchema(type=PropType.STRING),
        },
        tags=("form", "dropdown"),
    ),
    ComponentDefinition(
        type="Checkbox",
        display_name="Checkbox",
        category="input",
        description="Boolean checkbox",
        props_schema={"checked": PropSchema(type=PropType.BOOLEAN, default=False)},
        tags=("form", "toggle"),
    ),
    ComponentDefinition(
        type="Switch",
        display_name="Switch",
        category="input",
        description="Toggle switch",
        props_schema={"checked": PropSchema(type=PropType.BOOLEAN, default=False)},
        tags=("form", "toggle"),
    ),
    ComponentDefinition(
        type="Text",
        display_name="Text",
        category="display",
        description="Text display",
        props_schema={"className": _CLASS_NAME},
        tags=("typography",),
    ),
    ComponentDefinition(
        type="Icon",
        display_name="Icon",
        category="display",
        description="Lucide icon by name; use instead of emoji",
        props_schema={
            "name": PropSchema(type=PropType.STRING, required=True),
            "size": PropSchema(type=PropType.NUMBER, default=16),
        },
        tags=("icon", "lucide"),
    ),
    ComponentDefinition(
        type="Badge",
        display_name="Badge",
        category="display",
        description="Small status label",
        props_schema={
            "variant": PropSchema(
                type=PropType.STRING,
                default="default",
                enum=("default", "secondary", "destructive", "outline"),
            )
        },
        tags=("status", "tag"),
    ),
    ComponentDefinition(
        type="Table",
        display_name="Table",
        category="display",
        description="Data table; compose with TableHeader, TableBody, TableRow, TableHead, TableCell",
        props_schema={"className": _CLASS_NAME},
        tags=("data", "grid"),
    ),
    ComponentDefinition(
        type="Alert",
        display_name="Alert",
        category="feedback",
        description="Callout for important messages",
        props_schema={"variant": PropSchema(type=PropType.STRING, default="default", enum=("default", "destructive"))},
        tags=("message", "notice"),
    ),
    ComponentDefinition(
        type="Progress",
        display_name="Progress",
        category="feedback",
        description="Progress bar from 0 to 100",
        props_schema={"value": PropSchema(type=PropType.NUMBER, default=0)},
        tags=("loading",),
    ),
    ComponentDefinition(
        type="Tabs",
        display_name="Tabs",
        category="navigation",
        description="Tabbed sections",
        props_schema={"defaultValue": PropSchema(type=PropType.STRING)},
        tags=("navigation",),
    ),
)

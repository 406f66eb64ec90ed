"""UI Schema data models.

Wire names are camelCase (``itemName``, ``className``); attributes are
snake_case. Both spellings are accepted on input. Models are frozen: the
renderer and the layering merger never mutate a schema they are given.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """Base model for every UI Schema node."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase JSON shape, omitting unset/None fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EventBinding(SchemaModel):
    """On ``event``, signal ``action`` with ``payload`` to the host."""

    event: str = Field(..., min_length=1)
    action: str = Field(..., min_length=1)
    payload: Any = None


class LoopConfig(SchemaModel):
    """Repeat a component once per element of ``source``."""

    source: str = Field(..., min_length=1)
    item_name: str | None = None
    index_name: str | None = None


class StyleProps(SchemaModel):
    """Inline style map plus named shorthand fields."""

    class_name: str | None = None
    style: dict[str, Any] | None = None
    width: str | int | float | None = None
    height: str | int | float | None = None
    margin: str | int | float | None = None
    padding: str | int | float | None = None
    display: str | None = None
    flex_direction: str | None = None
    justify_content: str | None = None
    align_items: str | None = None
    gap: str | int | float | None = None
    background_color: str | None = None
    color: str | None = None
    font_size: str | int | float | None = None
    font_weight: str | int | None = None
    border_radius: str | int | float | None = None
    border: str | None = None


# Shorthand fields folded into the computed style map, in application order
STYLE_SHORTHANDS: tuple[str, ...] = (
    "width",
    "height",
    "margin",
    "padding",
    "display",
    "flex_direction",
    "justify_content",
    "align_items",
    "gap",
    "background_color",
    "color",
    "font_size",
    "font_weight",
    "border_radius",
    "border",
)


class UIComponent(SchemaModel):
    """One node of the UI tree."""

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    props: dict[str, Any] | None = None
    children: list["UIComponent"] | None = None
    events: list[EventBinding] | None = None
    style: StyleProps | None = None
    text: str | None = None
    binding: str | None = None
    condition: str | None = None
    loop: LoopConfig | None = None

    def iter_tree(self):
        """Yield this component and every descendant, depth first."""
        yield self
        for child in self.children or ():
            yield from child.iter_tree()


class SchemaMeta(SchemaModel):
    title: str | None = None
    description: str | None = None


class UISchema(SchemaModel):
    """A complete UI document: component tree, data and metadata."""

    version: str = Field(default="1.0", min_length=1)
    root: UIComponent
    data: dict[str, Any] | None = None
    meta: SchemaMeta | None = None


UIComponent.model_rebuild()

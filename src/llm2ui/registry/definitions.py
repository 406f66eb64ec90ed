"""
Component Definition Types
What a theme publishes for each renderable component type.
"""

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# render(props, children) -> host node
RenderFn = Callable[[dict[str, Any], Sequence[Any]], Any]


class Platform(str, Enum):
    """Target platforms a component or template can be specialised for"""
    PC_WEB = "pc-web"
    MOBILE_WEB = "mobile-web"
    MOBILE_NATIVE = "mobile-native"
    PC_DESKTOP = "pc-desktop"


class PropType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"


class PropSchema(BaseModel):
    """Declared shape of a single prop"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: PropType
    required: bool = False
    default: Any = None
    description: str = ""
    enum: Optional[tuple[str, ...]] = None


class ComponentDefinition(BaseModel):
    """
    Registered capability for one component type.

    ``render`` is optional: hosts that materialize nodes themselves (see
    ``TreeRuntime``) only need the metadata.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    type: str = Field(..., description="Component type name used in schemas")
    display_name: str = ""
    category: str = "display"
    props_schema: dict[str, PropSchema] = Field(default_factory=dict)
    default_props: dict[str, Any] = Field(default_factory=dict)
    render: Optional[RenderFn] = Field(default=None, exclude=True)
    description: str = ""
    version: Optional[str] = None
    platforms: tuple[Platform, ...] = ()
    tags: tuple[str, ...] = ()
    icon: Optional[str] = None
    deprecated: bool = False
    deprecation_message: Optional[str] = None

    @field_validator("type")
    @classmethod
    def _type_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("component type cannot be empty")
        return v

    @field_validator("version")
    @classmethod
    def _version_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("version must be a non-empty string")
        return v

    @property
    def label(self) -> str:
        return self.display_name or self.type

    def supports(self, platform: Platform) -> bool:
        """No declared platforms means every platform."""
        return not self.platforms or platform in self.platforms

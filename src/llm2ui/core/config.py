"""Configuration Management."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Library settings from environment (``LLM2UI_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="LLM2UI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Schema
    schema_version: str = Field(default="1.0", description="UI Schema wire version")
    max_schema_size: int = Field(default=512 * 1024, gt=0, description="Max schema JSON size (bytes)")
    max_schema_depth: int = Field(default=64, gt=0, description="Max schema nesting depth")

    # Rendering
    unknown_component_type: str = Field(
        default="UnknownComponent", description="Node type emitted for unregistered components"
    )

    # Context building
    language: Literal["en", "zh"] = Field(default="en", description="Prompt language")
    include_negative_examples: bool = Field(default=True, description="Append negative examples block")
    base_prompt_tokens: int = Field(default=500, ge=0, description="Fixed prompt overhead (tokens)")
    tokens_per_char_en: float = Field(default=0.25, gt=0.0, description="Token estimate ratio, Latin text")
    tokens_per_char_zh: float = Field(default=0.7, gt=0.0, description="Token estimate ratio, CJK text")
    token_budget: int = Field(default=4000, gt=0, description="Default prompt token budget")
    min_examples: int = Field(default=1, ge=0, description="Floor for example trimming")
    max_examples: int = Field(default=5, ge=0, description="Examples included in auto mode")
    prompt_cache_size: int = Field(default=50, gt=0, description="Built prompt cache size")

    # Themes
    default_theme_id: str = Field(default="shadcn-ui", description="Theme used when none is requested")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

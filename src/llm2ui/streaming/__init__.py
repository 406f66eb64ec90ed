"""Schema extraction from streamed model output."""

from .extract import extract_ui_schema, looks_like_ui_schema
from .stream import SchemaCallback, SchemaStream, collect_schema, collect_schema_sync

__all__ = [
    "extract_ui_schema",
    "looks_like_ui_schema",
    "SchemaCallback",
    "SchemaStream",
    "collect_schema",
    "collect_schema_sync",
]

"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    JSONBlock,
    JSONParseError,
    extract_json,
    extract_json_blocks,
    loads,
    safe_json_dumps,
    validate_json_size,
    validate_json_depth,
)
from .hash import Algorithm, hash_string, hash_bytes, hash_fields, hash_object
from .cache import LRUCache, Stats


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "JSONBlock",
    "JSONParseError",
    "extract_json",
    "extract_json_blocks",
    "loads",
    "safe_json_dumps",
    "validate_json_size",
    "validate_json_depth",
    # Hashing
    "Algorithm",
    "hash_string",
    "hash_bytes",
    "hash_fields",
    "hash_object",
    # Caching
    "LRUCache",
    "Stats",
]

"""
Data Binding
Path expressions and ``{{path}}`` interpolation against a Data Context.
"""

from .path import (
    IndexSegment,
    PathNotFound,
    PathSegment,
    PathSyntaxError,
    PropertySegment,
    format_path,
    parse_path,
    resolve_path,
    resolve_segments,
)
from .resolver import (
    BINDING_PATTERN,
    evaluate_condition,
    is_binding,
    is_truthy,
    resolve_binding,
    resolve_bindings,
    resolve_value,
    stringify_value,
    unwrap_binding,
)
from .fields import DataField, extract_data_fields, get_unique_paths

__all__ = [
    "IndexSegment",
    "PathNotFound",
    "PathSegment",
    "PathSyntaxError",
    "PropertySegment",
    "format_path",
    "parse_path",
    "resolve_path",
    "resolve_segments",
    "BINDING_PATTERN",
    "evaluate_condition",
    "is_binding",
    "is_truthy",
    "resolve_binding",
    "resolve_bindings",
    "resolve_value",
    "stringify_value",
    "unwrap_binding",
    "DataField",
    "extract_data_fields",
    "get_unique_paths",
]

"""UI Schema models and structural validation."""

from .models import (
    STYLE_SHORTHANDS,
    EventBinding,
    LoopConfig,
    SchemaMeta,
    StyleProps,
    UIComponent,
    UISchema,
)
from .validate import (
    IssueCode,
    SchemaIssue,
    SchemaValidationError,
    check_structure,
    dump_schema,
    load_schema,
    parse_schema,
    validate_ui_schema,
)

__all__ = [
    "STYLE_SHORTHANDS",
    "EventBinding",
    "LoopConfig",
    "SchemaMeta",
    "StyleProps",
    "UIComponent",
    "UISchema",
    "IssueCode",
    "SchemaIssue",
    "SchemaValidationError",
    "check_structure",
    "dump_schema",
    "load_schema",
    "parse_schema",
    "validate_ui_schema",
]

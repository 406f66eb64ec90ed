"""Structural validation of UI Schema documents.

Only the checks needed to render safely: shapes, required identifiers,
duplicate ids and well-formed path expressions. Prop values are not
checked against a full JSON-Schema.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from ..binding.path import PathSyntaxError, parse_path
from ..core import (
    JSONParseError,
    get_logger,
    get_settings,
    loads,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)
from .models import UISchema

logger = get_logger(__name__)


class IssueCode(str, Enum):
    INVALID_TYPE = "INVALID_TYPE"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VALUE = "INVALID_VALUE"
    DUPLICATE_ID = "DUPLICATE_ID"
    INVALID_EXPRESSION = "INVALID_EXPRESSION"
    TOO_LARGE = "TOO_LARGE"
    TOO_DEEP = "TOO_DEEP"
    INVALID_JSON = "INVALID_JSON"


@dataclass(frozen=True)
class SchemaIssue:
    """A single structural problem."""

    path: str
    message: str
    code: IssueCode


class SchemaValidationError(Exception):
    """Schema failed structural validation."""

    def __init__(self, issues: list[SchemaIssue]) -> None:
        summary = "; ".join(f"{issue.path or '<schema>'}: {issue.message}" for issue in issues[:5])
        if len(issues) > 5:
            summary += f" (+{len(issues) - 5} more)"
        super().__init__(f"Invalid UI schema: {summary}")
        self.issues = issues


def _non_empty_string(obj: Mapping[str, Any], key: str, path: str, issues: list[SchemaIssue]) -> bool:
    field_path = f"{path}.{key}" if path else key
    if key not in obj:
        issues.append(SchemaIssue(field_path, f"missing required field {key!r}", IssueCode.MISSING_FIELD))
        return False
    value = obj[key]
    if not isinstance(value, str):
        issues.append(SchemaIssue(field_path, f"{key!r} must be a string", IssueCode.INVALID_TYPE))
        return False
    if not value.strip():
        issues.append(SchemaIssue(field_path, f"{key!r} cannot be empty", IssueCode.INVALID_VALUE))
        return False
    return True


def _optional_mapping(obj: Mapping[str, Any], key: str, path: str, issues: list[SchemaIssue]) -> None:
    value = obj.get(key)
    if value is not None and not isinstance(value, Mapping):
        issues.append(SchemaIssue(f"{path}.{key}" if path else key, f"{key!r} must be an object", IssueCode.INVALID_TYPE))


def _expression(value: Any, path: str, issues: list[SchemaIssue]) -> None:
    from ..binding.resolver import unwrap_binding

    if not isinstance(value, str):
        issues.append(SchemaIssue(path, "expression must be a string", IssueCode.INVALID_TYPE))
        return
    try:
        parse_path(unwrap_binding(value))
    except PathSyntaxError as e:
        issues.append(SchemaIssue(path, e.reason, IssueCode.INVALID_EXPRESSION))


def _check_events(events: Any, path: str, issues: list[SchemaIssue]) -> None:
    if not isinstance(events, list):
        issues.append(SchemaIssue(path, "'events' must be an array", IssueCode.INVALID_TYPE))
        return
    for index, event in enumerate(events):
        event_path = f"{path}[{index}]"
        if not isinstance(event, Mapping):
            issues.append(SchemaIssue(event_path, "event binding must be an object", IssueCode.INVALID_TYPE))
            continue
        _non_empty_string(event, "event", event_path, issues)
        _non_empty_string(event, "action", event_path, issues)


def _check_loop(loop: Any, path: str, issues: list[SchemaIssue]) -> None:
    if not isinstance(loop, Mapping):
        issues.append(SchemaIssue(path, "'loop' must be an object", IssueCode.INVALID_TYPE))
        return
    if _non_empty_string(loop, "source", path, issues):
        _expression(loop["source"], f"{path}.source", issues)
    for key in ("itemName", "indexName"):
        value = loop.get(key)
        if value is not None and (not isinstance(value, str) or not value.strip()):
            issues.append(SchemaIssue(f"{path}.{key}", f"{key!r} must be a non-empty string", IssueCode.INVALID_VALUE))


def _check_component(obj: Any, path: str, seen: set[str], issues: list[SchemaIssue]) -> None:
    if not isinstance(obj, Mapping):
        issues.append(SchemaIssue(path, "component must be an object", IssueCode.INVALID_TYPE))
        return

    if _non_empty_string(obj, "id", path, issues):
        if obj["id"] in seen:
            issues.append(SchemaIssue(f"{path}.id", f"duplicate component id {obj['id']!r}", IssueCode.DUPLICATE_ID))
        seen.add(obj["id"])
    _non_empty_string(obj, "type", path, issues)

    _optional_mapping(obj, "props", path, issues)
    _optional_mapping(obj, "style", path, issues)

    for key in ("text", "binding", "condition"):
        value = obj.get(key)
        if value is not None and not isinstance(value, str):
            issues.append(SchemaIssue(f"{path}.{key}", f"{key!r} must be a string", IssueCode.INVALID_TYPE))
    for key in ("binding", "condition"):
        if isinstance(obj.get(key), str):
            _expression(obj[key], f"{path}.{key}", issues)

    if obj.get("events") is not None:
        _check_events(obj["events"], f"{path}.events", issues)
    if obj.get("loop") is not None:
        _check_loop(obj["loop"], f"{path}.loop", issues)

    children = obj.get("children")
    if children is not None:
        if not isinstance(children, list):
            issues.append(SchemaIssue(f"{path}.children", "'children' must be an array", IssueCode.INVALID_TYPE))
        else:
            for index, child in enumerate(children):
                _check_component(child, f"{path}.children[{index}]", seen, issues)


def check_structure(obj: Any) -> list[SchemaIssue]:
    """Collect every structural issue in a decoded schema object."""
    if not isinstance(obj, Mapping):
        return [SchemaIssue("", "schema must be an object", IssueCode.INVALID_TYPE)]

    issues: list[SchemaIssue] = []
    _non_empty_string(obj, "version", "", issues)
    if "root" not in obj:
        issues.append(SchemaIssue("root", "missing required field 'root'", IssueCode.MISSING_FIELD))
    else:
        _check_component(obj["root"], "root", set(), issues)
    _optional_mapping(obj, "data", "", issues)
    _optional_mapping(obj, "meta", "", issues)
    return issues


def validate_ui_schema(obj: Any) -> Result[UISchema, list[SchemaIssue]]:
    """
    Validate a decoded schema and build the model (Result pattern).

    Args:
        obj: Decoded JSON object

    Returns:
        Success with the UISchema, or Failure with every issue found
    """
    settings = get_settings()
    try:
        validate_json_depth(obj, settings.max_schema_depth)
    except JSONParseError as e:
        return Failure([SchemaIssue("", str(e), IssueCode.TOO_DEEP)])

    issues = check_structure(obj)
    if issues:
        logger.debug("schema_invalid", issues=len(issues), first=issues[0].message)
        return Failure(issues)

    try:
        return Success(UISchema.model_validate(obj))
    except PydanticValidationError as e:
        return Failure(
            [
                SchemaIssue(".".join(str(part) for part in err["loc"]), err["msg"], IssueCode.INVALID_VALUE)
                for err in e.errors()
            ]
        )


def parse_schema(obj: Any) -> UISchema:
    """
    Validate and build a UISchema.

    Raises:
        SchemaValidationError: On any structural issue
    """
    result = validate_ui_schema(obj)
    if isinstance(result, Failure):
        raise SchemaValidationError(result.failure())
    return result.unwrap()


def load_schema(text: str) -> UISchema:
    """
    Decode and validate a UI Schema JSON document.

    Raises:
        SchemaValidationError: Invalid JSON, oversized, or structurally invalid
    """
    settings = get_settings()
    try:
        validate_json_size(text, settings.max_schema_size, "UI schema")
    except JSONParseError as e:
        raise SchemaValidationError([SchemaIssue("", str(e), IssueCode.TOO_LARGE)]) from e
    try:
        obj = loads(text)
    except JSONParseError as e:
        raise SchemaValidationError([SchemaIssue("", str(e), IssueCode.INVALID_JSON)]) from e
    return parse_schema(obj)


def dump_schema(schema: UISchema, indent: int = 2) -> str:
    """Encode a schema to its camelCase JSON wire form."""
    return safe_json_dumps(schema.to_wire(), indent=indent)

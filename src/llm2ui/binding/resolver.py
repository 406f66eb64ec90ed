"""
Binding resolution against a Data Context.

Interpolation is fail-soft: a ``{{path}}`` that does not parse or resolve is
left in the output verbatim so broken schemas stay visibly debuggable.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from returns.result import Failure, Result, Success

from ..core import get_logger, safe_json_dumps
from .path import PathNotFound, PathSyntaxError, resolve_path

logger = get_logger(__name__)

BINDING_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
SINGLE_BINDING_PATTERN = re.compile(r"^\s*\{\{([^}]+)\}\}\s*$")


def unwrap_binding(expression: str) -> str:
    """Strip one ``{{ }}`` wrapper if the whole expression is a single binding."""
    match = SINGLE_BINDING_PATTERN.match(expression)
    return match.group(1).strip() if match else expression.strip()


def is_binding(value: Any) -> bool:
    """True if value is a string consisting of exactly one ``{{path}}``."""
    return isinstance(value, str) and SINGLE_BINDING_PATTERN.match(value) is not None


def stringify_value(value: Any) -> str:
    """
    Display form of a resolved value.

    None renders empty, booleans as ``true``/``false``, integral floats
    without a fractional part, containers as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (Mapping, list, tuple)):
        return safe_json_dumps(value)
    return str(value)


def is_truthy(value: Any) -> bool:
    """
    Truthiness for conditions.

    Non-empty strings, non-zero numbers, True and non-empty containers are
    truthy; None, NaN and empty containers are not.
    """
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def resolve_binding(expression: str, data: Mapping[str, Any]) -> Result[Any, PathNotFound]:
    """
    Resolve a single binding, keeping the value's type.

    Accepts ``{{path}}`` or a bare ``path``.

    Raises:
        PathSyntaxError: The inner path is malformed
    """
    return resolve_path(unwrap_binding(expression), data)


def resolve_bindings(template: str, data: Mapping[str, Any]) -> str:
    """
    Substitute every ``{{path}}`` in template with its stringified value.

    Unparseable or unresolvable bindings are kept as literal text.

    Examples:
        >>> resolve_bindings("Hello {{name}}", {"name": "Ada"})
        'Hello Ada'
        >>> resolve_bindings("{{missing}}", {})
        '{{missing}}'
    """
    if not template or "{{" not in template:
        return template

    def substitute(match: re.Match[str]) -> str:
        expression = match.group(1)
        try:
            result = resolve_path(expression, data)
        except PathSyntaxError as e:
            logger.warning("binding_syntax_error", expression=expression, reason=e.reason)
            return match.group(0)

        match result:
            case Success(value):
                return stringify_value(value)
            case Failure(miss):
                logger.debug("binding_unresolved", path=miss.path, reason=miss.reason)
                return match.group(0)
        return match.group(0)

    return BINDING_PATTERN.sub(substitute, template)


def resolve_value(value: Any, data: Mapping[str, Any]) -> Any:
    """
    Resolve bindings inside a prop value.

    Strings are interpolated and mappings recurse; lists and other
    primitives pass through untouched.
    """
    if isinstance(value, str):
        return resolve_bindings(value, data)
    if isinstance(value, Mapping):
        return {key: resolve_value(item, data) for key, item in value.items()}
    return value


def evaluate_condition(condition: str, data: Mapping[str, Any]) -> bool:
    """
    Evaluate a condition (``{{path}}`` or bare path) for truthiness.

    Anything that fails to parse or resolve is False.
    """
    try:
        result = resolve_binding(condition, data)
    except PathSyntaxError as e:
        logger.warning("condition_syntax_error", condition=condition, reason=e.reason)
        return False

    match result:
        case Success(value):
            return is_truthy(value)
        case Failure(miss):
            logger.debug("condition_unresolved", path=miss.path, reason=miss.reason)
    return False

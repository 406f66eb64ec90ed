"""Pull a UI Schema out of free-form model output."""

from collections.abc import Mapping
from typing import Any, Optional

from returns.result import Failure, Success

from ..core import JSONParseError, extract_json_blocks, get_logger, get_settings, loads, validate_json_size
from ..schema import UISchema, validate_ui_schema

logger = get_logger(__name__)


def looks_like_ui_schema(obj: Any) -> bool:
    """An object whose ``root`` has both ``id`` and ``type``"""
    if not isinstance(obj, Mapping):
        return False
    root = obj.get("root")
    return isinstance(root, Mapping) and "id" in root and "type" in root


def extract_ui_schema(text: str) -> Optional[UISchema]:
    """
    First valid UI Schema found in text, or None.

    A missing ``version`` defaults to the current schema version. Partial
    or malformed text simply yields None; this never raises.
    """
    if not text or "{" not in text:
        return None

    settings = get_settings()
    try:
        validate_json_size(text, settings.max_schema_size, "model output")
    except JSONParseError as e:
        logger.warning("schema_extract_too_large", error=str(e))
        return None

    for block in extract_json_blocks(text):
        try:
            obj = loads(block.content)
        except JSONParseError:
            continue
        if not looks_like_ui_schema(obj):
            continue

        if "version" not in obj:
            obj = {**obj, "version": settings.schema_version}

        match validate_ui_schema(obj):
            case Success(schema):
                return schema
            case Failure(issues):
                logger.debug(
                    "schema_extract_invalid",
                    start=block.start,
                    issues=len(issues),
                    first=issues[0].message if issues else None,
                )
    return None

"""Fast, type-safe JSON parsing and extraction from model output."""

import json
import re
from dataclasses import dataclass
from typing import Any, Literal

import msgspec
import orjson
from json_repair import repair_json

# Fenced code block: ```lang\n ... ```
_FENCE_PATTERN = re.compile(r"```([\w-]*)[ \t]*\r?\n?([\s\S]*?)```")

_CLOSERS = {"{": "}", "[": "]"}


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


@dataclass(frozen=True)
class JSONBlock:
    """A candidate JSON document found inside free text."""

    content: str
    format: Literal["json", "generic", "raw"]
    start: int
    end: int


def _find_balanced(text: str) -> list[JSONBlock]:
    """Scan for top-level balanced {...} / [...] spans, string-aware."""
    blocks: list[JSONBlock] = []
    i = 0
    length = len(text)

    while i < length:
        opener = text[i]
        if opener not in _CLOSERS:
            i += 1
            continue

        stack = [_CLOSERS[opener]]
        in_string = False
        escaped = False
        j = i + 1
        while j < length and stack:
            char = text[j]
            if in_string:
                if escaped:
                    escaped = False
                elif char == "\\":
                    escaped = True
                elif char == '"':
                    in_string = False
            elif char == '"':
                in_string = True
            elif char in _CLOSERS:
                stack.append(_CLOSERS[char])
            elif char in ("}", "]"):
                if char != stack[-1]:
                    break
                stack.pop()
            j += 1

        if not stack:
            content = text[i:j]
            if _looks_like_json(content):
                blocks.append(JSONBlock(content=content, format="raw", start=i, end=j))
                i = j
                continue
        i += 1

    return blocks


def _looks_like_json(candidate: str) -> bool:
    stripped = candidate.strip()
    if stripped.startswith("{"):
        return ":" in stripped
    return stripped.startswith("[") and stripped.endswith("]")


def extract_json_blocks(text: str) -> list[JSONBlock]:
    """
    Find candidate JSON documents in text, in positional order.

    Fenced ```json blocks and other fenced blocks whose body starts with
    ``{`` or ``[`` are preferred; balanced raw spans are only considered when
    the text holds no usable fenced block.

    Args:
        text: Free text, typically a (possibly partial) model response

    Returns:
        Candidate blocks; empty if none found
    """
    if not text:
        return []

    blocks: list[JSONBlock] = []
    for match in _FENCE_PATTERN.finditer(text):
        lang = match.group(1).lower()
        body = match.group(2).strip()
        if not body:
            continue
        if lang == "json":
            blocks.append(JSONBlock(content=body, format="json", start=match.start(), end=match.end()))
        elif body.startswith(("{", "[")):
            blocks.append(JSONBlock(content=body, format="generic", start=match.start(), end=match.end()))

    if not blocks:
        blocks = _find_balanced(text)

    return sorted(blocks, key=lambda block: block.start)


def loads(data: str, repair: bool = False) -> Any:
    """
    Decode one JSON document.

    Args:
        data: JSON text
        repair: Retry with json_repair when strict decoding fails

    Returns:
        Decoded value

    Raises:
        JSONParseError: If decoding (and repair, when enabled) fails
    """
    try:
        return msgspec.json.decode(data.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
    except RecursionError as e:
        # Nesting deeper than the interpreter stack; repair would recurse too
        raise JSONParseError("JSON nesting too deep to decode", e) from e

    try:
        return json.loads(repair_json(data))
    except (ValueError, TypeError, RecursionError) as repair_error:
        raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error


def extract_json(text: str, repair: bool = True) -> Any:
    """
    Extract and parse the first decodable JSON document in text.

    Args:
        text: Text containing JSON
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON value (object or array)

    Raises:
        JSONParseError: If no block decodes
    """
    blocks = extract_json_blocks(text.strip())
    if not blocks:
        raise JSONParseError("No JSON object found in text")

    errors: list[str] = []
    for block in blocks:
        try:
            return loads(block.content, repair=False)
        except JSONParseError as e:
            errors.append(f"block at {block.start}: {e}")

    if repair:
        return loads(blocks[0].content, repair=True)

    raise JSONParseError("Failed to parse any JSON block: " + "; ".join(errors))


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """
    Encode object to JSON string using the fastest library that accepts it.

    Args:
        obj: Object to encode
        indent: Pretty-print indentation; 0 for compact output

    Returns:
        JSON string
    """
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, orjson.JSONEncodeError):
            # Integers outside 64-bit range and similar edge cases
            pass

        try:
            return msgspec.json.encode(obj).decode("utf-8")
        except (TypeError, ValueError):
            pass

        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)

    return json.dumps(obj, indent=indent, ensure_ascii=False)


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate encoded JSON size.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 64, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent runaway recursion.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)

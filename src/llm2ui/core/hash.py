"""Non-cryptographic hashing for cache keys.

xxhash for speed, SHA-256 when a stable cross-language digest is wanted.
"""

import hashlib
from enum import Enum
from typing import Any

import xxhash

from .json import safe_json_dumps


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"
    SHA256 = "sha256"


def hash_bytes(data: bytes, algorithm: Algorithm = Algorithm.XXHASH64, truncate: int | None = None) -> str:
    """
    Hash bytes to a hex digest.

    Args:
        data: Bytes to hash
        algorithm: Hash algorithm
        truncate: Optional digest length (e.g. 16 for cache keys)

    Returns:
        Hex digest string
    """
    if algorithm == Algorithm.XXHASH64:
        digest = xxhash.xxh64(data).hexdigest()
    elif algorithm == Algorithm.SHA256:
        digest = hashlib.sha256(data).hexdigest()
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}")

    return digest[:truncate] if truncate else digest


def hash_string(text: str, algorithm: Algorithm = Algorithm.XXHASH64, truncate: int | None = None) -> str:
    """Hash a string (UTF-8) to a hex digest."""
    return hash_bytes(text.encode("utf-8"), algorithm, truncate)


def hash_fields(*fields: str, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """
    Hash several fields together, order-sensitive.

    Examples:
        >>> hash_fields("shadcn-ui", "en") != hash_fields("en", "shadcn-ui")
        True
    """
    return hash_string("\x00".join(fields), algorithm)


def hash_object(obj: Any, algorithm: Algorithm = Algorithm.XXHASH64) -> str:
    """Hash a JSON-compatible object by its canonical (sorted-key) encoding."""
    return hash_string(_canonical(obj), algorithm)


def _canonical(obj: Any) -> str:
    if isinstance(obj, dict):
        items = ",".join(f"{safe_json_dumps(str(k))}:{_canonical(v)}" for k, v in sorted(obj.items()))
        return "{" + items + "}"
    if isinstance(obj, (list, tuple)):
        return "[" + ",".join(_canonical(v) for v in obj) + "]"
    return safe_json_dumps(obj)


__all__ = ["Algorithm", "hash_bytes", "hash_string", "hash_fields", "hash_object"]

"""Tests for hashing helpers."""

import pytest
from hypothesis import given, strategies as st

from llm2ui.core.hash import Algorithm, hash_bytes, hash_fields, hash_object, hash_string


@pytest.mark.unit
@pytest.mark.parametrize("algorithm, length", [(Algorithm.XXHASH64, 16), (Algorithm.SHA256, 64)])
def test_digest_lengths(algorithm, length):
    digest = hash_string("llm2ui", algorithm)
    assert len(digest) == length
    assert hash_bytes(b"llm2ui", algorithm) == digest


@pytest.mark.unit
def test_truncate_is_prefix():
    full = hash_string("theme", Algorithm.SHA256)
    assert hash_string("theme", Algorithm.SHA256, truncate=12) == full[:12]


@pytest.mark.unit
def test_hash_fields_is_order_sensitive():
    assert hash_fields("shadcn-ui", "en") != hash_fields("en", "shadcn-ui")
    assert hash_fields("shadcn-ui", "en") == hash_fields("shadcn-ui", "en")


@pytest.mark.unit
def test_hash_fields_separator_prevents_joins():
    assert hash_fields("ab", "c") != hash_fields("a", "bc")


@pytest.mark.unit
def test_hash_object_ignores_key_order():
    a = {"theme": "shadcn-ui", "examples": {"mode": "auto", "max": 3}}
    b = {"examples": {"max": 3, "mode": "auto"}, "theme": "shadcn-ui"}
    assert hash_object(a) == hash_object(b)
    assert hash_object(a) != hash_object({**a, "theme": "other"})


@pytest.mark.unit
def test_unknown_algorithm():
    with pytest.raises(ValueError):
        hash_bytes(b"x", "md5")  # type: ignore[arg-type]


@pytest.mark.unit
@given(st.text(max_size=500))
def test_deterministic(text):
    assert hash_string(text) == hash_string(text)

"""Tests for binding interpolation and conditions."""

import math

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success

from llm2ui.binding import (
    PathSyntaxError,
    evaluate_condition,
    is_binding,
    is_truthy,
    resolve_binding,
    resolve_bindings,
    resolve_value,
    stringify_value,
    unwrap_binding,
)

DATA = {
    "user": {"name": "Ada", "age": 36, "admin": True, "tags": ["x", "y"], "meta": {}},
    "count": 0,
    "ratio": 2.0,
    "nothing": None,
}


@pytest.mark.unit
def test_interpolates_every_occurrence():
    assert resolve_bindings("{{user.name}} is {{user.age}}", DATA) == "Ada is 36"


@pytest.mark.unit
def test_unresolved_and_malformed_stay_literal():
    assert resolve_bindings("Hi {{user.nick}}!", DATA) == "Hi {{user.nick}}!"
    assert resolve_bindings("Hi {{user..name}}!", DATA) == "Hi {{user..name}}!"


@pytest.mark.unit
def test_whitespace_inside_braces():
    assert resolve_bindings("{{ user.name }}", DATA) == "Ada"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (2.0, "2"),
        (2.5, "2.5"),
        (7, "7"),
        ("s", "s"),
        (["x", 1], '["x",1]'),
        ({"a": None}, '{"a":null}'),
    ],
)
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


@pytest.mark.unit
def test_interpolation_stringifies():
    assert resolve_bindings("{{user.admin}} {{ratio}} {{user.tags}} [{{nothing}}]", DATA) == 'true 2 ["x","y"] []'


@pytest.mark.unit
def test_resolve_binding_keeps_type():
    assert resolve_binding("{{user.tags}}", DATA) == Success(["x", "y"])
    assert resolve_binding("user.age", DATA) == Success(36)
    assert isinstance(resolve_binding("{{user.nope}}", DATA), Failure)
    with pytest.raises(PathSyntaxError):
        resolve_binding("{{user.}}", DATA)


@pytest.mark.unit
def test_unwrap_and_is_binding():
    assert unwrap_binding(" {{ a.b }} ") == "a.b"
    assert unwrap_binding("a.b") == "a.b"
    assert is_binding("{{a}}")
    assert not is_binding("x {{a}}")
    assert not is_binding(3)


@pytest.mark.unit
def test_resolve_value_recurses_mappings_only():
    props = {
        "label": "Hi {{user.name}}",
        "nested": {"title": "{{user.age}}"},
        "items": ["{{user.name}}"],
        "count": 3,
    }
    assert resolve_value(props, DATA) == {
        "label": "Hi Ada",
        "nested": {"title": "36"},
        "items": ["{{user.name}}"],
        "count": 3,
    }


@pytest.mark.unit
@pytest.mark.parametrize(
    "condition, expected",
    [
        ("{{user.admin}}", True),
        ("user.admin", True),
        ("{{count}}", False),
        ("{{user.tags}}", True),
        ("{{user.meta}}", False),
        ("{{nothing}}", False),
        ("{{missing}}", False),
        ("{{user..admin}}", False),
    ],
)
def test_evaluate_condition(condition, expected):
    assert evaluate_condition(condition, DATA) is expected


@pytest.mark.unit
def test_nan_is_falsy():
    assert is_truthy(math.nan) is False
    assert is_truthy("0") is True


_plain_text = st.text(alphabet=st.characters(blacklist_characters="{}"), max_size=40)


@pytest.mark.unit
@given(_plain_text)
def test_text_without_bindings_is_unchanged(text):
    assert resolve_bindings(text, DATA) == text


@pytest.mark.unit
@given(st.lists(st.sampled_from(["{{user.name}}", "{{missing.path}}", " and ", "{{count}}"]), max_size=6))
def test_resolution_is_idempotent(parts):
    once = resolve_bindings("".join(parts), DATA)
    assert resolve_bindings(once, DATA) == once

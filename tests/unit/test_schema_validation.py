"""Tests for UI Schema models and structural validation."""

import pytest
from returns.result import Failure, Success

from llm2ui.schema import (
    IssueCode,
    SchemaValidationError,
    UISchema,
    check_structure,
    dump_schema,
    load_schema,
    parse_schema,
    validate_ui_schema,
)


def _codes(issues):
    return {(issue.path, issue.code) for issue in issues}


@pytest.mark.unit
def test_camel_case_wire_names():
    schema = UISchema.model_validate(
        {
            "root": {
                "id": "r",
                "type": "Container",
                "style": {"className": "p-4", "flexDirection": "column"},
                "loop": {"source": "rows", "itemName": "row", "indexName": "n"},
            }
        }
    )
    assert schema.version == "1.0"
    assert schema.root.style.class_name == "p-4"
    assert schema.root.loop.item_name == "row"

    wire = schema.to_wire()
    assert wire["root"]["style"] == {"className": "p-4", "flexDirection": "column"}
    assert wire["root"]["loop"] == {"source": "rows", "itemName": "row", "indexName": "n"}
    assert "children" not in wire["root"]


@pytest.mark.unit
def test_valid_schema(simple_schema):
    result = validate_ui_schema(simple_schema.to_wire())
    assert isinstance(result, Success)
    assert result.unwrap() == simple_schema


@pytest.mark.unit
def test_collects_every_issue():
    issues = check_structure(
        {
            "version": "",
            "root": {
                "id": "a",
                "type": "Container",
                "props": [],
                "children": [
                    {"id": "a", "type": ""},
                    {"type": "Text", "text": 5},
                    "nope",
                ],
            },
            "data": 3,
        }
    )
    assert _codes(issues) == {
        ("version", IssueCode.INVALID_VALUE),
        ("root.props", IssueCode.INVALID_TYPE),
        ("root.children[0].id", IssueCode.DUPLICATE_ID),
        ("root.children[0].type", IssueCode.INVALID_VALUE),
        ("root.children[1].id", IssueCode.MISSING_FIELD),
        ("root.children[1].text", IssueCode.INVALID_TYPE),
        ("root.children[2]", IssueCode.INVALID_TYPE),
        ("data", IssueCode.INVALID_TYPE),
    }


@pytest.mark.unit
def test_missing_root_and_non_object():
    assert _codes(check_structure({"version": "1.0"})) == {("root", IssueCode.MISSING_FIELD)}
    assert _codes(check_structure([])) == {("", IssueCode.INVALID_TYPE)}


@pytest.mark.unit
def test_expressions_are_checked():
    issues = check_structure(
        {
            "version": "1.0",
            "root": {
                "id": "r",
                "type": "Container",
                "condition": "{{a..b}}",
                "binding": "x[y]",
                "loop": {"source": "", "itemName": " "},
                "events": [{"event": "click"}, 4],
            },
        }
    )
    assert _codes(issues) == {
        ("root.condition", IssueCode.INVALID_EXPRESSION),
        ("root.binding", IssueCode.INVALID_EXPRESSION),
        ("root.loop.source", IssueCode.INVALID_VALUE),
        ("root.loop.itemName", IssueCode.INVALID_VALUE),
        ("root.events[0].action", IssueCode.MISSING_FIELD),
        ("root.events[1]", IssueCode.INVALID_TYPE),
    }


@pytest.mark.unit
def test_too_deep(settings):
    node = {"id": "leaf", "type": "Text"}
    for level in range(settings.max_schema_depth):
        node = {"id": f"n{level}", "type": "Container", "children": [node]}
    result = validate_ui_schema({"version": "1.0", "root": node})
    assert isinstance(result, Failure)
    assert result.failure()[0].code == IssueCode.TOO_DEEP


@pytest.mark.unit
def test_parse_schema_raises_with_issues():
    with pytest.raises(SchemaValidationError) as exc_info:
        parse_schema({"version": "1.0", "root": {"id": "r"}})
    assert exc_info.value.issues[0].path == "root.type"
    assert "root.type" in str(exc_info.value)


@pytest.mark.unit
def test_load_schema_errors():
    with pytest.raises(SchemaValidationError) as exc_info:
        load_schema("{not json")
    assert exc_info.value.issues[0].code == IssueCode.INVALID_JSON


@pytest.mark.unit
def test_load_schema_too_large(monkeypatch, settings):
    monkeypatch.setattr(settings, "max_schema_size", 10)
    with pytest.raises(SchemaValidationError) as exc_info:
        load_schema('{"version": "1.0", "root": {"id": "r", "type": "Text"}}')
    assert exc_info.value.issues[0].code == IssueCode.TOO_LARGE


@pytest.mark.unit
def test_dump_and_load(simple_schema):
    text = dump_schema(simple_schema)
    assert '"events"' in text
    assert load_schema(text) == simple_schema


@pytest.mark.unit
def test_load_schema_nested_past_stack():
    text = '{"version": "1.0", "root": {"id": "r", "type": "Text", "props": {"x": ' + "[" * 5000 + "]" * 5000 + "}}}"
    with pytest.raises(SchemaValidationError) as exc_info:
        load_schema(text)
    assert exc_info.value.issues[0].code == IssueCode.INVALID_JSON

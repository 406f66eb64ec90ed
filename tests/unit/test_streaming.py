"""Tests for schema extraction from model output."""

import pytest

from llm2ui.streaming import (
    SchemaStream,
    collect_schema,
    collect_schema_sync,
    extract_ui_schema,
    looks_like_ui_schema,
)

SCHEMA_JSON = '{"root": {"id": "hello", "type": "Text", "text": "Hi {{name}}"}, "data": {"name": "Ada"}}'
RESPONSE = f"Sure! Here is the UI:\n```json\n{SCHEMA_JSON}\n```\nLet me know if you need changes."


def _chunks(text, size=7):
    return [text[i : i + size] for i in range(0, len(text), size)]


async def _aiter(items):
    for item in items:
        yield item


@pytest.mark.unit
def test_looks_like_ui_schema():
    assert looks_like_ui_schema({"root": {"id": "a", "type": "Text"}})
    assert not looks_like_ui_schema({"root": {"id": "a"}})
    assert not looks_like_ui_schema([{"root": {}}])


@pytest.mark.unit
def test_extract_defaults_version():
    schema = extract_ui_schema(RESPONSE)
    assert schema.version == "1.0"
    assert schema.root.id == "hello"
    assert schema.data == {"name": "Ada"}


@pytest.mark.unit
def test_extract_skips_non_schema_blocks():
    text = '```json\n{"config": true}\n```\n```json\n{"version": "2.0", "root": {"id": "r", "type": "Card"}}\n```'
    schema = extract_ui_schema(text)
    assert schema.version == "2.0"
    assert schema.root.type == "Card"


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "",
        "no json at all",
        '```json\n{"root": {"id": "a", "type": "Text"\n```',
        '{"root": {"id": "a", "type": "Text", "children": [{"id": "a", "type": "Text"}]}}',
        '{"root": {"id": "", "type": "Text"}}',
    ],
)
def test_extract_returns_none(text):
    assert extract_ui_schema(text) is None


@pytest.mark.unit
def test_extract_raw_json():
    assert extract_ui_schema(f"Result: {SCHEMA_JSON} done").root.text == "Hi {{name}}"


@pytest.mark.unit
def test_stream_reports_each_new_schema_once():
    stream = SchemaStream()
    emitted = [schema for chunk in _chunks(RESPONSE) if (schema := stream.on_chunk(chunk)) is not None]
    assert len(emitted) == 1
    assert emitted[0].root.id == "hello"
    assert stream.on_chunk("", done=True) is None
    assert stream.accumulated_text == RESPONSE
    assert stream.chunks == len(_chunks(RESPONSE))


@pytest.mark.unit
def test_stream_without_partial_extraction():
    stream = SchemaStream(extract_partial=False)
    assert all(stream.on_chunk(chunk) is None for chunk in _chunks(RESPONSE))
    assert stream.last_extracted_schema is None
    assert stream.on_chunk("", done=True).root.id == "hello"


@pytest.mark.unit
def test_stream_reports_changed_schema():
    stream = SchemaStream()
    first = stream.on_chunk('{"root": {"id": "a", "type": "Text"}}')
    assert first.root.id == "a"
    stream.reset()
    assert stream.accumulated_text == ""
    assert stream.last_extracted_schema is None
    second = stream.on_chunk('{"root": {"id": "b", "type": "Text"}}', done=True)
    assert second.root.id == "b"


@pytest.mark.unit
def test_collect_schema_sync():
    seen = []
    schema = collect_schema_sync(_chunks(RESPONSE), on_schema=seen.append)
    assert schema.root.id == "hello"
    assert seen == [schema]


@pytest.mark.unit
def test_collect_schema_sync_nothing_found():
    assert collect_schema_sync(["just ", "text"]) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collect_schema_partial():
    seen = []
    schema = await collect_schema(_aiter(_chunks(RESPONSE)), on_schema=seen.append, extract_partial=True)
    assert schema.root.id == "hello"
    assert len(seen) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_collect_schema_at_end():
    schema = await collect_schema(_aiter(["```json\n", SCHEMA_JSON, "\n```"]))
    assert schema.data == {"name": "Ada"}


DEEP_PROPS = '{"root": {"id": "a", "type": "T", "props": {"x": ' + "[" * 5000 + "]" * 5000 + "}}}"
DEEP_FENCED = "```json\n" + '{"a":' * 3000 + "\n```"


@pytest.mark.unit
@pytest.mark.parametrize("text", [DEEP_PROPS, DEEP_FENCED])
def test_extract_deeply_nested_returns_none(text):
    assert extract_ui_schema(text) is None


@pytest.mark.unit
def test_stream_survives_deeply_nested_output():
    stream = SchemaStream()
    assert stream.on_chunk(DEEP_PROPS) is None
    assert stream.on_chunk("", done=True) is None
    assert stream.last_extracted_schema is None
    assert collect_schema_sync(_chunks(DEEP_FENCED, size=500)) is None

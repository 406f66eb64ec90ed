"""Incremental schema extraction over streamed model output."""

from collections.abc import AsyncIterator, Callable, Iterable
from dataclasses import dataclass, field
from typing import Optional

from ..core import get_logger
from ..schema import UISchema
from .extract import extract_ui_schema

logger = get_logger(__name__)

SchemaCallback = Callable[[UISchema], None]


@dataclass
class SchemaStream:
    """
    Accumulates text chunks and tracks the latest extracted schema.

    Cancellation belongs to the caller: stop feeding chunks and the stream
    simply keeps its last state.
    """

    extract_partial: bool = True
    accumulated_text: str = field(default="", init=False)
    last_extracted_schema: Optional[UISchema] = field(default=None, init=False)
    chunks: int = field(default=0, init=False)

    def on_chunk(self, text: str, done: bool = False) -> Optional[UISchema]:
        """
        Append a chunk and try extraction.

        Returns:
            The schema when it differs from the previous extraction, else None
        """
        if text:
            self.accumulated_text += text
            self.chunks += 1

        if not (done or self.extract_partial):
            return None

        schema = extract_ui_schema(self.accumulated_text)
        if schema is None or schema == self.last_extracted_schema:
            return None

        self.last_extracted_schema = schema
        logger.debug("schema_extracted", root=schema.root.id, chunks=self.chunks, done=done)
        return schema

    def reset(self) -> None:
        self.accumulated_text = ""
        self.last_extracted_schema = None
        self.chunks = 0


async def collect_schema(
    chunks: AsyncIterator[str],
    on_schema: Optional[SchemaCallback] = None,
    extract_partial: bool = False,
) -> Optional[UISchema]:
    """
    Drive a SchemaStream over an async chunk iterator.

    Args:
        chunks: Model output chunks
        on_schema: Called with every newly extracted schema
        extract_partial: Extract after every chunk instead of only at the end

    Returns:
        Final extracted schema, or None
    """
    stream = SchemaStream(extract_partial=extract_partial)
    async for chunk in chunks:
        if (schema := stream.on_chunk(chunk)) and on_schema:
            on_schema(schema)
    if (schema := stream.on_chunk("", done=True)) and on_schema:
        on_schema(schema)
    return stream.last_extracted_schema


def collect_schema_sync(
    chunks: Iterable[str],
    on_schema: Optional[SchemaCallback] = None,
    extract_partial: bool = False,
) -> Optional[UISchema]:
    """Synchronous variant of collect_schema."""
    stream = SchemaStream(extract_partial=extract_partial)
    for chunk in chunks:
        if (schema := stream.on_chunk(chunk)) and on_schema:
            on_schema(schema)
    if (schema := stream.on_chunk("", done=True)) and on_schema:
        on_schema(schema)
    return stream.last_extracted_schema

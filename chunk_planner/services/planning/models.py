"""Document and chunk records assembled after planning."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from chunk_planner.utils.ids import generate_document_id
from chunk_planner.utils.time import utc_now


class Chunk(BaseModel):
    """One contiguous span of a document, as returned by a chunker."""

    chunk_index: int = Field(..., ge=0, description="Position within the document")
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)


class Document(BaseModel):
    """A planned document. chunks stays empty until an external chunker runs."""

    id: str = Field(default_factory=generate_document_id)
    content: str
    source: str
    doc_type: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    chunks: list[Chunk] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)

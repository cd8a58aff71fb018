"""Request/response schemas for POST /plan."""

from typing import Any

from pydantic import BaseModel, Field

from chunk_planner.config.chunking.models import ChunkingConfig
from chunk_planner.services.analysis.models import DocumentCharacteristics


class PlanRequest(BaseModel):
    """POST /plan request body. Overrides come from a named profile and/or inline knobs."""

    content: str = Field(..., description="Raw document text")
    source: str = Field(default="", description="Where the document came from")
    doc_type: str = Field(default="text", description="Caller-defined document type")
    profile: str | None = Field(
        default=None,
        description="Override profile from static.json ('active' for the active one)",
    )
    chunking_config: dict[str, Any] | None = Field(
        default=None,
        description="Optional inline overrides, merged over the profile",
    )


class PlanResponse(BaseModel):
    """POST /plan response body."""

    document_id: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    characteristics: DocumentCharacteristics
    chunking_config: ChunkingConfig

"""Chunking configuration models. Read-only; no business logic."""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class ChunkingStrategy(str, Enum):
    """Algorithmic family a downstream chunker uses to split a document."""

    FIXED_SIZE = "fixed_size"
    STRUCTURAL = "structural"
    SENTENCE_WINDOW = "sentence_window"
    SEMANTIC = "semantic"
    PARENT_DOCUMENT = "parent_document"


class ChunkingConfig(BaseModel):
    """
    Chunking strategy and size knobs.

    Numeric knobs are optional: None means "unset, let the planner derive it",
    while any integer (0 included) is a deliberate caller value. Sizes and
    overlap are in characters.
    """

    strategy: ChunkingStrategy | None = Field(default=None)
    fixed_size: int | None = Field(default=None, ge=0, description="Target size for fixed windows")
    min_chunk_size: int | None = Field(default=None, ge=0)
    max_chunk_size: int | None = Field(default=None, ge=0)
    overlap: int | None = Field(default=None, ge=0, description="Characters shared by consecutive chunks")
    sentence_window_size: int | None = Field(default=None, ge=0, description="Sentences per window")
    preserve_paragraphs: bool = Field(default=False)
    extract_keywords: bool = Field(default=False)

    @model_validator(mode="after")
    def check_overlap(self) -> "ChunkingConfig":
        if self.fixed_size and self.overlap is not None and self.overlap >= self.fixed_size:
            raise ValueError(
                f"overlap ({self.overlap}) must be smaller than fixed_size ({self.fixed_size})"
            )
        return self

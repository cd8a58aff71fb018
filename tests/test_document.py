import pytest

from chunk_planner.config.chunking.models import ChunkingConfig, ChunkingStrategy
from chunk_planner.services import chunking
from chunk_planner.services.chunking.base import BaseChunker
from chunk_planner.services.planning.document import (
    analyze_and_plan,
    attach_chunks,
    plan_document,
    run_chunker,
)
from chunk_planner.services.planning.exceptions import DocumentValidationError
from chunk_planner.services.planning.models import Chunk


class WindowChunker(BaseChunker):
    """Fixed windows of config.fixed_size characters stepping by fixed_size - overlap."""

    def chunk(self, content: str, config: ChunkingConfig) -> list[Chunk]:
        step = config.fixed_size - config.overlap
        starts = range(0, len(content), step)
        return [Chunk(chunk_index=i, text=content[s : s + config.fixed_size]) for i, s in enumerate(starts)]

    @property
    def strategy_name(self) -> ChunkingStrategy:
        return ChunkingStrategy.FIXED_SIZE


@pytest.fixture
def empty_registry(monkeypatch: pytest.MonkeyPatch) -> dict:
    registry: dict = {}
    monkeypatch.setattr(chunking, "CHUNKER_REGISTRY", registry)
    return registry


def test_empty_content_is_rejected() -> None:
    with pytest.raises(DocumentValidationError) as exc_info:
        plan_document("", "upload", "text")
    assert exc_info.value.field == "content"
    assert isinstance(exc_info.value, ValueError)


def test_plain_document(plain_500: str) -> None:
    document, config = plan_document(plain_500, "upload", "text")
    assert config.strategy is ChunkingStrategy.FIXED_SIZE
    assert config.fixed_size == 500
    assert config.overlap == 0
    assert document.metadata == {
        "chunking_strategy": "fixed_size",
        "document_length": 500,
        "document_category": "very_small",
        "structure_type": "none",
        "chunk_count": 0,
    }
    assert document.content == plain_500
    assert document.source == "upload"
    assert document.doc_type == "text"
    assert document.chunks == []


def test_markdown_document(markdown_5000: str) -> None:
    result = analyze_and_plan(markdown_5000, "wiki", "markdown")
    assert result.characteristics.category.value == "medium"
    assert result.characteristics.structure_type.value == "hierarchical"
    assert result.config.strategy is ChunkingStrategy.PARENT_DOCUMENT
    assert result.document.metadata["chunking_strategy"] == "parent_document"


def test_markdown_headers_alone_are_sectioned(markdown_document) -> None:
    # one hierarchical pattern and no section keywords: sectioned, not hierarchical
    content = markdown_document(["Intro", "Method", "Results", "Notes"], 5000)
    result = analyze_and_plan(content, "wiki", "markdown")
    assert result.characteristics.category.value == "medium"
    assert result.characteristics.structure_type.value == "sectioned"
    assert result.config.strategy is ChunkingStrategy.STRUCTURAL


def test_user_config_flows_through(markdown_5000: str) -> None:
    user = ChunkingConfig(min_chunk_size=777)
    _, config = plan_document(markdown_5000, "wiki", "markdown", user)
    assert config.min_chunk_size == 777
    assert user.preserve_paragraphs is False


def test_document_ids_are_fresh(plain_500: str) -> None:
    first, _ = plan_document(plain_500, "upload", "text")
    second, _ = plan_document(plain_500, "upload", "text")
    assert first.id.startswith("doc_")
    assert first.id != second.id


def test_attach_chunks_updates_count(plain_500: str) -> None:
    document, _ = plan_document(plain_500, "upload", "text")
    chunks = [Chunk(chunk_index=0, text=plain_500[:250]), Chunk(chunk_index=1, text=plain_500[250:])]
    updated = attach_chunks(document, chunks)
    assert updated.metadata["chunk_count"] == 2
    assert updated.chunks == chunks
    assert updated.id == document.id
    assert document.metadata["chunk_count"] == 0
    assert document.chunks == []


def test_run_chunker_without_registration(empty_registry: dict, plain_500: str) -> None:
    document, config = plan_document(plain_500, "upload", "text")
    assert run_chunker(document, config) is document


def test_run_chunker_uses_registered_chunker(empty_registry: dict, plain_500: str) -> None:
    chunking.register_chunker(ChunkingStrategy.FIXED_SIZE)(WindowChunker)
    assert empty_registry == {ChunkingStrategy.FIXED_SIZE: WindowChunker}

    document, config = plan_document(plain_500, "upload", "text")
    chunked = run_chunker(document, config)
    assert chunked.metadata["chunk_count"] == 1
    assert chunked.chunks[0].text == plain_500


def test_register_chunker_rejects_mismatched_strategy(empty_registry: dict) -> None:
    with pytest.raises(ValueError, match="fixed_size"):
        chunking.register_chunker(ChunkingStrategy.SEMANTIC)(WindowChunker)
    assert empty_registry == {}


def test_get_chunker(empty_registry: dict) -> None:
    empty_registry[ChunkingStrategy.FIXED_SIZE] = WindowChunker
    assert isinstance(chunking.get_chunker("fixed_size"), WindowChunker)
    assert chunking.get_chunker(ChunkingStrategy.SEMANTIC) is None
    assert chunking.get_chunker("no_such_strategy") is None

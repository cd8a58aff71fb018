"""
Document assembly: analyze → plan → build the Document record.
Chunk population is left to an external chunker (see services/chunking/base.py).
"""

from typing import NamedTuple

from chunk_planner.config.chunking.models import ChunkingConfig
from chunk_planner.config.logging import get_logger
from chunk_planner.services.analysis.analyzer import classify
from chunk_planner.services.analysis.models import DocumentCharacteristics
from chunk_planner.services.chunking import get_chunker
from chunk_planner.services.planning.exceptions import DocumentValidationError
from chunk_planner.services.planning.models import Chunk, Document
from chunk_planner.services.planning.planner import plan

logger = get_logger(__name__)


def build_metadata(characteristics: DocumentCharacteristics, config: ChunkingConfig) -> dict[str, object]:
    """Planning metadata recorded on the document. chunk_count is 0 until chunks are attached."""
    return {
        "chunking_strategy": config.strategy.value if config.strategy else None,
        "document_length": characteristics.length,
        "document_category": characteristics.category.value,
        "structure_type": characteristics.structure_type.value,
        "chunk_count": 0,
    }


def assemble_document(
    content: str,
    source: str,
    doc_type: str,
    characteristics: DocumentCharacteristics,
    config: ChunkingConfig,
) -> Document:
    """Build a Document with a fresh id and planning metadata."""
    return Document(
        content=content,
        source=source,
        doc_type=doc_type,
        metadata=build_metadata(characteristics, config),
    )


class DocumentPlan(NamedTuple):
    document: Document
    config: ChunkingConfig
    characteristics: DocumentCharacteristics


def analyze_and_plan(
    content: str,
    source: str,
    doc_type: str,
    user_config: ChunkingConfig | None = None,
) -> DocumentPlan:
    """plan_document, also returning the characteristics the plan was derived from."""
    if not content:
        raise DocumentValidationError("Content cannot be empty", field="content")

    characteristics = classify(content)
    config = plan(characteristics, user_config)

    logger.info(
        "Document analysis complete",
        extra={
            "document_length": characteristics.length,
            "category": characteristics.category.value,
            "structure_type": characteristics.structure_type.value,
            "strategy": config.strategy.value,
        },
    )
    document = assemble_document(content, source, doc_type, characteristics, config)
    return DocumentPlan(document, config, characteristics)


def plan_document(
    content: str,
    source: str,
    doc_type: str,
    user_config: ChunkingConfig | None = None,
) -> tuple[Document, ChunkingConfig]:
    """
    Analyze content, resolve its chunking config, and assemble the Document.
    Raises DocumentValidationError for empty content; nothing is produced then.
    """
    result = analyze_and_plan(content, source, doc_type, user_config)
    return result.document, result.config


def attach_chunks(document: Document, chunks: list[Chunk]) -> Document:
    """Return a copy of the document carrying the chunker's output and the real chunk count."""
    metadata = {**document.metadata, "chunk_count": len(chunks)}
    return document.model_copy(update={"chunks": list(chunks), "metadata": metadata})


def run_chunker(document: Document, config: ChunkingConfig) -> Document:
    """
    Hand the planned document to the chunker registered for its strategy.
    Without a registered chunker the document is returned as planned (chunk_count 0).
    """
    chunker = get_chunker(config.strategy)
    if chunker is None:
        logger.debug("No chunker registered", extra={"strategy": config.strategy.value})
        return document
    chunks = chunker.chunk(document.content, config)
    return attach_chunks(document, chunks)

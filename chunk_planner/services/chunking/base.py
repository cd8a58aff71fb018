"""Contract for external chunkers that consume a resolved chunking plan."""

from abc import ABC, abstractmethod

from chunk_planner.config.chunking.models import ChunkingConfig, ChunkingStrategy
from chunk_planner.services.planning.models import Chunk


class BaseChunker(ABC):
    """
    Abstract chunker for one strategy. Implementations must treat the config's
    size bounds and overlap as hard targets, not hints, and return chunks in
    document order with consecutive chunk_index values starting at 0.
    """

    @abstractmethod
    def chunk(self, content: str, config: ChunkingConfig) -> list[Chunk]:
        """Split content according to a resolved config."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> ChunkingStrategy:
        """Strategy this chunker implements."""
        ...

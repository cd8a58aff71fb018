"""Registry of external chunker implementations, keyed by strategy."""

from typing import Callable

from chunk_planner.config.chunking.models import ChunkingStrategy
from chunk_planner.services.chunking.base import BaseChunker

CHUNKER_REGISTRY: dict[ChunkingStrategy, type[BaseChunker]] = {}


def register_chunker(strategy: ChunkingStrategy) -> Callable[[type[BaseChunker]], type[BaseChunker]]:
    """
    Class decorator: register a chunker under the strategy it implements.

    Raises ValueError when the class reports a different strategy_name.
    """

    def decorator(cls: type[BaseChunker]) -> type[BaseChunker]:
        implemented = cls().strategy_name
        if implemented != strategy:
            raise ValueError(
                f"{cls.__name__} implements {ChunkingStrategy(implemented).value}, "
                f"cannot register it under {ChunkingStrategy(strategy).value}"
            )
        CHUNKER_REGISTRY[strategy] = cls
        return cls

    return decorator


def get_chunker(strategy: ChunkingStrategy | str) -> BaseChunker | None:
    """Return an instance of the chunker registered for the strategy, or None."""
    try:
        key = ChunkingStrategy(strategy)
    except ValueError:
        return None
    cls = CHUNKER_REGISTRY.get(key)
    if cls is None:
        return None
    return cls()

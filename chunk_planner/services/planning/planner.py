"""
Adaptive chunking planner: turns DocumentCharacteristics plus optional caller
overrides into a fully resolved ChunkingConfig.

Three passes over a working copy of the caller's config:
  1. category dispatch: an ordered rule table, first match wins, picks the
     strategy and size bounds;
  2. defaulting: fills every knob still unset from document length;
  3. paragraph preservation and keyword extraction are switched on.
Caller-set knobs (anything not None) survive both passes untouched.
"""

import math
from typing import Any, Callable

from chunk_planner.config.chunking.models import ChunkingConfig, ChunkingStrategy
from chunk_planner.config.logging import get_logger
from chunk_planner.services.analysis.models import DocumentCategory, DocumentCharacteristics, StructureType

logger = get_logger(__name__)

MIN_MEANINGFUL_CHUNK_SIZE = 200
MAX_CHUNK_SIZE = 1500
PREFERRED_CHUNK_SIZE = 800
OVERLAP_RATIO = 0.15
SMALL_DOC_OVERLAP_RATIO = 0.10

SINGLE_CHUNK_LIMIT = 600
VERY_SMALL_MIN_FLOOR = 250
SMALL_TARGET_FLOOR = 400
SMALL_MAX_HEADROOM = 300
SMALL_SENTENCE_WINDOW = 4
LARGE_MIN_CHUNK_SIZE = 400
LARGE_MAX_CHUNK_SIZE = 1200

Knobs = dict[str, Any]


def optimal_chunk_count(length: int) -> int:
    """Ideal number of chunks for a document of the given length. Targeting hint only."""
    if length < 600:
        return 1
    if length < 1200:
        return 2
    if length < 2000:
        return 3
    if length < 4000:
        return 4
    if length < 8000:
        return math.ceil(length / 1500)
    return math.ceil(length / 1000)


def _fill(knobs: Knobs, **values: int) -> None:
    """Set each knob only if the caller left it unset."""
    for key, value in values.items():
        if knobs.get(key) is None:
            knobs[key] = value


# --- Category dispatch -------------------------------------------------------


def _single_chunk(ch: DocumentCharacteristics, knobs: Knobs, optimal: int) -> None:
    knobs["strategy"] = ChunkingStrategy.FIXED_SIZE
    _fill(knobs, fixed_size=ch.length, overlap=0, min_chunk_size=ch.length)


def _few_chunks(ch: DocumentCharacteristics, knobs: Knobs, optimal: int) -> None:
    # min = length/3 and max = length/2 keep the result at two or three chunks
    knobs["strategy"] = ChunkingStrategy.STRUCTURAL
    _fill(
        knobs,
        min_chunk_size=max(ch.length // 3, VERY_SMALL_MIN_FLOOR),
        max_chunk_size=ch.length // 2,
    )


def _small(ch: DocumentCharacteristics, knobs: Knobs, optimal: int) -> None:
    target = max(ch.length // optimal, SMALL_TARGET_FLOOR)
    if ch.has_structure:
        knobs["strategy"] = ChunkingStrategy.STRUCTURAL
        _fill(knobs, min_chunk_size=target, max_chunk_size=target + SMALL_MAX_HEADROOM)
    else:
        knobs["strategy"] = ChunkingStrategy.SENTENCE_WINDOW
        _fill(knobs, sentence_window_size=SMALL_SENTENCE_WINDOW, min_chunk_size=target)


def _medium(ch: DocumentCharacteristics, knobs: Knobs, optimal: int) -> None:
    if ch.structure_type is StructureType.HIERARCHICAL:
        knobs["strategy"] = ChunkingStrategy.PARENT_DOCUMENT
    elif ch.has_structure:
        knobs["strategy"] = ChunkingStrategy.STRUCTURAL
    else:
        knobs["strategy"] = ChunkingStrategy.SEMANTIC


def _large(ch: DocumentCharacteristics, knobs: Knobs, optimal: int) -> None:
    knobs["strategy"] = ChunkingStrategy.PARENT_DOCUMENT
    _fill(knobs, max_chunk_size=LARGE_MAX_CHUNK_SIZE, min_chunk_size=LARGE_MIN_CHUNK_SIZE)


Predicate = Callable[[DocumentCharacteristics], bool]
Rule = Callable[[DocumentCharacteristics, Knobs, int], None]

DISPATCH_TABLE: tuple[tuple[str, Predicate, Rule], ...] = (
    (
        "single_chunk",
        lambda ch: ch.category is DocumentCategory.VERY_SMALL and ch.length < SINGLE_CHUNK_LIMIT,
        _single_chunk,
    ),
    ("few_chunks", lambda ch: ch.category is DocumentCategory.VERY_SMALL, _few_chunks),
    ("small", lambda ch: ch.category is DocumentCategory.SMALL, _small),
    ("medium", lambda ch: ch.category is DocumentCategory.MEDIUM, _medium),
    (
        "large",
        lambda ch: ch.category in (DocumentCategory.LARGE, DocumentCategory.VERY_LARGE),
        _large,
    ),
)


def select_rule(characteristics: DocumentCharacteristics) -> tuple[str, Rule]:
    """Return the first dispatch rule whose predicate matches."""
    for name, predicate, rule in DISPATCH_TABLE:
        if predicate(characteristics):
            return name, rule
    # Categories are exhaustive; reaching here means a new category lacks a rule
    raise LookupError(f"No dispatch rule for category {characteristics.category.value!r}")


# --- Defaulting ----------------------------------------------------------------


def _apply_defaults(length: int, knobs: Knobs, optimal: int) -> None:
    if knobs.get("min_chunk_size") is None:
        if length < 2000:
            knobs["min_chunk_size"] = max(length // 4, MIN_MEANINGFUL_CHUNK_SIZE)
        else:
            knobs["min_chunk_size"] = MIN_MEANINGFUL_CHUNK_SIZE

    if knobs.get("max_chunk_size") is None:
        knobs["max_chunk_size"] = length // 2 if length < 3000 else MAX_CHUNK_SIZE

    if knobs.get("fixed_size") is None:
        knobs["fixed_size"] = length // optimal if length < 2000 else PREFERRED_CHUNK_SIZE

    if knobs.get("overlap") is None:
        ratio = SMALL_DOC_OVERLAP_RATIO if length < 1500 else OVERLAP_RATIO
        knobs["overlap"] = int(knobs["fixed_size"] * ratio)

    if knobs.get("sentence_window_size") is None:
        knobs["sentence_window_size"] = 0


def _clamp_overlap(knobs: Knobs) -> None:
    fixed_size = knobs["fixed_size"]
    if fixed_size > 0 and knobs["overlap"] >= fixed_size:
        logger.warning(
            "Overlap does not fit the resolved fixed size; clamping",
            extra={"overlap": knobs["overlap"], "fixed_size": fixed_size},
        )
        knobs["overlap"] = fixed_size - 1


def plan(
    characteristics: DocumentCharacteristics,
    user_config: ChunkingConfig | None = None,
) -> ChunkingConfig:
    """
    Resolve a chunking configuration for a document. The caller's config is
    never mutated; a new, fully populated ChunkingConfig is returned.
    """
    knobs: Knobs = user_config.model_dump() if user_config is not None else {}
    length = characteristics.length
    optimal = optimal_chunk_count(length)
    logger.info(
        "Planning chunking",
        extra={"document_length": length, "optimal_chunk_count": optimal},
    )

    rule_name, rule = select_rule(characteristics)
    rule(characteristics, knobs, optimal)

    _apply_defaults(length, knobs, optimal)
    _clamp_overlap(knobs)

    knobs["preserve_paragraphs"] = True
    knobs["extract_keywords"] = True

    resolved = ChunkingConfig.model_validate(knobs)
    logger.info(
        "Chunking plan resolved",
        extra={
            "rule": rule_name,
            "strategy": resolved.strategy.value,
            "min_chunk_size": resolved.min_chunk_size,
            "max_chunk_size": resolved.max_chunk_size,
            "fixed_size": resolved.fixed_size,
            "overlap": resolved.overlap,
        },
    )
    return resolved

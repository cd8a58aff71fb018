"""Structural signal patterns, compiled once at import and shared read-only."""

import re

from chunk_planner.config.logging import get_logger

logger = get_logger(__name__)

# Distinct-pattern signals: each counts at most once per document
HIERARCHICAL_PATTERNS: tuple[str, ...] = (
    r"^#+\s+",  # markdown headers
    r"^[A-Z][A-Z\s]+:?$",  # ALL CAPS headings
    r"^\d+\.\s+[A-Z]",  # numbered sections
    r"^[IVX]+\.\s+",  # roman numerals
)

# Accumulating signals: every match counts
SECTION_PATTERNS: tuple[tuple[str, int], ...] = (
    (
        r"\b(experience|education|skills|summary|objective|projects|achievements"
        r"|awards|certifications|languages|references|contact|about)\b",
        re.IGNORECASE,
    ),
    (r"^[A-Z][A-Z\s]{3,}:?\s*$", re.MULTILINE),
    (r"^.{1,50}:$", re.MULTILINE),
)

PARAGRAPH_BREAK = "\n\n"


def _compile(pattern: str, flags: int) -> re.Pattern[str] | None:
    # \b \d \s \w follow ASCII rules, so non-ASCII letters and digits are never word or digit characters
    try:
        return re.compile(pattern, flags | re.ASCII)
    except re.error as e:
        logger.warning("Skipping invalid structure pattern", extra={"pattern": pattern, "error": str(e)})
        return None


def _compile_all(specs: list[tuple[str, int]]) -> tuple[re.Pattern[str], ...]:
    compiled = (_compile(p, f) for p, f in specs)
    return tuple(c for c in compiled if c is not None)


HIERARCHICAL_SIGNALS = _compile_all([(p, re.MULTILINE) for p in HIERARCHICAL_PATTERNS])
SECTION_SIGNALS = _compile_all(list(SECTION_PATTERNS))


def count_distinct_matches(patterns: tuple[re.Pattern[str], ...], content: str) -> int:
    """Number of patterns that match at least once anywhere in content."""
    total = 0
    for pattern in patterns:
        try:
            if pattern.search(content):
                total += 1
        except (re.error, RecursionError) as e:
            logger.warning("Structure pattern failed; counting as no match", extra={"pattern": pattern.pattern, "error": str(e)})
    return total


def count_all_matches(patterns: tuple[re.Pattern[str], ...], content: str) -> int:
    """Total number of non-overlapping matches across all patterns."""
    total = 0
    for pattern in patterns:
        try:
            total += sum(1 for _ in pattern.finditer(content))
        except (re.error, RecursionError) as e:
            logger.warning("Structure pattern failed; counting as no match", extra={"pattern": pattern.pattern, "error": str(e)})
    return total

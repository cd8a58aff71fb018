"""
Document analyzer: derives size category, structure and complexity from raw text.
Pure functions of the content; never raises for any string input.
"""

from chunk_planner.services.analysis.models import (
    DEFAULT_LANGUAGE,
    DocumentCategory,
    DocumentCharacteristics,
    StructureType,
)
from chunk_planner.services.analysis.signals import (
    HIERARCHICAL_SIGNALS,
    PARAGRAPH_BREAK,
    SECTION_SIGNALS,
    count_all_matches,
    count_distinct_matches,
)

# Upper bounds (exclusive) by character length; anything larger is very_large
CATEGORY_BREAKPOINTS: tuple[tuple[int, DocumentCategory], ...] = (
    (1000, DocumentCategory.VERY_SMALL),
    (3000, DocumentCategory.SMALL),
    (10000, DocumentCategory.MEDIUM),
    (50000, DocumentCategory.LARGE),
)

WORDS_PER_SENTENCE_SATURATION = 15.0


def categorize(length: int) -> DocumentCategory:
    """Map a character count to its size category."""
    for upper, category in CATEGORY_BREAKPOINTS:
        if length < upper:
            return category
    return DocumentCategory.VERY_LARGE


def analyze_structure(content: str) -> tuple[StructureType, bool]:
    """
    Classify document structure from heading and section signals.
    Returns (structure_type, has_structure); first matching rule wins.
    """
    hierarchical = count_distinct_matches(HIERARCHICAL_SIGNALS, content)
    sections = count_all_matches(SECTION_SIGNALS, content)

    if hierarchical >= 3 or sections >= 5:
        return StructureType.HIERARCHICAL, True
    if hierarchical >= 1 or sections >= 2:
        return StructureType.SECTIONED, True
    if content.count(PARAGRAPH_BREAK) >= 3:
        return StructureType.SIMPLE, True
    return StructureType.NONE, False


def calculate_complexity(content: str) -> float:
    """
    Sentence-density score in [0, 1]: average words per period-delimited
    sentence over 15. No abbreviation handling.
    """
    words = content.split()
    if not words:
        return 0.0
    # str.split always yields at least one piece
    sentences = content.split(".")
    avg_words = len(words) / len(sentences)
    return min(avg_words / WORDS_PER_SENTENCE_SATURATION, 1.0)


def classify(content: str) -> DocumentCharacteristics:
    """Analyze raw text. Empty content yields very_small, no structure, complexity 0.0."""
    length = len(content)
    structure_type, has_structure = analyze_structure(content)
    return DocumentCharacteristics(
        length=length,
        category=categorize(length),
        has_structure=has_structure,
        structure_type=structure_type,
        language=DEFAULT_LANGUAGE,
        complexity=calculate_complexity(content),
    )

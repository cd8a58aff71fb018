from typing import Callable

import pytest

FILLER = "lorem ipsum dolor sit amet consectetur adipiscing elit. "


def _markdown_document(headers: list[str], length: int) -> str:
    """Markdown sections of lowercase filler prose, cut to exactly `length` characters."""
    body = FILLER * 25
    doc = "\n\n".join(f"# {header}\n{body}" for header in headers)
    assert len(doc) >= length
    return doc[:length]


@pytest.fixture
def markdown_document() -> Callable[[list[str], int], str]:
    return _markdown_document


@pytest.fixture
def plain_500() -> str:
    """500 characters, no headers, no blank-line pairs."""
    return "word " * 100


@pytest.fixture
def markdown_5000(markdown_document: Callable[[list[str], int], str]) -> str:
    """5000 characters with four markdown headers that also carry section keywords."""
    return markdown_document(
        ["Project Summary", "Work Experience", "Education", "Skills and Awards"],
        5000,
    )

"""
Conjunctive Term Matching and Scoring

Scans every document for every query term and keeps only documents in which
all terms occur. Occurrences in the primary field (page title, image alt
text) weigh ten times more than occurrences in the secondary field (page
content, owning page title).

Terms are counted as literal, case-insensitive substrings; characters such
as "." or "*" in a query have no pattern meaning.
"""

from typing import Callable, Iterable

from openlens.search.models import (
    DocumentT,
    ImageDocument,
    ScoredResult,
    TextDocument,
)
from openlens.search.snippet import highlight_snippet

PRIMARY_WEIGHT = 10
SECONDARY_WEIGHT = 1


def count_occurrences(haystack: str, term: str) -> int:
    """Count non-overlapping occurrences of a lowercase term in lowercase text."""
    return haystack.count(term)


def score_fields(primary: str, secondary: str, terms: list[str]) -> int | None:
    """
    Score one document's fields against the query terms.

    Returns:
        The summed score, or None if any term (counted per occurrence in the
        query) is missing from both fields.
    """
    primary_lower = (primary or "").lower()
    secondary_lower = (secondary or "").lower()

    score = 0
    matched_terms = 0
    for term in terms:
        primary_matches = count_occurrences(primary_lower, term)
        secondary_matches = count_occurrences(secondary_lower, term)

        if primary_matches + secondary_matches > 0:
            matched_terms += 1
            score += (
                primary_matches * PRIMARY_WEIGHT + secondary_matches * SECONDARY_WEIGHT
            )

    if matched_terms != len(terms) or score <= 0:
        return None
    return score


def _match(
    documents: Iterable[DocumentT],
    terms: list[str],
    fields: Callable[[DocumentT], tuple[str, str]],
    snippet: Callable[[DocumentT], str] | None = None,
) -> list[ScoredResult[DocumentT]]:
    results = []
    for doc in documents:
        primary, secondary = fields(doc)
        score = score_fields(primary, secondary, terms)
        if score is None:
            continue
        results.append(
            ScoredResult(
                document=doc,
                score=score,
                snippet=snippet(doc) if snippet else None,
            )
        )
    return results


def match_pages(
    pages: Iterable[TextDocument],
    terms: list[str],
    escape: bool = True,
) -> list[ScoredResult[TextDocument]]:
    """
    Match and score pages on title and content, in corpus order.

    Every retained page carries a highlighted snippet of its content.
    """
    return _match(
        pages,
        terms,
        fields=lambda page: (page.title, page.content),
        snippet=lambda page: highlight_snippet(page.content, terms, escape=escape),
    )


def match_images(
    images: Iterable[ImageDocument],
    terms: list[str],
) -> list[ScoredResult[ImageDocument]]:
    """Match and score images on alt text and owning page title, in corpus order."""
    return _match(
        images,
        terms,
        fields=lambda image: (image.alt, image.page_title),
    )

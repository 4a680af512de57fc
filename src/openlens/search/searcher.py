"""
In-Memory Search Engine

Ranks an exported corpus against a free-text query.
Supports two search modes over the same conjunctive scoring algorithm:
- Text (default): pages scored on title and content, with snippets
- Image: images scored on alt text and owning page title
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum

from openlens.search.errors import InvalidSearchModeError
from openlens.search.matching import match_images, match_pages
from openlens.search.models import Corpus, ScoredResult
from openlens.search.query import normalize_query
from openlens.search.ranking import rank_results

logger = logging.getLogger(__name__)


class SearchMode(str, Enum):
    """Which document collection a query runs against"""

    TEXT = "text"
    IMAGE = "image"

    @classmethod
    def parse(cls, value: "str | SearchMode | None") -> "SearchMode":
        if value is None:
            return cls.TEXT
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError:
            raise InvalidSearchModeError(value)


@dataclass
class SearchResult:
    """Search results with metadata."""

    query: str
    mode: SearchMode
    total: int  # Matches before any limit is applied
    hits: list[ScoredResult]

    @property
    def count(self) -> int:
        return len(self.hits)


class SearchEngine:
    """
    Search engine over a read-only, in-memory corpus.

    The corpus is re-scanned on every query; no index is built. The engine
    keeps no per-query state, so one instance can serve concurrent callers.
    """

    def __init__(self, corpus: Corpus, escape_snippets: bool = True):
        """
        Initialize search engine.

        Args:
            corpus: Pages and images to search
            escape_snippets: HTML-escape snippet text around the <b> markers
        """
        self.corpus = corpus
        self.escape_snippets = escape_snippets

    def search(
        self,
        query: str | None,
        mode: "str | SearchMode | None" = SearchMode.TEXT,
        limit: int | None = None,
    ) -> SearchResult:
        """
        Search documents using AND logic.

        Args:
            query: Search query string
            mode: "text" for pages, "image" for images
            limit: Maximum number of hits to return (None for all)

        Returns:
            SearchResult with matching documents, best first

        Raises:
            EmptyQueryError: If the query is empty or whitespace-only
            InvalidSearchModeError: If the mode is not supported
        """
        search_mode = SearchMode.parse(mode)
        query = (query or "").strip()
        terms = normalize_query(query)

        started_at = time.perf_counter()
        if search_mode is SearchMode.IMAGE:
            scored = match_images(self.corpus.images, terms)
        else:
            scored = match_pages(self.corpus.pages, terms, escape=self.escape_snippets)
        ranked = rank_results(scored)

        total = len(ranked)
        hits = ranked if limit is None else ranked[: max(limit, 0)]

        logger.debug(
            "Search %r (mode=%s, terms=%d): %d matches in %.2fms",
            query,
            search_mode.value,
            len(terms),
            total,
            (time.perf_counter() - started_at) * 1000,
        )

        return SearchResult(query=query, mode=search_mode, total=total, hits=hits)

    def stats(self) -> dict[str, int]:
        """Return corpus stats: indexed pages and images."""
        return {
            "pages": len(self.corpus.pages),
            "images": len(self.corpus.images),
        }

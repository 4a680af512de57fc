"""In-memory relevance matching, scoring and snippet engine."""

from openlens.search.errors import EmptyQueryError, InvalidSearchModeError, SearchError
from openlens.search.matching import match_images, match_pages
from openlens.search.models import (
    Corpus,
    ImageDocument,
    ScoredResult,
    TextDocument,
)
from openlens.search.query import normalize_query
from openlens.search.ranking import rank_results
from openlens.search.searcher import SearchEngine, SearchMode, SearchResult
from openlens.search.snippet import Snippet, generate_snippet, highlight_snippet

__all__ = [
    "SearchEngine",
    "SearchMode",
    "SearchResult",
    "ScoredResult",
    "TextDocument",
    "ImageDocument",
    "Corpus",
    "SearchError",
    "EmptyQueryError",
    "InvalidSearchModeError",
    "normalize_query",
    "match_pages",
    "match_images",
    "rank_results",
    "generate_snippet",
    "highlight_snippet",
    "Snippet",
]

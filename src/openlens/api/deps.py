"""
API Dependencies

Dependency injection for FastAPI routes.
"""

import logging

from openlens.core.config import settings
from openlens.corpus import CorpusUnavailableError, load_corpus
from openlens.search import SearchEngine

logger = logging.getLogger(__name__)

# Lazy-initialized instance, published once and then only read
_engine: SearchEngine | None = None


def load_search_engine(corpus_path: str | None = None) -> SearchEngine:
    """
    Load the corpus bundle and publish a search engine over it.

    Raises:
        CorpusUnavailableError: If the bundle is missing or invalid.
    """
    global _engine
    corpus = load_corpus(corpus_path or settings.CORPUS_PATH)
    _engine = SearchEngine(corpus, escape_snippets=settings.SNIPPET_ESCAPE_HTML)
    return _engine


def reset_search_engine() -> None:
    """Forget the published engine so the next request reloads the corpus."""
    global _engine
    _engine = None


def get_search_engine() -> SearchEngine:
    """
    Get the published search engine, loading the corpus on first use.

    Raises:
        CorpusUnavailableError: If no corpus could be loaded.
    """
    if _engine is None:
        try:
            return load_search_engine()
        except CorpusUnavailableError as e:
            logger.warning("Search data unavailable: %s", e)
            raise
    return _engine

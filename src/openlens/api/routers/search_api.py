"""Search API Router - JSON endpoints for search and corpus stats."""

import logging
import time

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from openlens.api.deps import get_search_engine
from openlens.api.metrics import record_search
from openlens.api.middleware.rate_limiter import limiter
from openlens.api.models import ImageHit, PageHit, SearchResponse, StatsResponse
from openlens.core.config import settings
from openlens.search import SearchEngine, SearchMode

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_pos_int(value: str | None, default: int, *, min_v: int = 1) -> int:
    try:
        x = int(value) if value is not None else default
    except ValueError:
        x = default
    return max(x, min_v)


@router.get("/search")
@limiter.limit(settings.SEARCH_RATE_LIMIT)
async def api_search(
    request: Request,
    q: str | None = None,
    mode: str | None = None,
    limit: str | None = None,
    engine: SearchEngine = Depends(get_search_engine),
):
    """
    Search API (JSON).

    Every whitespace-separated term must occur in a result. Pages are
    scored on title (x10) and content; images on alt text (x10) and the
    owning page title.
    """
    query = (q or "").strip()
    if len(query) > settings.MAX_QUERY_LEN:
        query = query[: settings.MAX_QUERY_LEN]

    max_results = min(_parse_pos_int(limit, settings.RESULTS_LIMIT), settings.MAX_RESULTS)

    # EmptyQueryError / InvalidSearchModeError are mapped to 400 by the app
    started_at = time.perf_counter()
    result = engine.search(query, mode=mode, limit=max_results)
    record_search(result.mode.value, time.perf_counter() - started_at, result.total)

    if result.mode is SearchMode.IMAGE:
        hits = [ImageHit.from_result(r) for r in result.hits]
    else:
        hits = [PageHit.from_result(r) for r in result.hits]

    response = SearchResponse(
        query=result.query,
        mode=result.mode.value,
        count=result.count,
        total=result.total,
        results=hits,
    )
    return JSONResponse(response.model_dump(by_alias=True))


@router.get("/stats")
async def api_stats(engine: SearchEngine = Depends(get_search_engine)):
    """Return corpus stats (indexed pages and images)."""
    stats = engine.stats()
    return StatsResponse(
        pages=stats["pages"],
        images=stats["images"],
        corpus=settings.CORPUS_PATH,
    ).model_dump()

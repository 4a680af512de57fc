"""Result ranking by descending score."""

from typing import Iterable

from openlens.search.models import ScoredResult


def rank_results(results: Iterable[ScoredResult]) -> list[ScoredResult]:
    """
    Sort results by descending score into a new list.

    sorted() is stable, and stays stable with reverse=True, so results with
    equal scores keep their input (corpus) order. No secondary key is used.
    """
    return sorted(results, key=lambda r: r.score, reverse=True)

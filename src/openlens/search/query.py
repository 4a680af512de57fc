"""Query normalization: raw query text into ordered lowercase terms."""

import re

from openlens.search.errors import EmptyQueryError

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_query(text: str | None) -> list[str]:
    """
    Lower-case the query and split it on runs of whitespace.

    Terms are not deduplicated: a term that appears twice is required,
    and scored, twice. Leading or trailing whitespace yields an empty-string
    term, which is kept as a literal term like any other.

    Raises:
        EmptyQueryError: If the query is empty or whitespace-only.
    """
    if not text or not text.strip():
        raise EmptyQueryError()
    return _WHITESPACE_RE.split(text.lower())

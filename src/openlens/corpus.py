"""
Corpus Loading

Reads the bundle written by the exporter, either as the JavaScript file
served to browsers:

    window.searchData = [{"id": 1, "url": ..., "title": ..., "content": ..., "scrapedAt": ...}];
    window.imageData = [{"src": ..., "alt": ..., "pageTitle": ..., "pageUrl": ...}];

or as a plain JSON object with ``searchData`` and ``imageData`` keys.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from openlens.search.models import Corpus, ImageDocument, TextDocument

logger = logging.getLogger(__name__)

PAGES_KEY = "searchData"
IMAGES_KEY = "imageData"

_ASSIGNMENT_RE = re.compile(r"window\.(\w+)\s*=\s*")


class CorpusUnavailableError(RuntimeError):
    """Raised when the corpus bundle is missing or cannot be parsed."""


def _text(entry: dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _page_from_entry(entry: dict[str, Any]) -> TextDocument:
    page_id = entry.get("id")
    return TextDocument(
        title=_text(entry, "title"),
        content=_text(entry, "content"),
        url=_text(entry, "url"),
        id=page_id if isinstance(page_id, int) else None,
        scraped_at=entry.get("scrapedAt") or None,
    )


def _image_from_entry(entry: dict[str, Any]) -> ImageDocument:
    return ImageDocument(
        alt=_text(entry, "alt"),
        page_title=_text(entry, "pageTitle"),
        page_url=_text(entry, "pageUrl"),
        src=_text(entry, "src"),
    )


def _entries(raw: Any, key: str) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise CorpusUnavailableError(f"'{key}' must be a list, got {type(raw).__name__}")

    entries = []
    for position, entry in enumerate(raw):
        if not isinstance(entry, dict):
            logger.warning("Skipping malformed %s entry at position %d", key, position)
            continue
        entries.append(entry)
    return entries


def _parse_assignments(text: str) -> dict[str, Any]:
    """Decode every ``window.<name> = <json>;`` statement in a JS bundle."""
    decoder = json.JSONDecoder()
    values: dict[str, Any] = {}
    pos = 0
    while True:
        match = _ASSIGNMENT_RE.search(text, pos)
        if match is None:
            break
        try:
            value, pos = decoder.raw_decode(text, match.end())
        except json.JSONDecodeError as e:
            raise CorpusUnavailableError(
                f"Invalid JSON assigned to window.{match.group(1)}: {e}"
            ) from e
        # Scanning resumes after the value, so text inside strings is never read as code
        values[match.group(1)] = value
    return values


def parse_corpus(text: str) -> Corpus:
    """
    Parse an exporter bundle into a Corpus.

    Missing or null string fields become empty strings. Entries that are not
    objects are skipped. A bundle without image data yields no images.

    Raises:
        CorpusUnavailableError: If the bundle has no page data or is not valid.
    """
    stripped = text.lstrip()
    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise CorpusUnavailableError(f"Invalid corpus JSON: {e}") from e
    else:
        data = _parse_assignments(text)

    if PAGES_KEY not in data:
        raise CorpusUnavailableError(f"Corpus bundle has no '{PAGES_KEY}'")

    pages = tuple(_page_from_entry(e) for e in _entries(data[PAGES_KEY], PAGES_KEY))
    images = tuple(
        _image_from_entry(e) for e in _entries(data.get(IMAGES_KEY), IMAGES_KEY)
    )
    return Corpus(pages=pages, images=images)


def load_corpus(path: str | Path) -> Corpus:
    """
    Load the exporter bundle at ``path``.

    Raises:
        CorpusUnavailableError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CorpusUnavailableError(f"Could not read corpus at {path}: {e}") from e

    corpus = parse_corpus(text)
    logger.info(
        "Loaded corpus from %s: %d pages, %d images",
        path,
        len(corpus.pages),
        len(corpus.images),
    )
    return corpus

"""Document and result types shared by the matching and ranking stages."""

from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class TextDocument:
    """An indexed page."""

    title: str
    content: str
    url: str
    id: int | None = None  # Exporter row id, display only
    scraped_at: str | None = None


@dataclass(frozen=True)
class ImageDocument:
    """An image found on an indexed page."""

    alt: str
    page_title: str
    page_url: str
    src: str


DocumentT = TypeVar("DocumentT", TextDocument, ImageDocument)


@dataclass(frozen=True)
class ScoredResult(Generic[DocumentT]):
    """A document that matched every query term, with its relevance score."""

    document: DocumentT
    score: int
    snippet: str | None = None  # Highlighted excerpt, pages only


@dataclass(frozen=True)
class Corpus:
    """Read-only page and image collections, in exporter order."""

    pages: tuple[TextDocument, ...] = ()
    images: tuple[ImageDocument, ...] = ()

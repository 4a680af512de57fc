"""
Search API Models

Pydantic models for search and stats responses.
"""

from pydantic import BaseModel, ConfigDict, Field

from openlens.search import ImageDocument, ScoredResult, TextDocument


class PageHit(BaseModel):
    """A matching page"""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: str
    snippet: str = Field(..., description="Excerpt; <b> tags mark query terms")
    score: int = Field(..., gt=0)
    id: int | None = None
    scraped_at: str | None = Field(default=None, alias="scrapedAt")

    @classmethod
    def from_result(cls, result: ScoredResult[TextDocument]) -> "PageHit":
        page = result.document
        return cls(
            url=page.url,
            title=page.title,
            snippet=result.snippet or "",
            score=result.score,
            id=page.id,
            scraped_at=page.scraped_at,
        )


class ImageHit(BaseModel):
    """A matching image"""

    model_config = ConfigDict(populate_by_name=True)

    src: str
    alt: str
    page_title: str = Field(..., alias="pageTitle")
    page_url: str = Field(..., alias="pageUrl")
    score: int = Field(..., gt=0)

    @classmethod
    def from_result(cls, result: ScoredResult[ImageDocument]) -> "ImageHit":
        image = result.document
        return cls(
            src=image.src,
            alt=image.alt,
            page_title=image.page_title,
            page_url=image.page_url,
            score=result.score,
        )


class SearchResponse(BaseModel):
    """Ranked search results"""

    query: str
    mode: str = Field(..., description='"text" or "image"')
    count: int = Field(..., ge=0, description="Number of results returned")
    total: int = Field(..., ge=0, description="Number of matches before the limit")
    results: list[PageHit] | list[ImageHit]


class StatsResponse(BaseModel):
    """Loaded corpus statistics"""

    pages: int = Field(default=0, ge=0)
    images: int = Field(default=0, ge=0)
    corpus: str

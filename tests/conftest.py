"""Test fixtures for openlens tests."""

import json
import os

# Set ENVIRONMENT before importing any modules that use infrastructure_config
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from openlens.search import Corpus, ImageDocument, TextDocument


@pytest.fixture
def pets_corpus() -> Corpus:
    """Two pages about cats and dogs, plus images on them."""
    return Corpus(
        pages=(
            TextDocument(
                title="Cats and Dogs",
                content="Dogs are great pets. Cats too.",
                url="/a",
            ),
            TextDocument(title="Dogs Only", content="Dogs dogs dogs.", url="/b"),
        ),
        images=(
            ImageDocument(
                alt="A sleeping cat",
                page_title="Cats and Dogs",
                page_url="/a",
                src="/img/cat.png",
            ),
            ImageDocument(
                alt="Dog in the park",
                page_title="Dogs Only",
                page_url="/b",
                src="/img/dog.png",
            ),
        ),
    )


@pytest.fixture
def bundle_text() -> str:
    """An exporter bundle as written for the browser."""
    pages = [
        {
            "id": 2,
            "url": "https://example.com/python",
            "title": "Python Tutorial",
            "content": "Learn Python programming. Python is popular.",
            "scrapedAt": "2024-05-01 10:00:00.0",
        },
        {
            "id": 1,
            "url": "https://example.com/java",
            "title": "Java Guide",
            "content": "Java and the JVM. Some people compare it to Python.",
            "scrapedAt": "2024-04-30 09:00:00.0",
        },
    ]
    images = [
        {
            "src": "https://example.com/logo.png",
            "alt": "Python logo",
            "pageTitle": "Python Tutorial",
            "pageUrl": "https://example.com/python",
        }
    ]
    return (
        "window.searchData = "
        + json.dumps(pages, indent=2)
        + ";\n\nwindow.imageData = "
        + json.dumps(images, indent=2)
        + ";"
    )


@pytest.fixture
def bundle_path(tmp_path, bundle_text) -> str:
    """Provide the exporter bundle on disk."""
    path = tmp_path / "search-data.js"
    path.write_text(bundle_text, encoding="utf-8")
    return str(path)

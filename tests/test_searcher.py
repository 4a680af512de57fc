"""
Tests for the in-memory SearchEngine
"""

import pytest

from openlens.search import (
    Corpus,
    EmptyQueryError,
    InvalidSearchModeError,
    SearchEngine,
    SearchMode,
    TextDocument,
)


class TestSearchEngine:
    """Tests for SearchEngine."""

    def test_single_term_ranks_best_first(self, pets_corpus):
        """/b has a title match plus three content matches."""
        engine = SearchEngine(pets_corpus)

        result = engine.search("dogs")

        assert result.mode is SearchMode.TEXT
        assert result.total == 2
        assert [(h.document.url, h.score) for h in result.hits] == [("/b", 13), ("/a", 11)]

    def test_and_logic(self, pets_corpus):
        """/b is excluded despite its high single-term score."""
        engine = SearchEngine(pets_corpus)

        result = engine.search("cats dogs")

        assert [h.document.url for h in result.hits] == ["/a"]
        assert result.hits[0].score == 22

    def test_query_is_trimmed_and_case_folded(self, pets_corpus):
        engine = SearchEngine(pets_corpus)

        result = engine.search("   CATS  ")

        assert result.query == "CATS"
        assert [h.document.url for h in result.hits] == ["/a"]

    def test_text_hits_have_snippets(self, pets_corpus):
        result = SearchEngine(pets_corpus).search("cats")

        assert result.hits[0].snippet == "Dogs are great pets. <b>Cats</b> too."

    def test_image_mode(self, pets_corpus):
        engine = SearchEngine(pets_corpus)

        result = engine.search("dog", mode="image")

        assert result.mode is SearchMode.IMAGE
        assert [(h.document.src, h.score) for h in result.hits] == [
            ("/img/dog.png", 11),
            ("/img/cat.png", 1),
        ]
        assert all(h.snippet is None for h in result.hits)

    def test_mode_accepts_enum_and_any_case(self, pets_corpus):
        engine = SearchEngine(pets_corpus)

        assert engine.search("cat", mode=SearchMode.IMAGE).total == 1
        assert engine.search("cat", mode="IMAGE").total == 1

    def test_unknown_mode(self, pets_corpus):
        with pytest.raises(InvalidSearchModeError):
            SearchEngine(pets_corpus).search("dogs", mode="video")

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query_is_an_error(self, pets_corpus, query):
        with pytest.raises(EmptyQueryError):
            SearchEngine(pets_corpus).search(query)

    def test_no_matches_is_empty_result(self, pets_corpus):
        result = SearchEngine(pets_corpus).search("hamster")

        assert result.total == 0
        assert result.count == 0
        assert result.hits == []

    def test_empty_corpus(self):
        result = SearchEngine(Corpus()).search("anything")

        assert result.total == 0
        assert result.hits == []

    def test_limit_truncates_but_total_counts_all(self, pets_corpus):
        result = SearchEngine(pets_corpus).search("dogs", limit=1)

        assert result.total == 2
        assert result.count == 1
        assert result.hits[0].document.url == "/b"

    def test_ties_keep_corpus_order(self):
        corpus = Corpus(
            pages=tuple(
                TextDocument(title="", content="match", url=f"/{i}") for i in range(5)
            )
        )

        result = SearchEngine(corpus).search("match")

        assert [h.document.url for h in result.hits] == ["/0", "/1", "/2", "/3", "/4"]

    def test_idempotent(self, pets_corpus):
        engine = SearchEngine(pets_corpus)

        assert engine.search("dogs") == engine.search("dogs")

    def test_stats(self, pets_corpus):
        assert SearchEngine(pets_corpus).stats() == {"pages": 2, "images": 2}

"""
Tests for conjunctive matching and scoring
"""

from openlens.search import ImageDocument, TextDocument, match_images, match_pages
from openlens.search.matching import score_fields


class TestScoreFields:
    """Tests for the per-document scoring rule."""

    def test_primary_matches_weigh_ten(self):
        assert score_fields("dogs only", "dogs dogs dogs.", ["dogs"]) == 13

    def test_scores_sum_over_terms(self):
        score = score_fields("Cats and Dogs", "Dogs are great pets. Cats too.", ["cats", "dogs"])
        assert score == 22

    def test_missing_term_rejects_document(self):
        assert score_fields("Dogs Only", "Dogs dogs dogs.", ["cats", "dogs"]) is None

    def test_repeated_term_counts_twice(self):
        assert score_fields("Dogs Only", "Dogs dogs dogs.", ["dogs", "dogs"]) == 26

    def test_case_insensitive(self):
        assert score_fields("PYTHON", "PyThOn", ["python"]) == 11

    def test_non_overlapping_occurrences(self):
        assert score_fields("", "aaaa", ["aa"]) == 2

    def test_terms_are_literal_not_patterns(self):
        # "." must not match every character
        assert score_fields("Cats and Dogs", "Dogs are great pets. Cats too.", ["."]) == 2
        assert score_fields("abc", "def", ["a.c"]) is None

    def test_empty_term_matches_every_position(self):
        # str.count("") is len + 1
        assert score_fields("ab", "", [""]) == 31

    def test_missing_fields_are_empty(self):
        assert score_fields(None, None, ["x"]) is None
        assert score_fields(None, "x", ["x"]) == 1

    def test_no_terms_is_no_match(self):
        assert score_fields("title", "content", []) is None


class TestMatchPages:
    """Tests for page matching."""

    def test_single_term_matches_both_pages(self, pets_corpus):
        results = match_pages(pets_corpus.pages, ["dogs"])

        assert [r.document.url for r in results] == ["/a", "/b"]
        assert [r.score for r in results] == [11, 13]

    def test_all_terms_required(self, pets_corpus):
        results = match_pages(pets_corpus.pages, ["cats", "dogs"])

        assert [r.document.url for r in results] == ["/a"]
        assert results[0].score == 22

    def test_results_carry_snippets(self, pets_corpus):
        results = match_pages(pets_corpus.pages, ["cats"])

        assert results[0].snippet == "Dogs are great pets. <b>Cats</b> too."

    def test_no_match_is_empty(self, pets_corpus):
        assert match_pages(pets_corpus.pages, ["hamster"]) == []

    def test_empty_corpus(self):
        assert match_pages([], ["dogs"]) == []

    def test_input_documents_unchanged(self, pets_corpus):
        before = list(pets_corpus.pages)
        match_pages(pets_corpus.pages, ["dogs"])
        assert list(pets_corpus.pages) == before

    def test_snippet_escaping_can_be_disabled(self):
        page = TextDocument(title="t", content="<i>dogs</i>", url="/x")

        escaped = match_pages([page], ["dogs"])[0].snippet
        raw = match_pages([page], ["dogs"], escape=False)[0].snippet

        assert escaped == "&lt;i&gt;<b>dogs</b>&lt;/i&gt;"
        assert raw == "<i><b>dogs</b></i>"


class TestMatchImages:
    """Tests for image matching."""

    def test_alt_weighs_more_than_page_title(self, pets_corpus):
        results = match_images(pets_corpus.images, ["dog"])

        assert [(r.document.src, r.score) for r in results] == [
            ("/img/cat.png", 1),
            ("/img/dog.png", 11),
        ]

    def test_images_have_no_snippet(self, pets_corpus):
        results = match_images(pets_corpus.images, ["cat"])

        assert len(results) == 1
        assert results[0].document.src == "/img/cat.png"
        assert results[0].score == 11
        assert results[0].snippet is None

    def test_all_terms_required(self):
        image = ImageDocument(alt="red car", page_title="Garage", page_url="/g", src="/c.png")

        assert match_images([image], ["red", "garage"])[0].score == 11
        assert match_images([image], ["red", "bike"]) == []

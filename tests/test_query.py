import pytest

from openlens.search import EmptyQueryError, normalize_query


def test_lowercases_and_splits_on_whitespace():
    assert normalize_query("Cats  DOGS\tbirds\n fish") == ["cats", "dogs", "birds", "fish"]


def test_duplicate_terms_are_kept():
    assert normalize_query("dogs Dogs") == ["dogs", "dogs"]


def test_surrounding_whitespace_yields_empty_terms():
    # Splitting is literal; callers trim before normalizing
    assert normalize_query(" dogs ") == ["", "dogs", ""]


def test_special_characters_are_literal_terms():
    assert normalize_query("c++ a.b") == ["c++", "a.b"]


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_empty_query_is_rejected(query):
    with pytest.raises(EmptyQueryError):
        normalize_query(query)

import pytest

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.ranking import top5_search


def _index(entries: dict[str, list[tuple[str, int]]]) -> KeywordIndex:
    """Build an index by merging one document per (keyword, doc, freq)."""
    index = KeywordIndex()
    for keyword, pairs in entries.items():
        for doc_id, freq in pairs:
            index.merge({keyword: Occurrence(doc_id=doc_id, frequency=freq)})
    return index


def test_tie_goes_to_first_keyword():
    index = _index({"rabbit": [("A", 5), ("B", 2)], "queen": [("B", 5), ("C", 1)]})
    assert top5_search(index, "rabbit", "queen") == ["A", "B", "C"]


def test_tie_order_flips_with_argument_order():
    index = _index({"rabbit": [("A", 5)], "queen": [("B", 5)]})
    assert top5_search(index, "rabbit", "queen") == ["A", "B"]
    assert top5_search(index, "queen", "rabbit") == ["B", "A"]


def test_neither_keyword_indexed_returns_none():
    index = _index({"rabbit": [("A", 5)]})
    assert top5_search(index, "nomatch1", "nomatch2") is None


def test_empty_index_returns_none():
    assert top5_search(KeywordIndex(), "rabbit", "queen") is None


@pytest.mark.parametrize("present_first", [True, False])
def test_only_one_keyword_indexed(present_first: bool):
    index = _index({"rabbit": [("A", 1), ("B", 4), ("C", 2)]})
    args = ("rabbit", "missing") if present_first else ("missing", "rabbit")
    assert top5_search(index, *args) == ["B", "C", "A"]


def test_higher_frequency_wins_across_keywords():
    index = _index(
        {"rabbit": [("A", 6), ("B", 3), ("C", 1)], "queen": [("D", 5), ("E", 2)]}
    )
    assert top5_search(index, "rabbit", "queen") == ["A", "D", "B", "E", "C"]


def test_capped_at_five():
    index = _index(
        {
            "rabbit": [(f"r{i}", i + 1) for i in range(6)],
            "queen": [(f"q{i}", i + 1) for i in range(6)],
        }
    )
    result = top5_search(index, "rabbit", "queen")
    assert result == ["r5", "q5", "r4", "q4", "r3"]


def test_duplicates_skipped_and_search_continues():
    index = _index(
        {
            "rabbit": [("A", 9), ("B", 8), ("C", 7)],
            "queen": [("A", 3), ("B", 2), ("D", 1)],
        }
    )
    assert top5_search(index, "rabbit", "queen") == ["A", "B", "C", "D"]


def test_same_keyword_twice():
    index = _index({"rabbit": [("A", 3), ("B", 2)]})
    assert top5_search(index, "rabbit", "rabbit") == ["A", "B"]


def test_query_does_not_consume_index():
    index = _index({"rabbit": [("A", 5), ("B", 2)], "queen": [("B", 5), ("C", 1)]})
    before = index.to_polars()
    first = top5_search(index, "rabbit", "queen")
    second = top5_search(index, "rabbit", "queen")
    assert first == second
    assert index.to_polars().equals(before)

"""In-memory inverted index: keyword -> occurrences in descending frequency."""

from collections.abc import Mapping

import polars as pl

from littlesearch.data_models.occurrence import Occurrence

_SCHEMA = {
    "keyword": pl.String,
    "rank": pl.Int64,
    "doc_id": pl.String,
    "frequency": pl.Int64,
}


def insert_last_occurrence(occs: list[Occurrence]) -> list[int]:
    """Move the last occurrence into place, keeping occs in descending frequency.

    Elements 0..n-2 must already be ordered. The slot is found by binary search
    over that prefix; the midpoints it checks are returned (empty when the list
    has a single element and nothing needs to move).
    """
    if len(occs) <= 1:
        return []

    last = occs.pop()
    freq = last.frequency
    midpoints: list[int] = []

    begin, end = 0, len(occs) - 1
    while True:
        mid = (begin + end) // 2
        midpoints.append(mid)
        if begin == end or begin + 1 == end:
            # window of one or two: first slot whose frequency does not exceed ours
            idx = begin
            while idx <= end and occs[idx].frequency > freq:
                idx += 1
            break
        if occs[mid].frequency == freq:
            idx = mid
            break
        if occs[mid].frequency < freq:
            end = mid - 1
        else:
            begin = mid + 1

    occs.insert(idx, last)
    return midpoints


class KeywordIndex:
    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}

    def merge(self, doc_occurrences: Mapping[str, Occurrence]) -> None:
        """Fold one document's keyword occurrences into the index."""
        for keyword, occ in doc_occurrences.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [occ]
            else:
                occs.append(occ)
                insert_last_occurrence(occs)

    def occurrences(self, keyword: str) -> list[Occurrence] | None:
        occs = self._index.get(keyword)
        if occs is None:
            return None
        return list(occs)

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

    def to_polars(self) -> pl.DataFrame:
        rows = [
            (keyword, rank, occ.doc_id, occ.frequency)
            for keyword in self.keywords()
            for rank, occ in enumerate(self._index[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

"""Two-keyword OR search over a KeywordIndex."""

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence

MAX_RESULTS = 5


def top5_search(index: KeywordIndex, kw1: str, kw2: str) -> list[str] | None:
    """Return up to 5 documents containing kw1 or kw2, best frequency first.

    Each document appears once, at the highest frequency it matched with.
    Equal frequencies go to kw1. Returns None if neither keyword is indexed.
    """
    occs1 = index.occurrences(kw1)
    occs2 = index.occurrences(kw2)
    if occs1 is None and occs2 is None:
        return None

    # cursors walk copies by position; the stored lists are left untouched
    list1: list[Occurrence] = occs1 or []
    list2: list[Occurrence] = occs2 or []
    i1 = i2 = 0

    results: list[str] = []
    seen: set[str] = set()
    while len(results) < MAX_RESULTS:
        live1 = i1 < len(list1)
        live2 = i2 < len(list2)
        if not live1 and not live2:
            break

        if live1 and (not live2 or list1[i1].frequency >= list2[i2].frequency):
            doc_id = list1[i1].doc_id
            i1 += 1
        else:
            doc_id = list2[i2].doc_id
            i2 += 1

        if doc_id not in seen:
            seen.add(doc_id)
            results.append(doc_id)
    return results

"""Keyword extraction: noise-word filtering and per-document keyword counts."""

from collections import Counter
from collections.abc import Collection
from pathlib import Path

from littlesearch.data_models.occurrence import Occurrence

PUNCTUATION = ".,?:;!"


def get_keyword(word: str, noise_words: Collection[str]) -> str | None:
    """Return word as a lower-case keyword, or None if it isn't one.

    A keyword is all letters once trailing punctuation is stripped, and is not
    a noise word. Punctuation inside a word disqualifies it:

    get_keyword("World?!", ...)   -> "world"
    get_keyword("end.both", ...)  -> None
    get_keyword("we're", ...)     -> None
    """
    stripped = word.rstrip(PUNCTUATION)
    if not stripped or not stripped.isalpha():
        return None
    keyword = stripped.lower()
    if keyword in noise_words:
        return None
    return keyword


def load_noise_words(path: Path) -> frozenset[str]:
    if not path.is_file():
        raise FileNotFoundError(f"No such noise-words file: {path}")
    return frozenset(w.lower() for w in path.read_text().split())


def load_keywords_from_document(
    doc_path: Path, noise_words: Collection[str], doc_id: str | None = None
) -> dict[str, Occurrence]:
    """Count the keywords in one document.

    doc_id defaults to the path as given. Tokens are split on whitespace.
    """
    if not doc_path.is_file():
        raise FileNotFoundError(f"No such document: {doc_path}")
    if doc_id is None:
        doc_id = str(doc_path)

    counts: Counter[str] = Counter()
    for token in doc_path.read_text().split():
        keyword = get_keyword(token, noise_words)
        if keyword is not None:
            counts[keyword] += 1
    return {
        keyword: Occurrence(doc_id=doc_id, frequency=n)
        for keyword, n in counts.items()
    }

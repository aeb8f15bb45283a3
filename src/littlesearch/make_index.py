"""Build a KeywordIndex from a document listing and a set of noise words."""

from collections.abc import Collection
from pathlib import Path

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.keywords import load_keywords_from_document


def read_doc_list(docs_file: Path) -> list[str]:
    if not docs_file.is_file():
        raise FileNotFoundError(f"No such document listing: {docs_file}")
    return docs_file.read_text().split()


def make_index(docs_file: Path, noise_words: Collection[str]) -> KeywordIndex:
    """Index every document named in docs_file.

    Relative document paths resolve against docs_file's directory; each
    document's id is its name exactly as written in the listing.
    """
    index = KeywordIndex()
    for name in read_doc_list(docs_file):
        doc_path = docs_file.parent / name
        kws = load_keywords_from_document(doc_path, noise_words, doc_id=name)
        index.merge(kws)
    return index

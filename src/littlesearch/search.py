"""Answer a two-keyword OR query over a corpus of text documents.

Usage:
    python -m littlesearch.search \
        --docs docs.txt --noise-words noisewords.txt rabbit queen
"""

import argparse
from pathlib import Path

from littlesearch.keywords import get_keyword, load_noise_words
from littlesearch.make_index import make_index
from littlesearch.ranking import top5_search


def main() -> None:
    parser = argparse.ArgumentParser(description="Top-5 search for kw1 OR kw2")
    parser.add_argument(
        "--docs", required=True, help="File listing document paths, one per line"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File of noise words, one per line"
    )
    parser.add_argument("kw1", help="First keyword (wins frequency ties)")
    parser.add_argument("kw2", help="Second keyword")
    args = parser.parse_args()

    noise_words = load_noise_words(Path(args.noise_words))
    print(f"Loading documents listed in {args.docs}...")
    index = make_index(Path(args.docs), noise_words)
    print(f"Indexed {len(index)} keywords")

    kw1 = get_keyword(args.kw1, noise_words) or ""
    kw2 = get_keyword(args.kw2, noise_words) or ""

    results = top5_search(index, kw1, kw2)
    if results is None:
        print("No matches.")
        return
    for doc_id in results:
        print(doc_id)


if __name__ == "__main__":
    main()

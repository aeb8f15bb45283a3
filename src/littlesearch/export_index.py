"""Build the keyword index and write it out as Parquet.

Usage:
    python -m littlesearch.export_index \
        --docs docs.txt --noise-words noisewords.txt --output index.parquet
"""

import argparse
from pathlib import Path

from littlesearch.keywords import load_noise_words
from littlesearch.make_index import make_index


def main() -> None:
    parser = argparse.ArgumentParser(description="Export keyword index to Parquet")
    parser.add_argument(
        "--docs", required=True, help="File listing document paths, one per line"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File of noise words, one per line"
    )
    parser.add_argument("--output", required=True, help="Output Parquet file path")
    args = parser.parse_args()

    print(f"Loading documents listed in {args.docs}...")
    noise_words = load_noise_words(Path(args.noise_words))
    index = make_index(Path(args.docs), noise_words)

    df = index.to_polars()
    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(out_path)
    print(f"Wrote {len(index)} keywords ({len(df)} occurrences) → {out_path}")


if __name__ == "__main__":
    main()

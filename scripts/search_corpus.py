#!/usr/bin/env python3
"""
Run a query against an exported corpus bundle.

Usage:
    python scripts/search_corpus.py "cats dogs" [--corpus data/search-data.js] [--mode image] [--limit 5]
"""

import argparse
import os
import sys

from openlens.corpus import CorpusUnavailableError, load_corpus
from openlens.search import SearchEngine, SearchError, SearchMode


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search an exported corpus")
    parser.add_argument("query", help="Whitespace-separated terms, all required")
    parser.add_argument(
        "--corpus",
        default=os.getenv("CORPUS_PATH", "data/search-data.js"),
        help="Path to the exporter bundle",
    )
    parser.add_argument(
        "--mode",
        default=SearchMode.TEXT.value,
        choices=[m.value for m in SearchMode],
    )
    parser.add_argument("--limit", type=int, default=10)
    args = parser.parse_args(argv)

    try:
        engine = SearchEngine(load_corpus(args.corpus), escape_snippets=False)
        result = engine.search(args.query, mode=args.mode, limit=args.limit)
    except CorpusUnavailableError as e:
        print(f"Could not load search data: {e}", file=sys.stderr)
        return 2
    except SearchError as e:
        print(f"Invalid query: {e}", file=sys.stderr)
        return 2

    if not result.total:
        print(f'No results for "{result.query}"')
        return 0

    noun = "result" if result.total == 1 else "results"
    print(f'{result.total} {noun} for "{result.query}"\n')
    for rank, hit in enumerate(result.hits, start=1):
        doc = hit.document
        if result.mode is SearchMode.IMAGE:
            print(f"{rank}. [{hit.score}] {doc.alt or 'Untitled'}")
            print(f"   {doc.src} (on {doc.page_url})")
        else:
            print(f"{rank}. [{hit.score}] {doc.title or 'Untitled'}")
            print(f"   {doc.url}")
            print(f"   {hit.snippet}")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())

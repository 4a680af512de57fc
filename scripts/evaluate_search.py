#!/usr/bin/env python3
"""
Measure ranking quality (MRR) on a labelled query set.

The evaluation file is a JSON list of {"query": ..., "url": ...} cases,
where url is the page expected to rank first.

Usage:
    python scripts/evaluate_search.py [--corpus data/search-data.js] [--eval data/evaluation_set.json]
"""

import argparse
import json
import os

from openlens.corpus import load_corpus
from openlens.search import SearchEngine

EVAL_FILE = "data/evaluation_set.json"


def load_eval_set(path: str) -> list[dict]:
    if not os.path.exists(path):
        print(f"Evaluation file not found at {path}.")
        return []
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def evaluate_mrr(engine: SearchEngine, eval_set: list[dict], k: int = 10) -> float:
    score_sum = 0.0
    for case in eval_set:
        result = engine.search(case["query"], limit=k)

        rank = 0
        for i, hit in enumerate(result.hits):
            if hit.document.url == case["url"]:
                rank = i + 1
                break

        if rank > 0:
            score_sum += 1.0 / rank

    return score_sum / len(eval_set) if eval_set else 0.0


def run_evaluation():
    parser = argparse.ArgumentParser(description="Evaluate search relevance")
    parser.add_argument(
        "--corpus", default=os.getenv("CORPUS_PATH", "data/search-data.js")
    )
    parser.add_argument("--eval", default=EVAL_FILE)
    args = parser.parse_args()

    print("--- Search Relevance Evaluation ---")
    dataset = load_eval_set(args.eval)
    if not dataset:
        print("No dataset found.")
        return

    engine = SearchEngine(load_corpus(args.corpus))
    mrr = evaluate_mrr(engine, dataset)
    print(f"Queries: {len(dataset)}")
    print(f"MRR (Mean Reciprocal Rank): {mrr:.4f}")


if __name__ == "__main__":
    run_evaluation()

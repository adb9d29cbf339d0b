#!/usr/bin/env python3
"""
scripts/inspect_model.py

Train on a post CSV and print a high-signal report about what the classifier learned:
- label distribution (examples, share, log-prior)
- vocabulary size + how many words occur in a single post only
- top words per label, ranked by how much more likely they are under the label
  than in the corpus overall (label log-likelihood minus corpus log-frequency)

Typical usage:
  PYTHONPATH=src python scripts/inspect_model.py --csv data/train.csv

Show more words per label:
  PYTHONPATH=src python scripts/inspect_model.py --csv data/train.csv --top 25
"""

from __future__ import annotations

import argparse
import math
import sys
from typing import Dict, List

from post_classifier.evaluate.summary import WordParameter, summarize
from post_classifier.model.counts import TrainedModel, train
from post_classifier.model.errors import SourceUnavailableError
from post_classifier.utils.io import read_posts


def hr(ch: str = "=", n: int = 88) -> str:
    return ch * n

def fmt_int(n: int) -> str:
    return f"{n:,}"

def fmt_pct(a: int, b: int) -> str:
    if b <= 0:
        return "0.0%"
    return f"{(100.0 * a / b):.1f}%"


def lift(model: TrainedModel, p: WordParameter) -> float:
    corpus = math.log(model.count_containing(p.word) / float(model.total_posts))
    return p.log_likelihood - corpus


def top_words_by_label(model: TrainedModel, params: List[WordParameter], top: int, min_count: int) -> Dict[str, List[WordParameter]]:
    by_label: Dict[str, List[WordParameter]] = {}
    for p in params:
        if p.count < min_count:
            continue
        by_label.setdefault(p.label, []).append(p)

    for label, items in by_label.items():
        items.sort(key=lambda p: (-lift(model, p), -p.count, p.word))
        by_label[label] = items[:top]
    return by_label


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", required=True, help="Training CSV with 'tag' and 'content' columns.")
    ap.add_argument("--encoding", default="utf-8")
    ap.add_argument("--top", type=int, default=10, help="Words to show per label.")
    ap.add_argument("--min-count", type=int, default=1, help="Ignore (label, word) pairs seen in fewer posts.")
    args = ap.parse_args()

    try:
        posts = read_posts(args.csv, encoding=args.encoding)
    except SourceUnavailableError as e:
        print(f"[inspect] {e}", file=sys.stderr)
        return 1

    model = train(posts)
    if model.total_posts == 0:
        print(f"[inspect] no posts in {args.csv}")
        return 0

    summary = summarize(model)

    print(hr())
    print(f"CSV: {args.csv}")
    print(f"posts: {fmt_int(summary.total_posts)} | labels: {fmt_int(len(summary.classes))} | vocabulary: {fmt_int(summary.vocabulary_size)}")
    singletons = sum(1 for w in model.vocabulary if model.count_containing(w) == 1)
    print(f"words seen in exactly one post: {fmt_int(singletons)} ({fmt_pct(singletons, summary.vocabulary_size)})")

    print(hr("-"))
    print("Label distribution")
    for c in summary.classes:
        print(f"  {c.label:<20} {fmt_int(c.num_examples):>8}  {fmt_pct(c.num_examples, summary.total_posts):>6}  log-prior={c.log_prior:.3f}")

    print(hr("-"))
    print(f"Top words per label (by lift, min_count={args.min_count})")
    top = top_words_by_label(model, summary.parameters, args.top, args.min_count)
    for label in model.sorted_labels:
        print(f"[{label}]")
        for p in top.get(label, []):
            print(f"  {p.word:<24} count={p.count:<6} log-lik={p.log_likelihood:.3f}  lift={lift(model, p):+.3f}")

    print(hr())
    return 0


if __name__ == "__main__":
    sys.exit(main())

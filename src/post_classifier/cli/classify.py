#!/usr/bin/env python3
"""
cli/classify.py

Train a Naive Bayes post classifier on a CSV file and, optionally, test it on a second one.

Input files need a header row with at least 'tag' and 'content' columns.

Train only (prints the training data and every learned parameter):
  PYTHONPATH=src python -m post_classifier.cli.classify data/train.csv

Train + test (prints one prediction per test post and the final accuracy):
  PYTHONPATH=src python -m post_classifier.cli.classify data/train.csv data/test.csv

Exit status is 1 if either file can't be read ("Error opening file: ...").
If only the test file fails, the training output has already been printed.
"""

from __future__ import annotations

import argparse
import codecs
import sys
from typing import List, Optional, Sequence

from ..evaluate.evaluate import iter_predictions
from ..evaluate.summary import TrainingSummary, summarize
from ..model.counts import TrainedModel, train
from ..model.errors import UntrainedModelError
from ..utils.io import Post, load_posts


def fmt_num(x: float, precision: int) -> str:
  return f"{x:.{precision}g}"


def status(msg: str, verbose: bool) -> None:
  if verbose:
    print(f"[classify] {msg}", file=sys.stderr)


# ---------------------------
# Printers
# ---------------------------

def print_training_data(posts: List[Post]) -> None:
  print("training data:")
  for post in posts:
    print(f"  label = {post['tag']}, content = {post['content']}")


def print_classifier_info(summary: TrainingSummary, precision: int) -> None:
  print("classes:")
  for c in summary.classes:
    print(f"  {c.label}, {c.num_examples} examples, log-prior = {fmt_num(c.log_prior, precision)}")

  print("classifier parameters:")
  for p in summary.parameters:
    print(f"  {p.label}:{p.word}, count = {p.count}, log-likelihood = {fmt_num(p.log_likelihood, precision)}")


def run_train(posts: List[Post], train_only: bool, precision: int) -> TrainedModel:
  if train_only:
    print_training_data(posts)

  model = train(posts)
  print(f"trained on {model.total_posts} examples")

  if train_only:
    print(f"vocabulary size = {model.vocabulary_size}")
    print()
    print_classifier_info(summarize(model), precision)
    print()

  return model


def run_test(model: TrainedModel, posts: List[Post], precision: int) -> None:
  print()
  print("test data:")

  num_correct = 0
  num_tested = 0
  for rec in iter_predictions(model, posts):
    print(
      f"  correct = {rec.true_tag}, predicted = {rec.predicted_tag}, "
      f"log-probability score = {fmt_num(rec.score, precision)}"
    )
    print(f"  content = {rec.content}")
    print()
    num_correct, num_tested = rec.num_correct, rec.num_tested

  print(f"performance: {num_correct} / {num_tested} posts predicted correctly")


def build_parser() -> argparse.ArgumentParser:
  ap = argparse.ArgumentParser(
    prog="classify",
    description="Naive Bayes classifier for short text posts (CSV with 'tag' and 'content' columns).",
  )
  ap.add_argument("train_file", help="Training CSV.")
  ap.add_argument("test_file", nargs="?", default=None, help="Optional test CSV.")
  ap.add_argument("--precision", type=int, default=3, help="Significant digits for printed log-probabilities.")
  ap.add_argument("--encoding", default="utf-8", help="Encoding of the input files.")
  ap.add_argument("--verbose", action="store_true", help="Print progress to stderr.")
  return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
  ap = build_parser()
  args = ap.parse_args(argv)
  if args.precision <= 0:
    ap.error("--precision must be a positive integer")
  try:
    codecs.lookup(args.encoding)
  except LookupError:
    ap.error(f"unknown encoding: {args.encoding}")

  train_source = load_posts(args.train_file, encoding=args.encoding)
  if not train_source.ok:
    status(str(train_source.error), args.verbose)
    print(f"Error opening file: {args.train_file}")
    return 1
  status(f"loaded {len(train_source.posts):,} training posts from {args.train_file}", args.verbose)

  train_only = args.test_file is None
  model = run_train(train_source.posts, train_only=train_only, precision=args.precision)

  if train_only:
    return 0

  test_source = load_posts(args.test_file, encoding=args.encoding)
  if not test_source.ok:
    status(str(test_source.error), args.verbose)
    print(f"Error opening file: {args.test_file}")
    return 1
  status(f"loaded {len(test_source.posts):,} test posts from {args.test_file}", args.verbose)

  try:
    run_test(model, test_source.posts, precision=args.precision)
  except UntrainedModelError as e:
    print(f"Error: {e}")
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(main())

"""
evaluate/summary.py

What this file does:
- Turns a TrainedModel into plain summary values:
  - per label: example count + log-prior
  - per (label, word) with a nonzero count: count + log-likelihood

How it fits:
- The CLI prints these in train-only mode; scripts/inspect_model.py ranks them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..model.counts import TrainedModel
from ..model.scoring import log_prior, word_log_likelihood


@dataclass(frozen=True)
class LabelSummary:
  label: str
  num_examples: int
  log_prior: float


@dataclass(frozen=True)
class WordParameter:
  label: str
  word: str
  count: int
  log_likelihood: float


@dataclass(frozen=True)
class TrainingSummary:
  total_posts: int
  vocabulary_size: int
  classes: List[LabelSummary]
  parameters: List[WordParameter]


def summarize(model: TrainedModel) -> TrainingSummary:
  classes: List[LabelSummary] = []
  parameters: List[WordParameter] = []
  vocab_sorted = sorted(model.vocabulary)

  for label in model.sorted_labels:
    classes.append(LabelSummary(label, model.count_with_label(label), log_prior(model, label)))

  for label in model.sorted_labels:
    for w in vocab_sorted:
      n = model.count_with_label_containing(label, w)
      if n > 0:
        # n > 0 always lands on the label-conditional tier
        parameters.append(WordParameter(label, w, n, word_log_likelihood(model, label, w)))

  return TrainingSummary(
    total_posts=model.total_posts,
    vocabulary_size=model.vocabulary_size,
    classes=classes,
    parameters=parameters,
  )

"""
model/counts.py

What this file does:
- Aggregates the four count tables a Naive Bayes post classifier needs:
    total_posts
    posts_containing_w[word]
    posts_with_label[label]
    posts_with_label_containing_w[(label, word)]
- Freezes them into an immutable TrainedModel.

How it fits:
- train() is the single pass over training posts (input order, one post at a time).
- model/scoring.py only ever reads a TrainedModel; nothing mutates it afterwards.

Counting rule:
- a word counts once per post (unique_words), so every table is a document frequency
- accumulation is purely additive, so the result doesn't depend on post order
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Set, Tuple

from ..text.tokenize import unique_words

LabelWord = Tuple[str, str]


@dataclass(frozen=True)
class TrainedModel:
  total_posts: int
  vocabulary: FrozenSet[str]
  labels: FrozenSet[str]
  posts_containing_w: Mapping[str, int]
  posts_with_label: Mapping[str, int]
  posts_with_label_containing_w: Mapping[LabelWord, int]

  @property
  def sorted_labels(self) -> List[str]:
    return sorted(self.labels)

  @property
  def vocabulary_size(self) -> int:
    return len(self.vocabulary)

  def count_containing(self, word: str) -> int:
    return self.posts_containing_w.get(word, 0)

  def count_with_label(self, label: str) -> int:
    return self.posts_with_label.get(label, 0)

  def count_with_label_containing(self, label: str, word: str) -> int:
    return self.posts_with_label_containing_w.get((label, word), 0)


class CountAggregator:
  """
  Mutable accumulator used while reading the training set.

  observe() one post at a time, then freeze() once; the aggregator is not meant
  to be observed again after that (no incremental updates of a trained model).
  """

  def __init__(self) -> None:
    self.total_posts = 0
    self.vocabulary: Set[str] = set()
    self.labels: Set[str] = set()
    self.posts_containing_w: Counter[str] = Counter()
    self.posts_with_label: Counter[str] = Counter()
    self.posts_with_label_containing_w: Counter[LabelWord] = Counter()

  def observe(self, post: Mapping[str, str]) -> None:
    tag = post["tag"]
    self.total_posts += 1

    for w in unique_words(post["content"]):
      self.vocabulary.add(w)
      self.posts_containing_w[w] += 1
      self.posts_with_label_containing_w[(tag, w)] += 1

    self.posts_with_label[tag] += 1
    self.labels.add(tag)

  def freeze(self) -> TrainedModel:
    return TrainedModel(
      total_posts=self.total_posts,
      vocabulary=frozenset(self.vocabulary),
      labels=frozenset(self.labels),
      posts_containing_w=MappingProxyType(dict(self.posts_containing_w)),
      posts_with_label=MappingProxyType(dict(self.posts_with_label)),
      posts_with_label_containing_w=MappingProxyType(dict(self.posts_with_label_containing_w)),
    )


def train(posts: Iterable[Mapping[str, str]]) -> TrainedModel:
  agg = CountAggregator()
  for post in posts:
    agg.observe(post)
  return agg.freeze()

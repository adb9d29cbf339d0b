"""
model/scoring.py

What this file does:
- Scores a query post against every trained label:
    score(C) = log_prior(C) + log_likelihood(C, W)
- Picks the best label (ties go to the first label in ascending order).

Smoothing (three tiers, checked in this order, per distinct query word w):
- w never seen in training at all      -> ln(1 / total_posts)
- w seen, but never with label C       -> ln(posts_containing_w[w] / total_posts)
- otherwise                            -> ln(posts_with_label_containing_w[(C, w)] / posts_with_label[C])

All logs are natural logs.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping, NamedTuple, Optional

from ..text.tokenize import unique_words
from .counts import TrainedModel, train
from .errors import EmptyTrainingSetError, UnknownLabelError, UntrainedModelError


class Prediction(NamedTuple):
    label: str
    score: float


def _require_trained(model: TrainedModel) -> None:
    if model.total_posts <= 0:
        raise EmptyTrainingSetError()


def log_prior(model: TrainedModel, label: str) -> float:
    _require_trained(model)
    if label not in model.labels:
        raise UnknownLabelError(label)
    return math.log(model.count_with_label(label) / float(model.total_posts))


def word_log_likelihood(model: TrainedModel, label: str, word: str) -> float:
    _require_trained(model)
    total = float(model.total_posts)
    n_wc = model.count_with_label_containing(label, word)
    n_w = model.count_containing(word)

    if n_wc == 0 and n_w == 0:
        return math.log(1.0 / total)
    if n_wc == 0:
        return math.log(n_w / total)
    return math.log(n_wc / float(model.count_with_label(label)))


def log_likelihood(model: TrainedModel, label: str, words: Iterable[str]) -> float:
    _require_trained(model)
    total = 0.0
    for w in set(words):
        total += word_log_likelihood(model, label, w)
    return total


def score(model: TrainedModel, label: str, post: Mapping[str, str]) -> float:
    words = unique_words(post["content"])
    return log_prior(model, label) + log_likelihood(model, label, words)


def predict(model: TrainedModel, post: Mapping[str, str]) -> Prediction:
    """
    Return the highest-scoring label and its log-probability score.

    Labels are visited in ascending order and only a strictly greater score
    replaces the running best, so on a tie the earliest label wins.
    """
    if not model.labels:
        raise UntrainedModelError()
    _require_trained(model)

    words = unique_words(post["content"])
    first, *rest = model.sorted_labels
    best = Prediction(first, log_prior(model, first) + log_likelihood(model, first, words))

    for label in rest:
        s = log_prior(model, label) + log_likelihood(model, label, words)
        if s > best.score:
            best = Prediction(label, s)

    return best


class NaiveBayesClassifier:
    """
    Convenience wrapper: fit() once on a sequence of posts, then predict().

    fit() always rebuilds the counts from scratch.
    """

    def __init__(self) -> None:
        self._model: Optional[TrainedModel] = None

    @property
    def is_trained(self) -> bool:
        return self._model is not None

    @property
    def model(self) -> TrainedModel:
        if self._model is None:
            raise UntrainedModelError()
        return self._model

    def fit(self, posts: Iterable[Mapping[str, str]]) -> "NaiveBayesClassifier":
        self._model = train(posts)
        return self

    def log_prior(self, label: str) -> float:
        return log_prior(self.model, label)

    def log_likelihood(self, label: str, words: Iterable[str]) -> float:
        return log_likelihood(self.model, label, words)

    def predict(self, post: Mapping[str, str]) -> Prediction:
        return predict(self.model, post)

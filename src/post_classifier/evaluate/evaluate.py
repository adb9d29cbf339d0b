"""
evaluate/evaluate.py

What this file does:
- Runs predict() over a stream of labeled posts and tallies accuracy.

How it fits:
- iter_predictions() yields one record per post with running counters, so a
  printer can show results as they come.
- evaluate() drains it into an EvaluationReport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Mapping

from ..model.counts import TrainedModel
from ..model.scoring import predict


@dataclass(frozen=True)
class PredictionRecord:
  true_tag: str
  predicted_tag: str
  score: float
  content: str
  correct: bool
  num_correct: int
  num_tested: int

  @property
  def running_accuracy(self) -> float:
    return self.num_correct / self.num_tested


@dataclass
class EvaluationReport:
  records: List[PredictionRecord] = field(default_factory=list)
  num_correct: int = 0
  num_tested: int = 0

  @property
  def accuracy(self) -> float:
    if self.num_tested <= 0:
      return 0.0
    return self.num_correct / self.num_tested


def iter_predictions(model: TrainedModel, posts: Iterable[Mapping[str, str]]) -> Iterator[PredictionRecord]:
  num_correct = 0
  num_tested = 0

  for post in posts:
    label, s = predict(model, post)
    correct = label == post["tag"]
    if correct:
      num_correct += 1
    num_tested += 1

    yield PredictionRecord(
      true_tag=post["tag"],
      predicted_tag=label,
      score=s,
      content=post["content"],
      correct=correct,
      num_correct=num_correct,
      num_tested=num_tested,
    )


def evaluate(model: TrainedModel, posts: Iterable[Mapping[str, str]]) -> EvaluationReport:
  report = EvaluationReport()
  for rec in iter_predictions(model, posts):
    report.records.append(rec)
    report.num_correct = rec.num_correct
    report.num_tested = rec.num_tested
  return report

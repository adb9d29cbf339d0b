"""
model/errors.py

What this file does:
- Defines the error types raised by the classifier and its input readers.

How it fits:
- EmptyTrainingSetError / UntrainedModelError guard the public scoring entry points.
- SourceUnavailableError is raised by utils/io.py when a post file can't be read.
"""

from __future__ import annotations

from pathlib import Path


class ClassifierError(Exception):
  pass


class EmptyTrainingSetError(ClassifierError):
  """Raised when a prior or likelihood is requested before any post was trained on."""

  def __init__(self, message: str = "classifier has not seen any training posts (total_posts == 0)") -> None:
    super().__init__(message)


class UntrainedModelError(ClassifierError):
  """Raised when a prediction is requested and the label set is empty."""

  def __init__(self, message: str = "cannot predict: classifier has no labels (train it first)") -> None:
    super().__init__(message)


class UnknownLabelError(ClassifierError):
  def __init__(self, label: str) -> None:
    self.label = label
    super().__init__(f"label {label!r} was not seen in training")


class SourceUnavailableError(ClassifierError):
  def __init__(self, path: str | Path, reason: str) -> None:
    self.path = str(path)
    self.reason = reason
    super().__init__(f"cannot read posts from {self.path}: {reason}")

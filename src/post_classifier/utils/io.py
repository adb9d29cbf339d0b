"""
utils/io.py

What this file does:
- Reads a delimited post file (header row required) into a list of row dicts.
- Every row must provide the 'tag' and 'content' columns; other columns are kept.

How it fits:
- This is the only place where the on-disk format matters.
- The model code only ever sees Mapping[str, str] posts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..model.errors import SourceUnavailableError

Post = Dict[str, str]

REQUIRED_COLUMNS = ("tag", "content")


def read_posts(path: str | Path, encoding: str = "utf-8") -> List[Post]:
  path = Path(path)
  try:
    df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding=encoding)
  except FileNotFoundError:
    raise SourceUnavailableError(path, "file not found")
  except pd.errors.EmptyDataError:
    raise SourceUnavailableError(path, "file is empty (no header row)")
  except pd.errors.ParserError as e:
    raise SourceUnavailableError(path, f"malformed rows ({e})")
  except UnicodeDecodeError as e:
    raise SourceUnavailableError(path, f"not valid {encoding} ({e.reason})")
  except LookupError:
    raise SourceUnavailableError(path, f"unknown encoding {encoding!r}")
  except OSError as e:
    raise SourceUnavailableError(path, e.strerror or str(e))

  # a header one field short of every row makes pandas use the first column as the index
  if len(df) and not isinstance(df.index, pd.RangeIndex):
    raise SourceUnavailableError(path, "rows have more fields than the header")

  missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
  if missing:
    raise SourceUnavailableError(path, f"missing column(s) {missing}. Available: {list(df.columns)}")

  # short rows come back as NaN even with keep_default_na=False
  short = df.isna().any(axis=1)
  if short.any():
    line_no = int(short.idxmax()) + 2  # +1 header, +1 for 1-based lines
    raise SourceUnavailableError(path, f"line {line_no} has fewer fields than the header")

  return df.to_dict(orient="records")


@dataclass
class PostSource:
  """Result of load_posts(): either posts or the error that prevented reading them."""

  path: str
  posts: List[Post] = field(default_factory=list)
  error: Optional[SourceUnavailableError] = None

  @property
  def ok(self) -> bool:
    return self.error is None

  def unwrap(self) -> List[Post]:
    if self.error is not None:
      raise self.error
    return self.posts


def load_posts(path: str | Path, encoding: str = "utf-8") -> PostSource:
  try:
    return PostSource(path=str(path), posts=read_posts(path, encoding=encoding))
  except SourceUnavailableError as e:
    return PostSource(path=str(path), error=e)

"""
text/tokenize.py

What this file does:
- Splits post content into its set of distinct whitespace-delimited tokens.

How it fits:
- Training counts a word at most once per post, and scoring sums over the
  query's distinct words, so both sides go through unique_words().
- Tokens are compared exactly: no lowercasing, no punctuation stripping.
"""

from __future__ import annotations

from typing import Optional, Set


def unique_words(text: Optional[str]) -> Set[str]:
  # str.split() with no separator collapses whitespace runs and drops empty segments
  return set((text or "").split())

"""
main.py

What this file does:
- Runs the post classifier CLI (train, and optionally test).

How to run:
- From project root:
  PYTHONPATH=src python main.py data/train.csv data/test.csv
or
  PYTHONPATH=src python -m post_classifier.cli.classify data/train.csv
"""

from __future__ import annotations

import sys

from post_classifier.cli.classify import main

if __name__ == "__main__":
    sys.exit(main())

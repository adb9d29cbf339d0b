from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest


def make_posts(*pairs: tuple[str, str]) -> List[Dict[str, str]]:
    return [{"tag": tag, "content": content} for tag, content in pairs]


@pytest.fixture
def five_posts() -> List[Dict[str, str]]:
    # 'meeting' is in 2 of 5 posts, both ham; 'deal' is in 2 posts, both spam
    return make_posts(
        ("ham", "meeting at noon"),
        ("ham", "meeting moved"),
        ("ham", "see you"),
        ("spam", "free deal"),
        ("spam", "deal now"),
    )


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write

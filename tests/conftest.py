from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def main_snapshot() -> Path:
    return Path(__file__).resolve().parent / "fixtures" / "site_main.json"


@pytest.fixture
def wordpress_snapshot() -> Path:
    return Path(__file__).resolve().parent / "fixtures" / "site_wordpress.json"

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure "src" is on sys.path for imports in tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def _clean_drill_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # Flags and cache sizing come from the environment; keep tests isolated from the shell.
    monkeypatch.delenv("POKERDRILL_FEATURES", raising=False)
    monkeypatch.delenv("POKERDRILL_CACHE_SIZE", raising=False)

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `typographer/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # The CLI and the server attach handlers to the root logger; keep tests isolated.
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)

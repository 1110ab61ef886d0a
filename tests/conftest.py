"""Pytest configuration for issueparser tests.

Ensures the in-repo `src` directory is on `sys.path` so the package can be
imported without an editable install, and that subprocesses started by the
CLI tests (`python -m issueparser.cli`) see it too.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

py_path = os.environ.get("PYTHONPATH", "")
parts = [p for p in py_path.split(os.pathsep) if p]
if str(SRC) not in parts:
    parts.insert(0, str(SRC))
    os.environ["PYTHONPATH"] = os.pathsep.join(parts)


SAMPLE_TEXT = """\
Fix login bug
#101
created 2024-03-01 by Carol
🐞 Bug
Done
Assigned to Dave

Add export button
#102
created 2024-03-04 by Erin
updated 2024-03-09
🔵 User Story
In Testing
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT

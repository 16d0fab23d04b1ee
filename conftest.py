"""Pytest configuration to ensure the in-repo seawater_calcs package is importable."""
from __future__ import annotations

import sys
from pathlib import Path

ROOT_PATH = Path(__file__).resolve().parent
if str(ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(ROOT_PATH))

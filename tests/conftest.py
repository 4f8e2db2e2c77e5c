"""Shared pytest setup for the mdfiletree test suite.

Tests import ``mdfiletree`` straight from the checkout, so the project
directory goes on ``sys.path`` before collection when it is not installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

CHECKOUT_DIR = str(Path(__file__).resolve().parents[1])

if CHECKOUT_DIR not in sys.path:
    sys.path.insert(0, CHECKOUT_DIR)

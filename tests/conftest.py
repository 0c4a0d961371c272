"""Pytest bootstrap for local source imports.

Running ``pytest`` without installing the project leaves the repository root
off sys.path. Make ``import lazycd`` resolve to the checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

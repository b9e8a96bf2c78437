"""
Feature flags for fnkit, read from the environment at import time.

    FNKIT_EQV_CYCLE_CHECK   "1" (default) tracks visited pairs in
                            ``equivalent`` so self-referential values
                            terminate; "0" restores unbounded recursion.
    FNKIT_LOG_LEVEL         level name for the package logger
                            (default WARNING).
"""

from __future__ import annotations

import os

# Feature flag: set FNKIT_EQV_CYCLE_CHECK=0 to disable cycle detection
FNKIT_EQV_CYCLE_CHECK = os.environ.get("FNKIT_EQV_CYCLE_CHECK", "1") == "1"

FNKIT_LOG_LEVEL = os.environ.get("FNKIT_LOG_LEVEL", "WARNING")

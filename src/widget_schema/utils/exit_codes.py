"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — no diagnostics reported
  1   Violation — at least one diagnostic reported
  2   Error — usage error, missing file, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2

"""Numeric limits and timings - no circular dependencies."""

from __future__ import annotations

TICK_INTERVAL_MS = 800

DAYS_PER_YEAR = 365.25
FULL_CIRCLE = 360.0

MAX_LOG_LINES = 2000
MAX_LOG_MESSAGE_LENGTH = 4096

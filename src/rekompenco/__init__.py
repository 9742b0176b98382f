"""
Rekompenco — a lightweight, cross-platform achievement store.

Unlocked achievements are kept in a small append-only text file in the
user's application-data directory and indexed in memory on first use.

Typical use::

    from rekompenco import Achievement, has_achievement, unlock_achievement

    if not has_achievement("first_blood"):
        unlock_achievement(
            "first_blood",
            Achievement("first_blood", "First Blood", "Kill one enemy"),
        )

Package layout (src/rekompenco/):
  core/       — achievement record, store, paths, config, logging
  cli/        — Click CLI entry point
"""

from __future__ import annotations

from rekompenco.core.achievement import Achievement
from rekompenco.core.exceptions import MalformedFileError, RecordFormatError, RekompencoError
from rekompenco.core.store import (
    AchievementStore,
    get_store,
    has_achievement,
    unlock_achievement,
)

__version__ = "0.1.0"
__all__ = [
    "Achievement",
    "AchievementStore",
    "MalformedFileError",
    "RecordFormatError",
    "RekompencoError",
    "__version__",
    "get_store",
    "has_achievement",
    "unlock_achievement",
]

"""
Append-only achievement store.

The store keeps every unlocked achievement in memory, keyed by id, and
mirrors each unlock as one appended line in its backing file.  The file is
read exactly once, on first access; after that the in-memory index is the
source of truth and the file is only ever appended to (never rewritten,
truncated or compacted).

Usage::

    store = AchievementStore(path)
    if not store.has_achievement("first_blood"):
        store.unlock("first_blood", Achievement("first_blood", "First Blood"))

Most callers use the process-wide default store instead::

    from rekompenco import has_achievement, unlock_achievement

Thread-safe within one process (one lock per store).  Not safe for
concurrent writers in different processes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from rekompenco.core.achievement import Achievement, is_valid_data_type
from rekompenco.core.constants import FIELD_DELIMITER, MAX_ENTRY_BYTES

logger = logging.getLogger(__name__)


class AchievementStore:
    """
    File-backed set of unlocked achievements.

    Lifecycle::

        store = AchievementStore(path)   # nothing touched on disk yet
        store.has_achievement("x")       # first access loads (or creates) the file
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._index: dict[str, Achievement] = {}
        self._loaded = False
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        """True once the backing file has been read (or created)."""
        return self._loaded

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read (or create) the backing file if that has not happened yet."""
        with self._lock:
            if self._loaded:
                return
            self._index = self._load()
            self._loaded = True

    def _load(self) -> dict[str, Achievement]:
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
            logger.info("Created achievement file %s", self._path)
            return {}

        index: dict[str, Achievement] = {}
        # Undecodable bytes become U+FFFD rather than failing the whole file.
        with self._path.open("r", encoding="utf-8-sig", errors="replace") as fh:
            for line_number, raw in enumerate(fh):
                achievement = Achievement.from_saved_format(
                    raw.rstrip("\n"), self._path, line_number
                )
                if achievement.id in index:
                    logger.warning(
                        "%s: line %d repeats achievement id %r; keeping the later entry",
                        self._path,
                        line_number,
                        achievement.id,
                    )
                index[achievement.id] = achievement

        logger.debug("Loaded %d achievement(s) from %s", len(index), self._path)
        return index

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_achievement(self, achievement_id: str) -> bool:
        """Return True if ``achievement_id`` has been unlocked."""
        self.load()
        with self._lock:
            return achievement_id in self._index

    def get(self, achievement_id: str) -> Achievement | None:
        self.load()
        with self._lock:
            return self._index.get(achievement_id)

    @property
    def achievements(self) -> Mapping[str, Achievement]:
        """Read-only snapshot of the unlocked achievements, keyed by id."""
        self.load()
        with self._lock:
            return MappingProxyType(dict(self._index))

    def __contains__(self, achievement_id: object) -> bool:
        return isinstance(achievement_id, str) and self.has_achievement(achievement_id)

    def __len__(self) -> int:
        self.load()
        with self._lock:
            return len(self._index)

    def __iter__(self) -> Iterator[Achievement]:
        return iter(self.achievements.values())

    # ------------------------------------------------------------------
    # Unlocking
    # ------------------------------------------------------------------

    def unlock(self, achievement_id: str, achievement: Achievement) -> bool:
        """
        Unlock ``achievement`` under ``achievement_id`` and append it to the file.

        Returns False, writing nothing, when the id is already unlocked or the
        achievement cannot be saved (line over 512 bytes, a field holding the
        delimiter, a line break or text that is not UTF-8 encodable, or a data
        type outside 0-65535).  I/O errors propagate and leave the index
        unchanged.
        """
        self.load()
        with self._lock:
            if achievement_id in self._index:
                return False

            reason = _unsavable_reason(achievement)
            if reason:
                logger.warning("Refusing to unlock %r: %s", achievement_id, reason)
                return False

            if achievement.id != achievement_id:
                logger.warning(
                    "Unlocking %r with an achievement whose id is %r",
                    achievement_id,
                    achievement.id,
                )

            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(achievement.to_saved_format() + "\n")

            self._index[achievement_id] = achievement
            logger.info("Unlocked achievement %r", achievement_id)
            return True


def _unsavable_reason(achievement: Achievement) -> str:
    """Return why ``achievement`` cannot be written as one readable line, or ''."""
    if not is_valid_data_type(achievement.data_type):
        return f"data type {achievement.data_type!r} is not in 0-65535"
    for name in ("id", "name", "description", "data"):
        value = getattr(achievement, name)
        if FIELD_DELIMITER in value:
            return f"{name} contains {FIELD_DELIMITER!r}"
        if "\n" in value or "\r" in value:
            return f"{name} contains a line break"
    try:
        size = achievement.encoded_size()
    except UnicodeEncodeError:
        return "a field is not UTF-8 encodable"
    if size > MAX_ENTRY_BYTES:
        return f"saved line is {size} bytes (limit {MAX_ENTRY_BYTES})"
    return ""


# ---------------------------------------------------------------------------
# Process-wide default store
# ---------------------------------------------------------------------------

_default_store: AchievementStore | None = None
_default_lock = threading.Lock()


def get_store() -> AchievementStore:
    """
    Return the process-wide store, building it on first call.

    The file location comes from ``load_config().store_path``.  The file
    itself is not read until the store is first queried.
    """
    global _default_store
    with _default_lock:
        if _default_store is None:
            from rekompenco.core.config import load_config

            _default_store = AchievementStore(load_config().store_path)
        return _default_store


def reset_default_store() -> None:
    """Forget the default store so the next ``get_store()`` rebuilds it."""
    global _default_store
    with _default_lock:
        _default_store = None


def has_achievement(achievement_id: str) -> bool:
    """Return True if ``achievement_id`` is unlocked in the default store."""
    return get_store().has_achievement(achievement_id)


def unlock_achievement(achievement_id: str, achievement: Achievement) -> bool:
    """Unlock ``achievement`` in the default store.  See ``AchievementStore.unlock``."""
    return get_store().unlock(achievement_id, achievement)

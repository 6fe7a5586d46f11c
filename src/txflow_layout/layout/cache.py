"""Per-mode LRU cache of computed layout positions.

Entries are keyed by layout mode and graph fingerprint, so switching back
to a layout already computed for the same topology is instant. Each mode
keeps its own recency order and capacity; filling one mode never evicts
another mode's entries.

The cache is a plain object: create one at startup and hand it to
whatever runs layouts. It is not thread-safe; guard it with a lock if
several threads share it.
"""

from __future__ import annotations

__all__ = ["LayoutPositionCache"]

import logging
from collections import OrderedDict
from collections.abc import Mapping

from txflow_layout.layout.constants import MAX_ENTRIES_PER_MODE
from txflow_layout.parser.model import Position

logger = logging.getLogger(__name__)


def _copy_positions(positions: Mapping[str, Position]) -> dict[str, Position]:
    return {nid: pos.copy() for nid, pos in positions.items()}


class LayoutPositionCache:
    """Bounded store of position maps, LRU per layout mode.

    Args:
        max_entries_per_mode: Capacity of each mode's LRU list.

    Example:
        >>> cache = LayoutPositionCache()
        >>> cache.save("fcose", "0123456789abcdef", {"a": Position(1.0, 2.0)})
        >>> cache.get("fcose", "0123456789abcdef")
        {'a': Position(x=1.0, y=2.0)}
    """

    def __init__(self, max_entries_per_mode: int = MAX_ENTRIES_PER_MODE) -> None:
        if max_entries_per_mode < 1:
            raise ValueError(
                f"max_entries_per_mode must be at least 1, got {max_entries_per_mode}"
            )
        self._max_entries = max_entries_per_mode
        self._modes: dict[str, OrderedDict[str, dict[str, Position]]] = {}

    @property
    def max_entries_per_mode(self) -> int:
        return self._max_entries

    def save(self, mode: str, fingerprint: str, positions: Mapping[str, Position]) -> None:
        """Store a copy of ``positions``. Evicts the mode's oldest entry when full."""
        entries = self._modes.setdefault(mode, OrderedDict())

        # Re-saving counts as the most recent use.
        entries.pop(fingerprint, None)

        if len(entries) >= self._max_entries:
            evicted, _ = entries.popitem(last=False)
            logger.debug("Evicted layout %s from mode %r", evicted, mode)

        entries[fingerprint] = _copy_positions(positions)

    def get(self, mode: str, fingerprint: str) -> dict[str, Position] | None:
        """Return a copy of the cached positions, or None on a miss."""
        entries = self._modes.get(mode)
        if entries is None or fingerprint not in entries:
            logger.debug("Layout cache miss for %s in mode %r", fingerprint, mode)
            return None
        entries.move_to_end(fingerprint)
        return _copy_positions(entries[fingerprint])

    def clear(self) -> None:
        """Drop every cached layout in every mode."""
        self._modes.clear()

    def fingerprints(self, mode: str) -> list[str]:
        """Fingerprints cached for ``mode``, least recently used first."""
        return list(self._modes.get(mode, ()))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._modes.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        mode, fingerprint = key
        return fingerprint in self._modes.get(mode, {})

"""Layout constants used across layout modules.

Centralizes the tuning numbers of biflow.py, collision.py, timeline.py,
strategy.py and cache.py.
"""

# ---------------------------------------------------------------------------
# BiFlow tiers
# ---------------------------------------------------------------------------
TIER_SPACING: float = 360.0
"""Distance between adjacent tiers along the flow axis."""

NODE_SPACING: float = 120.0
"""Distance between neighbouring nodes within a tier."""

PARKING_OFFSET: float = 1200.0
"""Y coordinate of the strip that holds nodes unreachable from the focus."""

# ---------------------------------------------------------------------------
# Collision resolution
# ---------------------------------------------------------------------------
MIN_NODE_DISTANCE: float = 95.0
"""Minimum centre-to-centre distance enforced by the push-apart passes."""

COLLISION_PASSES: int = 4
"""Number of push-apart passes run after tier placement."""

DAMPING_DECAY: float = 0.2
"""Damping lost per pass: pass ``i`` moves points by ``1 - i * DAMPING_DECAY``."""

# ---------------------------------------------------------------------------
# Transaction timeline
# ---------------------------------------------------------------------------
TIMELINE_COL_GAP: float = 220.0
"""Horizontal distance between timeline columns."""

TIMELINE_ROW_GAP: float = 340.0
"""Vertical distance between timeline rows."""

TIMELINE_LANE_OFFSET: float = 120.0
"""Offset of the incoming (up) and outgoing (down) lane from a row's centre."""

TIMELINE_PER_ROW_FACTOR: float = 1.6
"""Row width grows with ``sqrt(n) * factor``."""

TIMELINE_MIN_PER_ROW: int = 8
TIMELINE_MAX_PER_ROW: int = 24

# ---------------------------------------------------------------------------
# Presets and cache
# ---------------------------------------------------------------------------
TINY_PRESET_OFFSET: float = 210.0
"""Half the vertical distance between the two nodes of a tiny preset."""

MAX_ENTRIES_PER_MODE: int = 10
"""Default number of cached layouts kept per layout mode."""

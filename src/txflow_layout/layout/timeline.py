"""Two-lane chronological grid for one address's transaction history.

Transactions fill rows left to right in the order given. Within each row
the incoming lane sits above the outgoing lane. The result is centred on
the origin.
"""

from __future__ import annotations

__all__ = ["compute_tx_timeline_positions", "timeline_row_width"]

import math
from collections.abc import Sequence

from txflow_layout.layout.constants import (
    TIMELINE_COL_GAP,
    TIMELINE_LANE_OFFSET,
    TIMELINE_MAX_PER_ROW,
    TIMELINE_MIN_PER_ROW,
    TIMELINE_PER_ROW_FACTOR,
    TIMELINE_ROW_GAP,
)
from txflow_layout.parser.model import Position, Transaction


def timeline_row_width(count: int) -> int:
    """Number of transactions per row for a history of ``count`` entries."""
    # Round half up, not to even.
    per_row = math.floor(math.sqrt(count) * TIMELINE_PER_ROW_FACTOR + 0.5)
    return min(TIMELINE_MAX_PER_ROW, max(TIMELINE_MIN_PER_ROW, per_row))


def compute_tx_timeline_positions(
    transactions: Sequence[Transaction],
    focus_address: str,
) -> dict[str, Position]:
    """Place each transaction hash on the timeline grid."""
    positions: dict[str, Position] = {}
    n = len(transactions)
    if n == 0:
        return positions

    per_row = timeline_row_width(n)
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for i, tx in enumerate(transactions):
        row, col = divmod(i, per_row)
        incoming = tx.to_address == focus_address
        x = col * TIMELINE_COL_GAP
        y = row * TIMELINE_ROW_GAP + (-TIMELINE_LANE_OFFSET if incoming else TIMELINE_LANE_OFFSET)
        positions[tx.hash] = Position(x, y)

        min_x, max_x = min(min_x, x), max(max_x, x)
        min_y, max_y = min(min_y, y), max(max_y, y)

    # Bounds cover every slot, including ones a repeated hash overwrote.
    mid_x = (min_x + max_x) / 2
    mid_y = (min_y + max_y) / 2
    for pos in positions.values():
        pos.x -= mid_x
        pos.y -= mid_y

    return positions

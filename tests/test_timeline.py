"""Tests for the transaction timeline layout."""

import pytest

from txflow_layout.layout.timeline import compute_tx_timeline_positions, timeline_row_width
from txflow_layout.parser.model import Transaction

FOCUS = "FOCUS"


def _outgoing(count: int) -> list[Transaction]:
    return [Transaction(f"tx{i}", FOCUS, f"peer{i}") for i in range(count)]


def test_empty_history():
    assert compute_tx_timeline_positions([], FOCUS) == {}


def test_incoming_lane_above_outgoing():
    txs = [
        Transaction("in", "peer", FOCUS),
        Transaction("out", FOCUS, "peer"),
    ]
    pos = compute_tx_timeline_positions(txs, FOCUS)
    assert pos["in"].y < pos["out"].y


@pytest.mark.parametrize(
    "count, expected",
    [(1, 8), (9, 8), (25, 8), (36, 10), (100, 16), (225, 24), (1000, 24)],
)
def test_row_width_is_clamped(count, expected):
    assert timeline_row_width(count) == expected


def test_next_row_is_one_row_gap_down():
    pos = compute_tx_timeline_positions(_outgoing(9), FOCUS)
    assert pos["tx8"].x == pos["tx0"].x
    assert pos["tx8"].y - pos["tx0"].y == 340


def test_columns_are_col_gap_apart():
    pos = compute_tx_timeline_positions(_outgoing(3), FOCUS)
    assert pos["tx1"].x - pos["tx0"].x == 220
    assert pos["tx2"].x - pos["tx1"].x == 220


@pytest.mark.parametrize("count", [1, 2, 9, 17, 50])
def test_result_is_centred_on_origin(count):
    txs = [
        Transaction(f"tx{i}", FOCUS if i % 3 else "peer", "peer" if i % 3 else FOCUS)
        for i in range(count)
    ]
    pos = compute_tx_timeline_positions(txs, FOCUS)
    xs = [p.x for p in pos.values()]
    ys = [p.y for p in pos.values()]
    assert (min(xs) + max(xs)) / 2 == 0
    assert (min(ys) + max(ys)) / 2 == 0


def test_single_transaction_at_origin():
    pos = compute_tx_timeline_positions(_outgoing(1), FOCUS)
    assert (pos["tx0"].x, pos["tx0"].y) == (0, 0)

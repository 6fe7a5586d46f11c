"""Tests for spatial-hash collision resolution."""

import math

from txflow_layout.layout.collision import push_apart, resolve_collisions
from txflow_layout.parser.model import Position


def _dist(a: Position, b: Position) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def test_far_apart_points_untouched():
    positions = {"a": Position(0.0, 0.0), "b": Position(500.0, 0.0)}
    push_apart(positions, 95.0)
    assert positions["a"] == Position(0.0, 0.0)
    assert positions["b"] == Position(500.0, 0.0)


def test_overlapping_pair_reaches_min_distance_at_full_damping():
    positions = {"a": Position(0.0, 0.0), "b": Position(30.0, 40.0)}
    push_apart(positions, 100.0, 1.0)
    assert math.isclose(_dist(positions["a"], positions["b"]), 100.0)
    # Symmetric push along the separating vector
    assert math.isclose(positions["a"].x + positions["b"].x, 30.0)
    assert math.isclose(positions["a"].y + positions["b"].y, 40.0)


def test_damping_scales_the_push():
    positions = {"a": Position(0.0, 0.0), "b": Position(50.0, 0.0)}
    push_apart(positions, 100.0, 0.5)
    # Each moves (100 - 50) / 2 * 0.5 = 12.5
    assert math.isclose(positions["a"].x, -12.5)
    assert math.isclose(positions["b"].x, 62.5)


def test_coincident_points_split_along_x():
    positions = {"a": Position(10.0, 10.0), "b": Position(10.0, 10.0)}
    push_apart(positions, 100.0, 1.0)
    assert positions["a"] == Position(-40.0, 10.0)
    assert positions["b"] == Position(60.0, 10.0)


def test_single_point_is_noop():
    positions = {"a": Position(1.0, 2.0)}
    resolve_collisions(positions, 95.0, 4)
    assert positions["a"] == Position(1.0, 2.0)


def test_resolve_is_deterministic():
    def make():
        return {
            f"n{i}": Position(float(i % 3) * 20.0, float(i // 3) * 20.0)
            for i in range(9)
        }

    first, second = make(), make()
    resolve_collisions(first, 95.0, 4)
    resolve_collisions(second, 95.0, 4)
    assert first == second


def test_resolve_spreads_a_cluster():
    positions = {
        f"n{i}": Position(float(i % 3) * 10.0, float(i // 3) * 10.0)
        for i in range(9)
    }

    def mean_spacing() -> float:
        pts = list(positions.values())
        pairs = [(a, b) for i, a in enumerate(pts) for b in pts[i + 1 :]]
        return sum(_dist(a, b) for a, b in pairs) / len(pairs)

    before = mean_spacing()
    resolve_collisions(positions, 95.0, 4)
    assert mean_spacing() > before


def test_zero_passes_leaves_positions():
    positions = {"a": Position(0.0, 0.0), "b": Position(1.0, 0.0)}
    resolve_collisions(positions, 95.0, 0)
    assert positions["b"] == Position(1.0, 0.0)


def test_non_positive_min_distance_is_noop():
    for min_distance in (0.0, -10.0):
        positions = {"a": Position(0.0, 0.0), "b": Position(0.0, 0.0)}
        resolve_collisions(positions, min_distance, 4)
        assert positions == {"a": Position(0.0, 0.0), "b": Position(0.0, 0.0)}


def test_pair_order_follows_utf16_code_units():
    # U+FF21 sorts before U+1F600 by code point but after it in UTF-16.
    fullwidth, emoji = "Ａ", "\U0001F600"
    positions = {emoji: Position(0.0, 0.0), fullwidth: Position(0.0, 0.0)}
    push_apart(positions, 100.0, 1.0)
    # The lower id in UTF-16 order is pushed towards -x.
    assert positions[emoji].x == -50.0
    assert positions[fullwidth].x == 50.0

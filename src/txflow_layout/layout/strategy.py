"""Decision rules for which layout path a view should take."""

from __future__ import annotations

__all__ = [
    "select_layout_strategy",
    "tiny_path_positions",
    "two_node_preset_positions",
    "use_two_node_preset",
]

from collections.abc import Sequence

from txflow_layout.layout.constants import TINY_PRESET_OFFSET
from txflow_layout.parser.model import LayoutStrategy, Position


def select_layout_strategy(
    path_view_active: bool,
    node_count: int,
    path_node_order_length: int,
    path_count: int,
    layout_mode: str,
) -> LayoutStrategy:
    """Pick the layout strategy for the current view.

    A single one-hop path gets the fixed two-node preset. Several combined
    paths go through the general layout even when they reduce to two
    nodes, so overlapping paths still compose.
    """
    if not path_view_active:
        return LayoutStrategy.MODE_LAYOUT

    if path_count <= 1 and node_count == 2 and path_node_order_length >= 2:
        return LayoutStrategy.TINY

    if layout_mode == "fcose":
        return LayoutStrategy.PATH_FCOSE

    return LayoutStrategy.MODE_LAYOUT


def use_two_node_preset(path_view_active: bool, node_count: int, edge_count: int) -> bool:
    """Whether the first render of a graph can skip the force simulation."""
    return not path_view_active and node_count == 2 and edge_count == 1


def tiny_path_positions(path_node_order: Sequence[str]) -> dict[str, Position]:
    """Vertical preset for a one-hop path: start above, end below."""
    if len(path_node_order) < 2:
        return {}
    return {
        path_node_order[0]: Position(0.0, -TINY_PRESET_OFFSET),
        path_node_order[1]: Position(0.0, TINY_PRESET_OFFSET),
    }


def two_node_preset_positions(node_ids: Sequence[str]) -> dict[str, Position]:
    """Same vertical preset, for the initial render of a two-node graph."""
    return tiny_path_positions(node_ids)

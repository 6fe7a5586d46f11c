"""Tests for layout strategy selection and presets."""

from txflow_layout.layout.strategy import (
    select_layout_strategy,
    tiny_path_positions,
    two_node_preset_positions,
    use_two_node_preset,
)
from txflow_layout.parser.model import LayoutStrategy, Position, ViewContext


def test_no_path_view_uses_mode_layout():
    assert select_layout_strategy(False, 2, 2, 1, "fcose") is LayoutStrategy.MODE_LAYOUT


def test_single_one_hop_path_is_tiny():
    assert select_layout_strategy(True, 2, 2, 1, "fcose") is LayoutStrategy.TINY
    assert select_layout_strategy(True, 2, 2, 0, "dagre-lr") is LayoutStrategy.TINY


def test_combined_paths_skip_tiny_preset():
    assert select_layout_strategy(True, 2, 2, 2, "fcose") is LayoutStrategy.PATH_FCOSE
    assert select_layout_strategy(True, 2, 2, 2, "cola") is LayoutStrategy.MODE_LAYOUT


def test_short_path_order_skips_tiny_preset():
    assert select_layout_strategy(True, 2, 1, 1, "fcose") is LayoutStrategy.PATH_FCOSE


def test_larger_path_views():
    assert select_layout_strategy(True, 5, 5, 1, "fcose") is LayoutStrategy.PATH_FCOSE
    assert select_layout_strategy(True, 5, 5, 1, "elk-stress") is LayoutStrategy.MODE_LAYOUT


def test_strategy_values():
    assert LayoutStrategy.TINY.value == "tiny"
    assert LayoutStrategy.PATH_FCOSE.value == "path-fcose"
    assert LayoutStrategy.MODE_LAYOUT.value == "mode-layout"


def test_view_context_delegates():
    view = ViewContext(
        path_view_active=True,
        node_count=2,
        path_node_order_length=2,
        path_count=1,
        layout_mode="fcose",
    )
    assert view.select_strategy() is LayoutStrategy.TINY


def test_two_node_preset_rule():
    assert use_two_node_preset(False, 2, 1)
    assert not use_two_node_preset(True, 2, 1)
    assert not use_two_node_preset(False, 3, 1)
    assert not use_two_node_preset(False, 2, 2)
    assert not use_two_node_preset(False, 2, 0)


def test_tiny_positions_are_vertical():
    pos = tiny_path_positions(["from", "to", "ignored"])
    assert pos == {"from": Position(0.0, -210.0), "to": Position(0.0, 210.0)}


def test_tiny_positions_need_two_nodes():
    assert tiny_path_positions(["only"]) == {}


def test_two_node_preset_matches_tiny():
    assert two_node_preset_positions(["a", "b"]) == tiny_path_positions(["a", "b"])

"""Deterministic layout positioning for address/transaction graphs."""

from txflow_layout.layout.biflow import (
    BiFlowConfig,
    compute_biflow_positions,
    orientation_for_mode,
    pick_focus,
)
from txflow_layout.layout.cache import LayoutPositionCache
from txflow_layout.layout.collision import push_apart, resolve_collisions
from txflow_layout.layout.engine import LayoutResult, biflow_cache_key, plan_layout
from txflow_layout.layout.fingerprint import (
    compute_graph_hash,
    fingerprint_graph,
    utf16_sort_key,
)
from txflow_layout.layout.strategy import (
    select_layout_strategy,
    tiny_path_positions,
    two_node_preset_positions,
    use_two_node_preset,
)
from txflow_layout.layout.timeline import compute_tx_timeline_positions

__all__ = [
    "BiFlowConfig",
    "LayoutPositionCache",
    "LayoutResult",
    "biflow_cache_key",
    "compute_biflow_positions",
    "compute_graph_hash",
    "compute_tx_timeline_positions",
    "fingerprint_graph",
    "orientation_for_mode",
    "pick_focus",
    "plan_layout",
    "push_apart",
    "resolve_collisions",
    "select_layout_strategy",
    "tiny_path_positions",
    "two_node_preset_positions",
    "use_two_node_preset",
    "utf16_sort_key",
]

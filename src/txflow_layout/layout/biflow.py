"""Bidirectional tiered flow layout around a focus address.

Nodes reachable by following outgoing edges from the focus go to positive
tiers, nodes reachable against edge direction go to negative tiers, and
the focus sits at tier 0 in the origin. Within a tier, heavier nodes
(by log-compressed transaction count) come first. Nodes unreachable in
either direction are parked in a separate strip.
"""

from __future__ import annotations

__all__ = [
    "BiFlowConfig",
    "compute_biflow_positions",
    "orientation_for_mode",
    "pick_focus",
]

import logging
import math
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

import networkx as nx

from txflow_layout.layout.collision import resolve_collisions
from txflow_layout.layout.constants import (
    COLLISION_PASSES,
    MIN_NODE_DISTANCE,
    NODE_SPACING,
    PARKING_OFFSET,
    TIER_SPACING,
)
from txflow_layout.layout.fingerprint import utf16_sort_key
from txflow_layout.parser.model import GraphEdge, Orientation, Position

logger = logging.getLogger(__name__)

_MODE_ORIENTATION = {
    "biflow-lr": Orientation.LR,
    "biflow-tb": Orientation.TB,
}


@dataclass
class BiFlowConfig:
    """Tuning knobs for the BiFlow layout. Any subset may be overridden."""

    tier_spacing: float = TIER_SPACING
    node_spacing: float = NODE_SPACING
    min_node_distance: float = MIN_NODE_DISTANCE
    collision_passes: int = COLLISION_PASSES
    parking_offset: float = PARKING_OFFSET


def orientation_for_mode(layout_mode: str) -> Orientation | None:
    """Map a ``biflow-*`` layout mode to its orientation, None for other modes."""
    return _MODE_ORIENTATION.get(layout_mode)


def pick_focus(
    nodes: Sequence[str],
    edges: Sequence[GraphEdge],
    preferred: Sequence[str | None] = (),
) -> str | None:
    """Choose the node a BiFlow layout should radiate from.

    The first ``preferred`` candidate present in the graph wins (callers
    pass the last expanded node, then the selected one). Otherwise the hub
    with the largest summed incident weight is used, falling back to the
    first node.
    """
    if not nodes:
        return None
    node_ids = set(nodes)
    for candidate in preferred:
        if candidate is not None and candidate in node_ids:
            return candidate

    incident: dict[str, float] = {}
    for edge in edges:
        w = edge.effective_weight
        incident[edge.source] = incident.get(edge.source, 0.0) + w
        incident[edge.target] = incident.get(edge.target, 0.0) + w

    best_id = nodes[0]
    best_score = -math.inf
    for nid, score in incident.items():
        if score > best_score:
            best_score = score
            best_id = nid
    return best_id


def compute_biflow_positions(
    nodes: Sequence[str],
    edges: Sequence[GraphEdge],
    focus_id: str | None,
    orientation: Orientation = Orientation.LR,
    config: BiFlowConfig | None = None,
) -> dict[str, Position]:
    """Compute tiered positions radiating from ``focus_id``.

    Args:
        nodes: Node ids. Duplicates are ignored; order only matters for
            the focus fallback.
        edges: Directed edges. Edges touching an unknown node are dropped.
        focus_id: Anchor node. Falls back to the first node if absent.
        orientation: ``LR`` lays tiers out along x, ``TB`` along y.
        config: Spacing overrides.

    Returns a fresh dict mapping node id -> Position. The focus ends up at
    the origin unless collision passes have to move it.
    """
    cfg = config or BiFlowConfig()
    positions: dict[str, Position] = {}
    if not nodes:
        return positions

    node_ids = list(dict.fromkeys(nodes))
    if focus_id in node_ids:
        focus = focus_id
    else:
        focus = nodes[0]
        logger.debug("Focus %r not in graph, falling back to %r", focus_id, focus)

    G = nx.DiGraph()
    G.add_nodes_from(node_ids)
    weights: dict[str, float] = {nid: 0.0 for nid in node_ids}
    dropped = 0
    for edge in edges:
        if edge.source not in weights or edge.target not in weights:
            dropped += 1
            continue
        G.add_edge(edge.source, edge.target)
        # log10 compresses heavy-tailed transaction counts.
        w = math.log10(1 + edge.effective_weight)
        weights[edge.source] += w
        weights[edge.target] += w
    if dropped:
        logger.debug("Dropped %d edges with endpoints outside the graph", dropped)

    out_depth = nx.single_source_shortest_path_length(G, focus)
    in_depth = nx.single_source_shortest_path_length(G.reverse(copy=False), focus)

    tiers: dict[int, list[str]] = defaultdict(list)
    disconnected: list[str] = []
    for nid in node_ids:
        if nid == focus:
            tiers[0].append(nid)
            continue
        out = out_depth.get(nid)
        inn = in_depth.get(nid)
        # Equal depth on both sides goes to the outgoing side.
        if out is not None and out > 0 and (inn is None or out <= inn):
            tiers[out].append(nid)
        elif inn is not None and inn > 0 and (out is None or inn < out):
            tiers[-inn].append(nid)
        else:
            disconnected.append(nid)

    def sort_tier(ids: list[str]) -> list[str]:
        return sorted(ids, key=lambda nid: (-weights[nid], utf16_sort_key(nid)))

    for tier in sorted(tiers):
        ids = sort_tier(tiers[tier])
        mid = (len(ids) - 1) / 2
        primary = tier * cfg.tier_spacing
        for i, nid in enumerate(ids):
            secondary = (i - mid) * cfg.node_spacing
            if orientation is Orientation.LR:
                positions[nid] = Position(primary, secondary)
            else:
                positions[nid] = Position(secondary, primary)

    # The parking strip is always below the graph, whatever the orientation.
    if disconnected:
        ids = sort_tier(disconnected)
        mid = (len(ids) - 1) / 2
        for i, nid in enumerate(ids):
            positions[nid] = Position((i - mid) * cfg.node_spacing, cfg.parking_offset)

    resolve_collisions(positions, cfg.min_node_distance, cfg.collision_passes)
    return positions

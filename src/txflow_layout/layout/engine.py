"""Layout coordinator: strategy selection, cache lookup and local layouts.

``plan_layout`` is what a canvas calls on every graph change. It decides
which layout path applies, serves cached positions where possible, and
computes the layouts this package owns (BiFlow and the two-node presets).
For modes backed by an external engine it returns no positions and the
caller runs that engine itself, then stores the result with
``LayoutPositionCache.save``.
"""

from __future__ import annotations

__all__ = ["LayoutResult", "biflow_cache_key", "plan_layout"]

import logging
from dataclasses import astuple, dataclass

from txflow_layout.layout.biflow import (
    BiFlowConfig,
    compute_biflow_positions,
    orientation_for_mode,
    pick_focus,
)
from txflow_layout.layout.cache import LayoutPositionCache
from txflow_layout.layout.fingerprint import fingerprint_graph
from txflow_layout.layout.strategy import (
    tiny_path_positions,
    two_node_preset_positions,
    use_two_node_preset,
)
from txflow_layout.parser.model import (
    GraphSnapshot,
    LayoutStrategy,
    Position,
    ViewContext,
)

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Outcome of planning a layout.

    ``positions`` is None when an external engine has to run.
    ``cache_key`` is the key the positions are stored under: the topology
    fingerprint, extended with focus and tuning for BiFlow modes.
    """

    strategy: LayoutStrategy
    positions: dict[str, Position] | None
    fingerprint: str
    from_cache: bool = False
    cache_key: str = ""


def biflow_cache_key(fingerprint: str, focus: str | None, config: BiFlowConfig) -> str:
    """Cache key for a BiFlow layout, which depends on more than topology."""
    tuning = ",".join(f"{value:g}" for value in astuple(config))
    return f"{fingerprint}|{focus}|{tuning}"


def plan_layout(
    snapshot: GraphSnapshot,
    layout_mode: str = "fcose",
    path_view_active: bool = False,
    path_count: int = 0,
    cache: LayoutPositionCache | None = None,
    config: BiFlowConfig | None = None,
    initial_render: bool = False,
    layout_mode_changed: bool = False,
) -> LayoutResult:
    """Decide how to lay out ``snapshot`` and compute what can be computed here.

    Cached positions are only served when ``layout_mode_changed`` is set,
    i.e. when the user switches back to a mode already computed for this
    graph. Fresh results are stored whenever a cache is given.
    """
    view = ViewContext(
        path_view_active=path_view_active,
        node_count=len(snapshot.nodes),
        path_node_order_length=len(snapshot.path_node_order),
        path_count=path_count,
        layout_mode=layout_mode,
    )
    strategy = view.select_strategy()
    fingerprint = fingerprint_graph(snapshot.nodes, snapshot.edges)

    if strategy is LayoutStrategy.TINY:
        positions = tiny_path_positions(snapshot.path_node_order)
        return LayoutResult(strategy, positions, fingerprint, cache_key=fingerprint)
    if strategy is LayoutStrategy.PATH_FCOSE:
        return LayoutResult(strategy, None, fingerprint, cache_key=fingerprint)

    orientation = orientation_for_mode(layout_mode)
    two_node = initial_render and use_two_node_preset(
        path_view_active, len(snapshot.nodes), len(snapshot.edges)
    )
    focus: str | None = None
    cache_key = fingerprint
    if orientation is not None and not two_node:
        focus = pick_focus(
            snapshot.nodes,
            snapshot.edges,
            preferred=(snapshot.focus, snapshot.last_expanded, snapshot.selected),
        )
        cache_key = biflow_cache_key(fingerprint, focus, config or BiFlowConfig())

    # Path views are never served from or stored into the cache.
    use_cache = cache is not None and not path_view_active
    if use_cache and layout_mode_changed:
        cached = cache.get(layout_mode, cache_key)
        if cached is not None:
            logger.debug("Layout cache hit for %s in mode %r", cache_key, layout_mode)
            return LayoutResult(strategy, cached, fingerprint, True, cache_key)

    positions: dict[str, Position] | None = None
    if two_node:
        positions = two_node_preset_positions(snapshot.nodes)
    elif orientation is not None:
        positions = compute_biflow_positions(
            snapshot.nodes, snapshot.edges, focus, orientation, config
        )

    if positions is not None and use_cache:
        cache.save(layout_mode, cache_key, positions)

    return LayoutResult(strategy, positions, fingerprint, cache_key=cache_key)

"""Data model for address/transaction graph snapshots."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class Orientation(Enum):
    """Main flow axis of a tiered layout."""

    LR = "LR"
    TB = "TB"


class LayoutStrategy(Enum):
    """Which layout path the caller should run for a view."""

    TINY = "tiny"
    PATH_FCOSE = "path-fcose"
    MODE_LAYOUT = "mode-layout"


@dataclass
class Position:
    """A 2D coordinate. Mutable: collision passes move points in place."""

    x: float
    y: float

    def copy(self) -> Position:
        return Position(self.x, self.y)


@dataclass
class GraphEdge:
    """A directed address-to-address edge.

    ``weight`` is the raw transaction count as received; it may be missing
    or garbage, see ``effective_weight``.
    """

    source: str
    target: str
    weight: object = None

    @property
    def effective_weight(self) -> float:
        """Weight to use in layout math: anything but a positive finite number is 1."""
        w = self.weight
        if isinstance(w, bool) or not isinstance(w, (int, float)):
            return 1.0
        if not math.isfinite(w) or w <= 0:
            return 1.0
        return float(w)

    @property
    def key(self) -> str:
        """Topology key used when fingerprinting a graph."""
        return f"{self.source}|{self.target}"


@dataclass
class Transaction:
    """A single transaction in an address's history."""

    hash: str
    from_address: str
    to_address: str


@dataclass
class ViewContext:
    """Ephemeral description of what the canvas is currently showing."""

    path_view_active: bool = False
    node_count: int = 0
    path_node_order_length: int = 0
    path_count: int = 0
    layout_mode: str = "fcose"

    def select_strategy(self) -> LayoutStrategy:
        from txflow_layout.layout.strategy import select_layout_strategy

        return select_layout_strategy(
            self.path_view_active,
            self.node_count,
            self.path_node_order_length,
            self.path_count,
            self.layout_mode,
        )


@dataclass
class GraphSnapshot:
    """Nodes, edges and view hints as handed over by the caller."""

    nodes: list[str] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    focus: str | None = None
    selected: str | None = None
    last_expanded: str | None = None
    path_node_order: list[str] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)

"""Snapshot parsing and the graph data model."""

from txflow_layout.parser.model import (
    GraphEdge,
    GraphSnapshot,
    LayoutStrategy,
    Orientation,
    Position,
    Transaction,
    ViewContext,
)
from txflow_layout.parser.snapshot import parse_snapshot, snapshot_from_dict

__all__ = [
    "GraphEdge",
    "GraphSnapshot",
    "LayoutStrategy",
    "Orientation",
    "Position",
    "Transaction",
    "ViewContext",
    "parse_snapshot",
    "snapshot_from_dict",
]

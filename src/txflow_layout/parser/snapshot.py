"""Parser for JSON graph snapshots.

A snapshot is the document the explorer hands to the layout engine:

    {
      "nodes": ["NQ01", {"id": "NQ02"}],
      "edges": [{"source": "NQ01", "target": "NQ02", "txCount": 3}],
      "focus": "NQ01",
      "pathNodeOrder": ["NQ01", "NQ02"],
      "transactions": [{"hash": "ab12", "from": "NQ01", "to": "NQ02"}]
    }

Only ``nodes`` is required. Edge weights are passed through untouched;
sanitizing them is the layout's job.
"""

from __future__ import annotations

import json

from txflow_layout.parser.model import GraphEdge, GraphSnapshot, Transaction


def parse_snapshot(text: str) -> GraphSnapshot:
    """Parse a JSON snapshot document."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Snapshot is not valid JSON: {e}") from e
    return snapshot_from_dict(doc)


def snapshot_from_dict(doc: object) -> GraphSnapshot:
    """Build a snapshot from an already-decoded JSON object."""
    if not isinstance(doc, dict):
        raise ValueError("Snapshot must be a JSON object")
    if "nodes" not in doc and "transactions" not in doc:
        raise ValueError(
            "Snapshot has neither 'nodes' nor 'transactions'. "
            "Expected at least one of them at the top level."
        )

    snapshot = GraphSnapshot()
    for raw in _list_field(doc, "nodes"):
        snapshot.nodes.append(_parse_node_id(raw))

    for i, raw in enumerate(_list_field(doc, "edges")):
        snapshot.edges.append(_parse_edge(raw, i))

    for i, raw in enumerate(_list_field(doc, "transactions")):
        snapshot.transactions.append(_parse_transaction(raw, i))

    snapshot.focus = _optional_str(doc, "focus")
    snapshot.selected = _optional_str(doc, "selected")
    snapshot.last_expanded = _optional_str(doc, "lastExpanded")
    snapshot.path_node_order = [str(n) for n in _list_field(doc, "pathNodeOrder")]
    return snapshot


def _list_field(doc: dict, key: str) -> list:
    value = doc.get(key, [])
    if not isinstance(value, list):
        raise ValueError(
            f"'{key}' must be a JSON array, got {type(value).__name__}"
        )
    return value


def _parse_node_id(raw: object) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict) and "id" in raw:
        return str(raw["id"])
    raise ValueError(f"Node entry {raw!r} is neither a string nor an object with 'id'")


def _parse_edge(raw: object, index: int) -> GraphEdge:
    if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
        raise ValueError(f"Edge #{index} needs both 'source' and 'target'")
    # Accept the explorer's txCount naming as well as a plain weight.
    weight = raw.get("weight", raw.get("txCount"))
    return GraphEdge(source=str(raw["source"]), target=str(raw["target"]), weight=weight)


def _parse_transaction(raw: object, index: int) -> Transaction:
    if not isinstance(raw, dict) or "hash" not in raw:
        raise ValueError(f"Transaction #{index} has no 'hash'")
    return Transaction(
        hash=str(raw["hash"]),
        from_address=str(raw.get("from", "")),
        to_address=str(raw.get("to", "")),
    )


def _optional_str(doc: dict, key: str) -> str | None:
    value = doc.get(key)
    return None if value is None else str(value)

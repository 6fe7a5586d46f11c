"""Order-independent topology fingerprint for layout caching.

The hash is FNV-1a 64 over the UTF-16 code units of the sorted node ids
and sorted edge keys. Code units rather than code points keep the value
identical to the one the browser client computes for the same graph, so
both sides can share cache keys.
"""

from __future__ import annotations

__all__ = ["compute_graph_hash", "fingerprint_graph", "utf16_sort_key"]

from collections.abc import Iterable, Sequence

from txflow_layout.parser.model import GraphEdge

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF

NODE_SEPARATOR = "\0"
SECTION_SEPARATOR = "\x01"


def _utf16_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def utf16_sort_key(text: str) -> bytes:
    """Sort key ordering strings by UTF-16 code units, as the browser does."""
    # Big-endian bytes compare the same way as the code unit sequence.
    return text.encode("utf-16-be", "surrogatepass")


def compute_graph_hash(node_ids: Sequence[str], edge_keys: Sequence[str]) -> str:
    """Hash a topology given its node ids and ``source|target`` edge keys.

    Returns a 16 character lowercase hex string. Reordering either input
    or repeating an entry never changes the result. Not collision
    resistant; fine for a cache key.
    """
    sorted_nodes = sorted(set(node_ids), key=utf16_sort_key)
    sorted_edges = sorted(set(edge_keys), key=utf16_sort_key)
    text = (
        NODE_SEPARATOR.join(sorted_nodes)
        + SECTION_SEPARATOR
        + NODE_SEPARATOR.join(sorted_edges)
    )

    h = FNV_OFFSET_BASIS
    for unit in _utf16_units(text):
        h ^= unit
        h = (h * FNV_PRIME) & MASK_64

    return f"{h:016x}"


def fingerprint_graph(nodes: Iterable[str], edges: Iterable[GraphEdge]) -> str:
    """Fingerprint a snapshot's nodes and edges."""
    return compute_graph_hash(list(nodes), [e.key for e in edges])

"""SVG previews of computed positions using drawsvg."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import drawsvg as draw

from txflow_layout.parser.model import GraphEdge, Position, Transaction
from txflow_layout.render.style import Theme

EMPTY_SVG = '<svg xmlns="http://www.w3.org/2000/svg"></svg>'


def render_graph_svg(
    positions: Mapping[str, Position],
    edges: Sequence[GraphEdge],
    theme: Theme,
    focus: str | None = None,
    padding: float = 60.0,
) -> str:
    """Render nodes at ``positions`` with straight edges between them."""
    if not positions:
        return EMPTY_SVG

    d, to_canvas = _canvas(positions, theme, padding)

    # Edges behind nodes
    for edge in edges:
        src = positions.get(edge.source)
        tgt = positions.get(edge.target)
        if src is None or tgt is None:
            continue
        x1, y1 = to_canvas(src)
        x2, y2 = to_canvas(tgt)
        d.append(draw.Line(
            x1, y1, x2, y2,
            stroke=theme.edge_color,
            stroke_width=theme.edge_width,
        ))

    for nid, pos in positions.items():
        fill = theme.focus_fill if nid == focus else theme.node_fill
        _render_node(d, nid, to_canvas(pos), fill, theme)

    return d.as_svg()


def render_timeline_svg(
    positions: Mapping[str, Position],
    transactions: Sequence[Transaction],
    focus_address: str,
    theme: Theme,
    padding: float = 60.0,
) -> str:
    """Render a transaction timeline, colouring incoming and outgoing lanes."""
    if not positions:
        return EMPTY_SVG

    d, to_canvas = _canvas(positions, theme, padding)
    incoming = {tx.hash for tx in transactions if tx.to_address == focus_address}
    for tx_hash, pos in positions.items():
        fill = theme.incoming_fill if tx_hash in incoming else theme.outgoing_fill
        _render_node(d, tx_hash, to_canvas(pos), fill, theme)

    return d.as_svg()


def _canvas(positions: Mapping[str, Position], theme: Theme, padding: float):
    """Create a drawing sized to the positions and a layout->canvas mapper."""
    min_x = min(p.x for p in positions.values())
    max_x = max(p.x for p in positions.values())
    min_y = min(p.y for p in positions.values())
    max_y = max(p.y for p in positions.values())

    # Room for the label under the lowest row
    label_room = theme.node_radius + theme.label_font_size * 2
    width = int(max_x - min_x + padding * 2)
    height = int(max_y - min_y + padding * 2 + label_room)

    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    def to_canvas(pos: Position) -> tuple[float, float]:
        return pos.x - min_x + padding, pos.y - min_y + padding

    return d, to_canvas


def _render_node(
    d: draw.Drawing,
    label: str,
    xy: tuple[float, float],
    fill: str,
    theme: Theme,
) -> None:
    x, y = xy
    d.append(draw.Circle(
        x, y, theme.node_radius,
        fill=fill,
        stroke=theme.node_stroke,
        stroke_width=theme.node_stroke_width,
    ))
    d.append(draw.Text(
        _short_label(label, theme.label_max_chars),
        theme.label_font_size,
        x, y + theme.node_radius + theme.label_font_size,
        fill=theme.label_color,
        font_family=theme.label_font_family,
        text_anchor="middle",
    ))


def _short_label(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    keep = max(1, (max_chars - 3) // 2)
    return f"{text[:keep]}...{text[-keep:]}"

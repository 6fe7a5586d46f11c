"""Theme definition for position previews."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a layout preview."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    focus_fill: str
    node_radius: float
    node_stroke_width: float
    edge_color: str
    edge_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    # Timeline lanes
    incoming_fill: str = "#4caf50"
    outgoing_fill: str = "#e57373"
    # Ids longer than this are shortened to head...tail
    label_max_chars: int = 14

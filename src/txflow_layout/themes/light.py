"""Light theme for printing and docs."""

from txflow_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    node_fill="#ffffff",
    node_stroke="#444444",
    focus_fill="#1f6feb",
    node_radius=14.0,
    node_stroke_width=2.0,
    edge_color="#9aa0a6",
    edge_width=1.5,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
    incoming_fill="#2e7d32",
    outgoing_fill="#c62828",
)

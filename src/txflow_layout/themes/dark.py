"""Dark explorer theme."""

from txflow_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1f2430",
    node_fill="#e8eaf0",
    node_stroke="#3a4050",
    focus_fill="#f5b93e",
    node_radius=14.0,
    node_stroke_width=2.0,
    edge_color="rgba(255, 255, 255, 0.35)",
    edge_width=1.5,
    label_color="#c9ced8",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=11.0,
)

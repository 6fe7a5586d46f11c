"""SVG preview rendering."""

from txflow_layout.render.svg import render_graph_svg, render_timeline_svg

__all__ = ["render_graph_svg", "render_timeline_svg"]

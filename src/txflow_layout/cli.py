"""CLI for txflow-layout."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from txflow_layout import __version__
from txflow_layout.layout import (
    BiFlowConfig,
    compute_biflow_positions,
    compute_tx_timeline_positions,
    fingerprint_graph,
    pick_focus,
    plan_layout,
    select_layout_strategy,
)
from txflow_layout.layout.constants import (
    COLLISION_PASSES,
    MIN_NODE_DISTANCE,
    NODE_SPACING,
    PARKING_OFFSET,
    TIER_SPACING,
)
from txflow_layout.layout.modes import all_modes
from txflow_layout.parser import GraphSnapshot, Orientation, Position, parse_snapshot
from txflow_layout.render import render_graph_svg, render_timeline_svg
from txflow_layout.themes import THEMES


def _load_snapshot(input_file: Path) -> GraphSnapshot:
    try:
        return parse_snapshot(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


def _positions_json(positions: dict[str, Position]) -> str:
    return json.dumps(
        {nid: {"x": pos.x, "y": pos.y} for nid, pos in positions.items()},
        indent=2,
    )


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n")


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions to stderr.")
def cli(verbose: bool) -> None:
    """txflow-layout: deterministic positions for address/transaction graphs."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write positions JSON here instead of stdout")
@click.option("--orientation", type=click.Choice(["LR", "TB"]), default="LR",
              help="Tier axis: LR (x) or TB (y) (default: LR)")
@click.option("--focus", default=None,
              help="Focus node id. Defaults to the snapshot's focus, then the hub node")
@click.option("--tier-spacing", type=float, default=TIER_SPACING,
              help=f"Distance between tiers (default: {TIER_SPACING:g})")
@click.option("--node-spacing", type=float, default=NODE_SPACING,
              help=f"Distance between nodes within a tier (default: {NODE_SPACING:g})")
@click.option("--min-node-distance", type=float, default=MIN_NODE_DISTANCE,
              help=f"Collision distance (default: {MIN_NODE_DISTANCE:g})")
@click.option("--collision-passes", type=int, default=COLLISION_PASSES,
              help=f"Push-apart passes (default: {COLLISION_PASSES})")
@click.option("--parking-offset", type=float, default=PARKING_OFFSET,
              help=f"Y of the disconnected-node strip (default: {PARKING_OFFSET:g})")
def biflow(
    input_file: Path,
    output: Path | None,
    orientation: str,
    focus: str | None,
    tier_spacing: float,
    node_spacing: float,
    min_node_distance: float,
    collision_passes: int,
    parking_offset: float,
) -> None:
    """Compute a BiFlow tiered layout for a graph snapshot."""
    snapshot = _load_snapshot(input_file)
    focus_id = pick_focus(
        snapshot.nodes,
        snapshot.edges,
        preferred=(focus, snapshot.focus, snapshot.last_expanded, snapshot.selected),
    )
    config = BiFlowConfig(
        tier_spacing=tier_spacing,
        node_spacing=node_spacing,
        min_node_distance=min_node_distance,
        collision_passes=collision_passes,
        parking_offset=parking_offset,
    )
    positions = compute_biflow_positions(
        snapshot.nodes, snapshot.edges, focus_id, Orientation(orientation), config
    )
    _emit(_positions_json(positions), output)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write positions JSON here instead of stdout")
@click.option("--focus-address", default=None,
              help="Address whose history this is. Defaults to the snapshot's focus")
def timeline(input_file: Path, output: Path | None, focus_address: str | None) -> None:
    """Compute the two-lane transaction timeline layout."""
    snapshot = _load_snapshot(input_file)
    address = focus_address or snapshot.focus or ""
    positions = compute_tx_timeline_positions(snapshot.transactions, address)
    _emit(_positions_json(positions), output)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def fingerprint(input_file: Path) -> None:
    """Print the topology fingerprint used as layout cache key."""
    snapshot = _load_snapshot(input_file)
    click.echo(fingerprint_graph(snapshot.nodes, snapshot.edges))


@cli.command()
@click.option("--path-view/--no-path-view", default=False,
              help="Whether a path view is active")
@click.option("--node-count", type=int, required=True)
@click.option("--path-node-order-length", type=int, default=0)
@click.option("--path-count", type=int, default=0)
@click.option("--mode", type=click.Choice(all_modes()), default="fcose",
              help="Selected layout mode (default: fcose)")
def strategy(
    path_view: bool,
    node_count: int,
    path_node_order_length: int,
    path_count: int,
    mode: str,
) -> None:
    """Print which layout strategy applies to a view."""
    result = select_layout_strategy(
        path_view, node_count, path_node_order_length, path_count, mode
    )
    click.echo(result.value)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--mode", type=click.Choice(all_modes()), default="fcose",
              help="Selected layout mode (default: fcose)")
@click.option("--path-view/--no-path-view", default=False)
@click.option("--path-count", type=int, default=0)
@click.option("--initial/--no-initial", default=False,
              help="Treat this as the first render of the graph")
def plan(
    input_file: Path,
    mode: str,
    path_view: bool,
    path_count: int,
    initial: bool,
) -> None:
    """Show the layout plan for a snapshot as JSON."""
    snapshot = _load_snapshot(input_file)
    result = plan_layout(
        snapshot,
        layout_mode=mode,
        path_view_active=path_view,
        path_count=path_count,
        initial_render=initial,
    )
    positions = (
        None if result.positions is None
        else {nid: {"x": p.x, "y": p.y} for nid, p in result.positions.items()}
    )
    click.echo(json.dumps({
        "strategy": result.strategy.value,
        "fingerprint": result.fingerprint,
        "positions": positions,
    }, indent=2))


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--layout", "layout_name", type=click.Choice(["biflow-lr", "biflow-tb", "timeline"]),
              default="biflow-lr", help="Layout to preview (default: biflow-lr)")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
def render(input_file: Path, output: Path | None, layout_name: str, theme: str) -> None:
    """Render an SVG preview of a layout."""
    snapshot = _load_snapshot(input_file)
    theme_obj = THEMES[theme]

    if layout_name == "timeline":
        address = snapshot.focus or ""
        positions = compute_tx_timeline_positions(snapshot.transactions, address)
        svg = render_timeline_svg(positions, snapshot.transactions, address, theme_obj)
    else:
        focus_id = pick_focus(
            snapshot.nodes,
            snapshot.edges,
            preferred=(snapshot.focus, snapshot.last_expanded, snapshot.selected),
        )
        orientation = Orientation.LR if layout_name == "biflow-lr" else Orientation.TB
        positions = compute_biflow_positions(
            snapshot.nodes, snapshot.edges, focus_id, orientation
        )
        svg = render_graph_svg(positions, snapshot.edges, theme_obj, focus=focus_id)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(positions)} positions ({layout_name}) -> {output}")

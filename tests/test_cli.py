"""Tests for the CLI entry points."""

import json
from pathlib import Path

from click.testing import CliRunner

from txflow_layout.cli import cli
from txflow_layout.layout.fingerprint import compute_graph_hash

FIXTURES = Path(__file__).resolve().parent / "fixtures"
SMALL_GRAPH = FIXTURES / "small_graph.json"


def test_biflow_prints_positions():
    runner = CliRunner()
    result = runner.invoke(cli, ["biflow", str(SMALL_GRAPH)])
    assert result.exit_code == 0, result.output
    positions = json.loads(result.output)
    assert positions["A"] == {"x": 0.0, "y": 0.0}
    assert positions["B"]["x"] < 0 < positions["C"]["x"]
    assert positions["LONE"]["y"] == 1200.0
    assert "GHOST" not in positions


def test_biflow_options(tmp_path):
    out = tmp_path / "pos.json"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "biflow", str(SMALL_GRAPH), "-o", str(out),
        "--orientation", "TB", "--tier-spacing", "100", "--collision-passes", "0",
    ])
    assert result.exit_code == 0, result.output
    positions = json.loads(out.read_text())
    assert positions["C"] == {"x": 0.0, "y": 100.0}
    assert positions["D"] == {"x": 0.0, "y": 200.0}


def test_timeline_prints_positions():
    runner = CliRunner()
    result = runner.invoke(cli, ["timeline", str(SMALL_GRAPH)])
    assert result.exit_code == 0, result.output
    positions = json.loads(result.output)
    assert set(positions) == {"tx1", "tx2", "tx3"}
    assert positions["tx1"]["y"] < positions["tx2"]["y"]


def test_fingerprint_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["fingerprint", str(SMALL_GRAPH)])
    assert result.exit_code == 0
    expected = compute_graph_hash(
        ["A", "B", "C", "D", "LONE"],
        ["B|A", "A|C", "C|D", "A|GHOST"],
    )
    assert result.output.strip() == expected


def test_strategy_command():
    runner = CliRunner()
    args = ["strategy", "--path-view", "--node-count", "2",
            "--path-node-order-length", "2", "--mode", "fcose"]
    result = runner.invoke(cli, args + ["--path-count", "1"])
    assert result.output.strip() == "tiny"
    result = runner.invoke(cli, args + ["--path-count", "2"])
    assert result.output.strip() == "path-fcose"


def test_strategy_rejects_unknown_mode():
    runner = CliRunner()
    result = runner.invoke(cli, ["strategy", "--node-count", "3", "--mode", "circle"])
    assert result.exit_code != 0


def test_plan_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["plan", str(SMALL_GRAPH), "--mode", "biflow-lr"])
    assert result.exit_code == 0, result.output
    plan = json.loads(result.output)
    assert plan["strategy"] == "mode-layout"
    assert len(plan["fingerprint"]) == 16
    assert plan["positions"]["A"] == {"x": 0.0, "y": 0.0}

    result = runner.invoke(cli, ["plan", str(SMALL_GRAPH)])
    assert json.loads(result.output)["positions"] is None


def test_render_produces_svg(tmp_path):
    out = tmp_path / "graph.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(SMALL_GRAPH), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "<svg" in out.read_text()


def test_render_default_output(tmp_path):
    snap = tmp_path / "snap.json"
    snap.write_text(SMALL_GRAPH.read_text())
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(snap), "--layout", "timeline", "--theme", "light"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "snap.svg").exists()


def test_parse_error_exits_nonzero(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"edges": []}')
    runner = CliRunner()
    result = runner.invoke(cli, ["biflow", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_verbose_flag_accepted():
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "fingerprint", str(SMALL_GRAPH)])
    assert result.exit_code == 0


def test_null_nodes_reported_as_parse_error(tmp_path):
    bad = tmp_path / "null.json"
    bad.write_text('{"nodes": null}')
    runner = CliRunner()
    result = runner.invoke(cli, ["biflow", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output
    assert "must be a JSON array" in result.output

import json

import pytest
from typer.testing import CliRunner

from axe_fixtures import cli
from axe_fixtures.cli import app


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("AXE_FIXTURES_CONFIG", raising=False)


def test_list():
    result = CliRunner().invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:2] == ["axe-force-legacy", "axe-large-partial"]
    assert "legacy engine name: axe-legacy" in result.output
    assert "removed entry points: run_partial, finish_run" in result.output


def test_list_with_config(tmp_path):
    cfg = tmp_path / "fixtures.yaml"
    cfg.write_text("fixtures:\n  legacy_engine_name: axe-3.5\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["list", "--config", str(cfg)])
    assert result.exit_code == 0, result.output
    assert "legacy engine name: axe-3.5" in result.output


def test_list_with_config_from_env(tmp_path, monkeypatch):
    cfg = tmp_path / "fixtures.yaml"
    cfg.write_text("fixtures:\n  removed_entry_points: [finish_run]\n", encoding="utf-8")
    monkeypatch.setenv("AXE_FIXTURES_CONFIG", str(cfg))
    result = CliRunner().invoke(app, ["list"])
    assert result.exit_code == 0, result.output
    assert "removed entry points: finish_run" in result.output


def test_list_with_bad_config(tmp_path):
    result = CliRunner().invoke(app, ["list", "--config", str(tmp_path / "missing.yaml")])
    assert result.exit_code != 0


def test_inspect():
    result = CliRunner().invoke(app, ["inspect"])
    assert result.exit_code == 0, result.output
    assert "engine: axe-core 4.6.3" in result.output
    assert "timestamp: 2023-02-01T22:53:38.103Z" in result.output
    assert "rule duplicate-id (inapplicable, serious): 200000 nodes, 1 distinct selector(s)" in result.output
    # the command is registered by name; the module does not shadow stdlib inspect
    assert not hasattr(cli, "inspect")


def test_dump(tmp_path):
    out = tmp_path / "nested" / "partial.json"
    result = CliRunner().invoke(app, ["dump", str(out)])
    assert result.exit_code == 0, result.output
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["environmentData"]["url"] == "http://localhost:9876/test/playground.html"
    assert len(data["results"][0]["nodes"]) == 200_000
    assert data["results"][0]["nodes"][-1]["node"]["nodeIndexes"] == [11]

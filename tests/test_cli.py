# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Tests for the CLI layer using Click's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ecoindex_audit.cli.app import cli


class TestCLI:
    """Tests for CLI commands."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ecoindex" in result.output

    def test_score(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--dom", "0", "--requests", "0", "--size", "0"])
        assert result.exit_code == 0
        assert "ECOINDEX" in result.output
        assert "GRADE" in result.output

    def test_score_json(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["score", "--dom", "0", "--requests", "0", "--size", "0", "--json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["index"] == 100
        assert payload["grade"] == "A"
        assert payload["greenhouse_gas_emission"] == 1.0
        assert payload["water_consumption"] == 1.5
        assert payload["score"] == 1.0

    def test_score_rejects_negative(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--dom", "-1", "--requests", "0", "--size", "0"])
        assert result.exit_code != 0

    def test_audit(self, fixtures_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["audit", str(fixtures_dir / "artifacts.json")])
        assert result.exit_code == 0
        assert "ECOINDEX" in result.output

    def test_audit_with_config_title(self, fixtures_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "audit", str(fixtures_dir / "artifacts.json"),
            "--config", str(fixtures_dir / "plugin.yaml"),
        ])
        assert result.exit_code == 0
        assert "Green Web" in result.output

    def test_audit_export_json(self, fixtures_dir: Path, tmp_path: Path):
        out = tmp_path / "product.json"
        runner = CliRunner()
        result = runner.invoke(cli, [
            "audit", str(fixtures_dir / "artifacts.json"), "--export-json", str(out),
        ])
        assert result.exit_code == 0
        product = json.loads(out.read_text())
        assert 0.86 < product["score"] < 0.87
        assert product["displayValue"] == ""
        assert product["details"]["type"] == "table"
        assert product["details"]["items"][0]["numberOfRequests"] == 5

    def test_audit_missing_dom_stats(self, fixtures_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["audit", str(fixtures_dir / "artifacts_no_dom.json")])
        assert result.exit_code == 1
        assert "DOMStats" in result.output

    def test_audit_missing_pass(self, fixtures_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "audit", str(fixtures_dir / "artifacts.json"),
            "--config", str(fixtures_dir / "plugin_second_pass.yaml"),
        ])
        assert result.exit_code == 1
        assert "secondPass" in result.output

    def test_audit_missing_file(self, tmp_path: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["audit", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_plugin(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["plugin"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["plugin"]["category"]["title"] == "EcoIndex"
        assert payload["plugin"]["category"]["auditRefs"] == [{"id": "ecoindex", "weight": 1}]
        assert payload["audit"]["id"] == "ecoindex"
        assert payload["audit"]["scoreDisplayMode"] == "numeric"

"""Tests for the roadtrip command line."""

import pytest
from click.testing import CliRunner

from roadtrip.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_plan_from_file(runner, orange_county_path):
    result = runner.invoke(cli, ["plan", str(orange_county_path)])

    assert result.exit_code == 0, result.output
    assert "Shortest distance from Irvine to Costa Mesa" in result.output
    assert "Shortest driving time from Irvine to Anaheim" in result.output
    assert "Total distance: 12.70 miles" in result.output


def test_plan_from_stdin(runner, orange_county_path):
    result = runner.invoke(cli, ["plan"], input=orange_county_path.read_text())

    assert result.exit_code == 0, result.output
    assert result.output.count("Begin at Irvine") == 3


def test_plan_disconnected_map(runner, one_way_path):
    result = runner.invoke(cli, ["plan", str(one_way_path)])

    assert result.exit_code == 1
    assert result.output.strip() == "Disconnected Map"


def test_plan_disconnected_map_allowed(runner, one_way_path, monkeypatch):
    monkeypatch.setenv("ROADTRIP_ROUTING_REQUIRE_STRONGLY_CONNECTED", "false")

    result = runner.invoke(cli, ["plan", str(one_way_path)])

    assert result.exit_code == 0, result.output
    assert "Total distance: 4.20 miles" in result.output


def test_plan_malformed_input(runner):
    result = runner.invoke(cli, ["plan"], input="2\n0 A\n0 B\n0\n0\n")

    assert result.exit_code == 1
    assert "Error: Invalid vertex on line 3" in result.output


def test_check(runner, one_way_path):
    result = runner.invoke(cli, ["check", str(one_way_path)])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Locations: 2",
        "Road segments: 1",
        "Strongly connected: no",
    ]


def test_dump_road_map_only(runner):
    result = runner.invoke(cli, ["dump"], input="# map\n2\n1 B\n0 A\n1\n1 0 2 40\n")

    assert result.exit_code == 0, result.output
    assert result.output == "2\n0 A\n1 B\n1\n1 0 2.0 40.0\n"


def test_missing_file(runner, tmp_path):
    result = runner.invoke(cli, ["plan", str(tmp_path / "missing.txt")])
    assert result.exit_code != 0


def test_verbose_flag(runner, orange_county_path):
    result = runner.invoke(cli, ["-v", "check", str(orange_county_path)])
    assert result.exit_code == 0
    assert "Strongly connected: yes" in result.output

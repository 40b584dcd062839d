"""CLI command tests."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from ui.cli.cli import app

runner = CliRunner()


def test_products_filter_by_colour_and_size() -> None:
    result = runner.invoke(app, ["products", "filter", "--colour", "red", "--size", "huge"])

    assert result.exit_code == 0
    assert "(colour == red & size == huge)" in result.output
    assert "Huge red product" in result.output
    assert "Huge blue product" not in result.output


def test_products_filter_by_size_lists_every_colour() -> None:
    result = runner.invoke(app, ["products", "filter", "--size", "small"])

    assert result.exit_code == 0
    for colour in ("red", "green", "blue"):
        assert f"Small {colour} product" in result.output


def test_products_filter_requires_a_criterion() -> None:
    result = runner.invoke(app, ["products", "filter"])

    assert result.exit_code == 2


def test_relations_demo_prints_family_and_dom() -> None:
    result = runner.invoke(app, ["relations", "demo"])

    assert result.exit_code == 0
    assert "Amy has a parent called Barbara" in result.output
    assert "Amy has a parent called Daniel" in result.output
    assert "Barbara has a spouse called Daniel" in result.output
    assert "Dom Element HEAD has a sibling called Dom Element BODY" in result.output
    assert "Facts recorded: 14" in result.output


def test_relations_spouse_lookup() -> None:
    result = runner.invoke(app, ["relations", "spouse", "Daniel"])

    assert result.exit_code == 0
    assert "Daniel has a spouse called Barbara" in result.output


def test_relations_spouse_not_found_exits_with_error() -> None:
    result = runner.invoke(app, ["relations", "spouse", "Amy"])

    assert result.exit_code == 1


def test_config_show_outputs_json() -> None:
    result = runner.invoke(app, ["config", "show"])

    assert result.exit_code == 0
    assert "relations" in json.loads(result.output)


def test_relations_demo_reports_facts_as_recorded() -> None:
    result = runner.invoke(app, ["relations", "demo", "--show-facts"])

    assert result.exit_code == 0
    fact_lines = [line for line in result.output.splitlines() if line.startswith("+ ")]
    assert len(fact_lines) == 14
    assert fact_lines[:2] == ["+ Barbara --parent--> Amy", "+ Amy --child--> Barbara"]
    assert "+ Dom Element BODY --sibling--> Dom Element HEAD" in fact_lines


def test_relations_demo_hides_facts_by_default() -> None:
    result = runner.invoke(app, ["relations", "demo"])

    assert not any(line.startswith("+ ") for line in result.output.splitlines())

"""Tests for the cssbuilder CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert "build" in result.output
        assert "combine" in result.output
        assert "json" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_full_selector(self) -> None:
        result = CliRunner().invoke(
            cli,
            [
                "build", "-e", "a", "--id", "home", "-c", "nav", "-c", "active",
                "-a", 'href$=".png"', "-p", "focus", "--pseudo-element", "after",
            ],
        )
        assert result.exit_code == 0
        assert result.output == 'a#home.nav.active[href$=".png"]:focus::after\n'

    def test_id_and_classes(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "--id", "main", "--class", "container", "--class", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_no_parts(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 1
        assert "no selector parts given" in result.output

    def test_empty_element(self) -> None:
        result = CliRunner().invoke(cli, ["build", "-e", ""])
        assert result.exit_code == 0
        assert result.output == "\n"

    def test_verbose_flag_accepted(self) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "build", "-e", "div"])
        assert result.exit_code == 0
        assert "div" in result.output


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_sibling(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "h1", "+", "p"])
        assert result.exit_code == 0
        assert result.output == "h1 + p\n"

    def test_descendant_quirk(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "ul", " ", "li"])
        assert result.output == "ul   li\n"

    def test_collapse_descendant(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "--collapse-descendant", "ul", " ", "li"])
        assert result.output == "ul li\n"


# ---------------------------------------------------------------------------
# json command
# ---------------------------------------------------------------------------


class TestJsonCommand:
    def test_compacts(self) -> None:
        result = CliRunner().invoke(cli, ["json", '{ "width": 10, "height" : 20 }'])
        assert result.exit_code == 0
        assert result.output == '{"width":10,"height":20}\n'

    def test_invalid(self) -> None:
        result = CliRunner().invoke(cli, ["json", "{oops"])
        assert result.exit_code == 1
        assert "invalid JSON" in result.output

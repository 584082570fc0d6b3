"""Tests for the list and installed commands."""

from pathlib import Path

from click.testing import CliRunner

from unicrn.cli.cli import cli
from unicrn.core.catalog_ops import add_entry
from unicrn.core.config import ProjectConfig
from unicrn.core.context import UnicrnContext


def test_list_shows_components_and_hooks(cli_runner: CliRunner, ctx: UnicrnContext) -> None:
    result = cli_runner.invoke(cli, ["list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "button" in result.output
    assert "otpinput" in result.output
    assert "usedisclose" in result.output
    assert "Usage: unicrn add <name>" in result.output


def test_installed_empty(cli_runner: CliRunner, ctx: UnicrnContext) -> None:
    result = cli_runner.invoke(cli, ["installed"], obj=ctx)

    assert result.exit_code == 0
    assert "No components installed" in result.output


def test_installed_lists_present_entries(
    cli_runner: CliRunner, ctx: UnicrnContext, project: Path
) -> None:
    add_entry(ctx, ProjectConfig(), "card")
    add_entry(ctx, ProjectConfig(), "usedisclose")

    result = cli_runner.invoke(cli, ["installed"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["card", "usedisclose"]

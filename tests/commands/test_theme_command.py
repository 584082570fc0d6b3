"""Tests for the theme and themes commands."""

from pathlib import Path

from click.testing import CliRunner

from unicrn.cli.cli import cli
from unicrn.core.context import UnicrnContext
from unicrn.integrations.fetcher.fake import FakeFetcher


def test_theme_refreshes_unistyles(
    cli_runner: CliRunner, ctx: UnicrnContext, project: Path
) -> None:
    result = cli_runner.invoke(cli, ["theme", "blue"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert 'Set theme to "Blue"' in result.output
    assert "Updated: unistyles.ts" in result.output
    assert (project / "unistyles.ts").exists()


def test_theme_unknown_lists_available(cli_runner: CliRunner, ctx: UnicrnContext) -> None:
    result = cli_runner.invoke(cli, ["theme", "purple"], obj=ctx)

    assert result.exit_code == 1
    assert 'Theme "purple" not found.' in result.output
    assert "Available themes: default, dark, blue, green" in result.output


def test_theme_download_failure(cli_runner: CliRunner, project: Path) -> None:
    ctx = UnicrnContext.for_test(fetcher=FakeFetcher(), cwd=project)

    result = cli_runner.invoke(cli, ["theme", "dark"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to set theme" in result.output
    assert not (project / "unistyles.ts").exists()


def test_themes_lists_all(cli_runner: CliRunner, ctx: UnicrnContext) -> None:
    result = cli_runner.invoke(cli, ["themes"], obj=ctx)

    assert result.exit_code == 0, result.output
    for key in ("default", "dark", "blue", "green"):
        assert key in result.output

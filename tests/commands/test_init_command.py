"""Tests for the init command."""

import json
from pathlib import Path

from click.testing import CliRunner

from unicrn.cli.cli import cli
from unicrn.core.config import CONFIG_FILENAME
from unicrn.core.context import UnicrnContext
from unicrn.core.entry_point import UNISTYLES_IMPORT
from unicrn.integrations.fetcher.fake import FakeFetcher


def test_init_fresh_project(cli_runner: CliRunner, ctx: UnicrnContext, project: Path) -> None:
    result = cli_runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Project initialized successfully!" in result.output
    assert "Created components/ui/" in result.output
    assert json.loads((project / CONFIG_FILENAME).read_text(encoding="utf-8")) == {
        "componentsFolder": "components"
    }
    assert UNISTYLES_IMPORT in (project / "index.ts").read_text(encoding="utf-8")


def test_init_twice_reports_nothing_to_do(
    cli_runner: CliRunner, ctx: UnicrnContext
) -> None:
    cli_runner.invoke(cli, ["init"], obj=ctx)

    result = cli_runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Already initialized; nothing to do" in result.output
    assert "Created" not in result.output


def test_init_custom_components_folder(
    cli_runner: CliRunner, ctx: UnicrnContext, project: Path
) -> None:
    result = cli_runner.invoke(cli, ["init", "--components-folder", "src/kit"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (project / "src" / "kit" / "ui" / "index.ts").exists()
    assert 'from "@/src/kit/ui"' in result.output


def test_init_theme_download_failure_exits_nonzero(
    cli_runner: CliRunner, project: Path
) -> None:
    """The rest of the layout is still created when unistyles.ts cannot be fetched."""
    ctx = UnicrnContext.for_test(fetcher=FakeFetcher(), cwd=project)

    result = cli_runner.invoke(cli, ["init"], obj=ctx)

    assert result.exit_code == 1
    assert "Could not download unistyles.ts" in result.output
    assert (project / "components" / "hooks" / "index.ts").exists()


def test_init_rejects_absolute_components_folder(
    cli_runner: CliRunner, ctx: UnicrnContext, project: Path
) -> None:
    result = cli_runner.invoke(cli, ["init", "--components-folder", "/"], obj=ctx)

    assert result.exit_code == 2
    assert "componentsFolder" in result.output
    assert not (project / CONFIG_FILENAME).exists()
    assert not (project / "ui").exists()

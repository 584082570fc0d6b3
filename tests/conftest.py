"""Shared fixtures for unicrn tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from unicrn.core.config import ProjectConfig
from unicrn.core.context import UnicrnContext
from unicrn.core.sources import remote_url
from unicrn.integrations.fetcher.fake import FakeFetcher


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty consumer project directory."""
    project_dir = tmp_path / "app"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def config() -> ProjectConfig:
    return ProjectConfig()


@pytest.fixture
def catalog_fetcher() -> FakeFetcher:
    """FakeFetcher serving a small body for every file in the catalog plus unistyles.ts."""
    from unicrn.core.registry import CATALOG, THEME_FILE

    files = {remote_url(THEME_FILE): b"export const themes = {};\n"}
    for entry in CATALOG:
        for path in entry.files:
            files[remote_url(path)] = f"// {path}\n".encode()
    return FakeFetcher(files=files)


@pytest.fixture
def ctx(project: Path, catalog_fetcher: FakeFetcher) -> UnicrnContext:
    return UnicrnContext.for_test(fetcher=catalog_fetcher, cwd=project)

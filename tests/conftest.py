from pathlib import Path

import pytest
from typer.testing import CliRunner

from go_init.config import ProjectContext
from go_init.config.settings import get_settings

AUTHOR = "Jane Doe\n"
YEAR = 2024


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GO_INIT_GIT", raising=False)
    monkeypatch.delenv("GO_INIT_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def context() -> ProjectContext:
    return ProjectContext(directory="foo", organization="bar", author=AUTHOR, year=YEAR)


def _write_executable(path: Path, body: str) -> Path:
    path.write_text(body, encoding="utf-8")
    path.chmod(0o755)
    return path


@pytest.fixture
def fake_git(tmp_path: Path) -> Path:
    """
    A stand-in git that answers `config user.name` like a configured install.
    """
    bin_dir = tmp_path / "fakebin"
    bin_dir.mkdir()
    return _write_executable(bin_dir / "git", "#!/bin/sh\necho 'Jane Doe'\n")


@pytest.fixture
def unconfigured_git(tmp_path: Path) -> Path:
    """
    A stand-in git with no user.name set: prints nothing and exits 1.
    """
    bin_dir = tmp_path / "fakebin-empty"
    bin_dir.mkdir()
    return _write_executable(bin_dir / "git", "#!/bin/sh\nexit 1\n")

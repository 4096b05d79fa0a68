"""Shared pytest fixtures for rutctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from rutctl.domain import checksum


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _fresh_memo() -> Generator[None]:
    """Every test starts with an empty, enabled checksum memo."""
    checksum.set_memo_enabled(True)
    checksum.reset_memo()
    yield
    checksum.set_memo_enabled(True)
    checksum.reset_memo()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty temp directory with no rutctl config or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    for var in ("RUTCTL_CONFIG", "RUTCTL_FORMAT__DEFAULT", "RUTCTL_CHECKSUM__MEMO"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path

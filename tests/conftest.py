from pathlib import Path

import pytest
from typer.testing import CliRunner

from ssm_scaffold.config import settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test from an empty working directory with no log level override.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SSM_SCAFFOLD_LOG_LEVEL", raising=False)
    settings.get_settings.cache_clear()
    yield tmp_path
    settings.get_settings.cache_clear()

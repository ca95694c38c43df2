from pathlib import Path

import pytest
from typer.testing import CliRunner

from ssm_scaffold import __version__, cli


def test_cli_creates_named_repository(runner: CliRunner, workdir: Path) -> None:
    result = runner.invoke(cli.app, ["demo-repo"])
    assert result.exit_code == 0, result.output

    root = workdir / "demo-repo"
    assert (root / "main.tf").exists()
    assert (root / "scripts" / "linux_script.sh").exists()
    assert "Terraform repo created in ./demo-repo" in result.output
    assert "git init" in result.output


def test_cli_uses_default_name(runner: CliRunner, workdir: Path) -> None:
    result = runner.invoke(cli.app, [])
    assert result.exit_code == 0, result.output

    root = workdir / "my-ssm-doc-repo"
    main_tf = (root / "main.tf").read_text(encoding="utf-8")
    assert 'document_name = "my-ssm-doc-repo-sh-PS1-Doc"' in main_tf


def test_cli_reports_io_failure(runner: CliRunner, workdir: Path) -> None:
    (workdir / "demo-repo").write_text("", encoding="utf-8")

    result = runner.invoke(cli.app, ["demo-repo"])

    assert result.exit_code == 1
    assert "Scaffold failed" in result.output
    assert sorted(p.name for p in workdir.iterdir()) == ["demo-repo"]


@pytest.mark.parametrize("name", ["a[/]b", "repo[bold]x", "repo[test]"])
def test_cli_prints_bracketed_name_verbatim(runner: CliRunner, workdir: Path, name: str) -> None:
    result = runner.invoke(cli.app, [name])
    assert result.exit_code == 0, result.output

    assert (workdir / name / "main.tf").is_file()
    assert f"Terraform repo created in ./{name}" in result.output


def test_cli_dry_run_escapes_bracketed_name(runner: CliRunner, workdir: Path) -> None:
    result = runner.invoke(cli.app, ["a[/]b", "--dry-run"])
    assert result.exit_code == 0, result.output
    assert not any(workdir.iterdir())


def test_cli_dry_run_writes_nothing(runner: CliRunner, workdir: Path) -> None:
    result = runner.invoke(cli.app, ["demo-repo", "--dry-run"])
    assert result.exit_code == 0, result.output

    assert not (workdir / "demo-repo").exists()
    assert "Dry run complete" in result.output


def test_cli_version(runner: CliRunner, workdir: Path) -> None:
    result = runner.invoke(cli.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
    assert not any(workdir.iterdir())

"""
Write the Terraform repository tree for a bundled shell/PowerShell SSM document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..util import DEFAULT_FILE_MODE, ensure_directory, write_text_file
from . import templates

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755

DIRECTORIES: Tuple[str, ...] = (
    "modules/ssm_document/templates",
    "scripts",
)


class ScaffoldError(OSError):
    """Raised when a directory or file of the repository cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        reason = cause.strerror or str(cause)
        super().__init__(f"Unable to write {path}: {reason}")


@dataclass(frozen=True)
class FileSpec:
    """
    One generated file.

    Attributes:
        relative_path: Location under the repository root, using forward slashes.
        template: Template text.
        substitute: False for templates written verbatim.
        mode: Permission bits applied after writing.
    """
    relative_path: str
    template: str
    substitute: bool = True
    mode: int = DEFAULT_FILE_MODE


FILE_SPECS: Tuple[FileSpec, ...] = (
    FileSpec("main.tf", templates.ROOT_MAIN_TF),
    FileSpec("variables.tf", templates.ROOT_VARIABLES_TF),
    FileSpec("README.md", templates.README_MD),
    FileSpec("modules/ssm_document/main.tf", templates.MODULE_MAIN_TF, substitute=False),
    FileSpec("modules/ssm_document/variables.tf", templates.MODULE_VARIABLES_TF, substitute=False),
    FileSpec("modules/ssm_document/outputs.tf", templates.MODULE_OUTPUTS_TF, substitute=False),
    FileSpec("modules/ssm_document/templates/ssm_document.yaml", templates.SSM_DOCUMENT_TEMPLATE),
    FileSpec("scripts/linux_script.sh", templates.LINUX_SCRIPT, mode=EXECUTABLE_MODE),
    FileSpec("scripts/windows_script.ps1", templates.WINDOWS_SCRIPT),
)


@dataclass
class ScaffoldReport:
    """
    Stores what changed when scaffolding ran.

    Attributes:
        root: The repository root directory.
        directories_created: Folders that did not exist before the run.
        files_written: Every file written, in order.
        files_overwritten: Written files that replaced an existing file.
    """
    root: Path
    directories_created: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)
    files_overwritten: List[Path] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Files written", str(len(self.files_written)))
        yield ("Files overwritten", str(len(self.files_overwritten)))


def resolve_repository_name(value: Optional[str]) -> str:
    """Return the repository name, falling back to the default when blank."""
    if value is None or not value.strip():
        return templates.DEFAULT_REPOSITORY_NAME
    return value


def resolve_repository_root(name: str, base_dir: Path | str | None = None) -> Path:
    """
    Determine the repository root directory.

    Args:
        name: Repository name (used as the directory name).
        base_dir: Parent directory; the current working directory when omitted.
    """
    parent = Path(base_dir) if base_dir is not None else Path.cwd()
    return parent / name


def build_context(name: str) -> Dict[str, str]:
    return {
        "repository_name": name,
        "document_name": f"{name}{templates.DOCUMENT_NAME_SUFFIX}",
        "aws_profile": templates.DEFAULT_AWS_PROFILE,
        "aws_region": templates.DEFAULT_AWS_REGION,
    }


def render_file(spec: FileSpec, context: Dict[str, str]) -> str:
    if not spec.substitute:
        return spec.template
    return spec.template.format(**context)


def plan_repository(name: Optional[str], base_dir: Path | str | None = None) -> List[tuple[Path, str]]:
    """
    Render every file without touching the filesystem.

    Returns:
        (absolute target path, rendered content) pairs in write order.
    """
    resolved = resolve_repository_name(name)
    root = resolve_repository_root(resolved, base_dir)
    context = build_context(resolved)
    return [(root / spec.relative_path, render_file(spec, context)) for spec in FILE_SPECS]


def _ensure_directory(path: Path, report: ScaffoldReport) -> None:
    try:
        created = ensure_directory(path)
    except OSError as exc:
        raise ScaffoldError(path, exc) from exc
    if created:
        report.directories_created.append(path)


def _write_file(target: Path, content: str, mode: int, report: ScaffoldReport) -> None:
    existed = target.exists()
    try:
        write_text_file(target, content, mode=mode)
    except OSError as exc:
        raise ScaffoldError(target, exc) from exc
    logger.debug("Wrote %s", target)
    report.files_written.append(target)
    if existed:
        report.files_overwritten.append(target)


def generate_repository(
    repository_name: Optional[str] = None,
    *,
    base_dir: Path | str | None = None,
) -> ScaffoldReport:
    """
    Create the Terraform repository for an SSM document.

    Creates the root directory, the module and scripts folders, then writes
    every entry of FILE_SPECS, overwriting existing files. The first failure
    aborts the run; anything already written stays on disk.

    Args:
        repository_name: Directory name and label used inside the files.
        base_dir: Parent directory for the repository (defaults to the cwd).

    Returns:
        A ScaffoldReport detailing the actions taken.

    Raises:
        ScaffoldError: If a directory or file cannot be written.
    """
    name = resolve_repository_name(repository_name)
    root = resolve_repository_root(name, base_dir)
    report = ScaffoldReport(root=root)
    logger.info("Scaffolding SSM document repository '%s' at %s", name, root)

    _ensure_directory(root, report)
    for relative in DIRECTORIES:
        _ensure_directory(root / relative, report)

    context = build_context(name)
    for spec in FILE_SPECS:
        _write_file(root / spec.relative_path, render_file(spec, context), spec.mode, report)

    logger.info(
        "Wrote %d files (%d overwritten) under %s",
        len(report.files_written),
        len(report.files_overwritten),
        root,
    )
    return report

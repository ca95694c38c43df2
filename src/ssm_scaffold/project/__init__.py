"""
Repository scaffolding (templates and the file writer).
"""

from .scaffold import (
    FILE_SPECS,
    FileSpec,
    ScaffoldError,
    ScaffoldReport,
    generate_repository,
    plan_repository,
    resolve_repository_name,
)

__all__ = [
    "FILE_SPECS",
    "FileSpec",
    "ScaffoldError",
    "ScaffoldReport",
    "generate_repository",
    "plan_repository",
    "resolve_repository_name",
]

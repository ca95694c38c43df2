"""
Scaffolder for Terraform repositories that publish a shell + PowerShell SSM document.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("ssm-scaffold")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]

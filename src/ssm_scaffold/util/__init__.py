"""
Shared utility helpers.
"""

from .filesystem import DEFAULT_FILE_MODE, ensure_directory, write_text_file

__all__ = ["DEFAULT_FILE_MODE", "ensure_directory", "write_text_file"]

"""
Filesystem helpers used by the scaffolder.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


def ensure_directory(path: Path | str) -> bool:
    """
    Ensure a directory (and its parents) exists.

    Returns:
        True if the directory was created, False if it was already present.

    Raises:
        OSError: If the path exists as a non-directory or cannot be created.
    """
    target = Path(path)
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    logger.debug("Created directory %s", target)
    return True


def _atomic_write_text(target: Path, content: str, encoding: str, mode: int) -> None:
    """Write text atomically by staging a temp file and renaming."""
    fd, tmp_path = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def write_text_file(
    path: Path | str,
    content: str,
    encoding: str = "utf-8",
    *,
    mode: int = DEFAULT_FILE_MODE,
) -> Path:
    """
    Write text to a file, replacing whatever was there.

    The content is staged in a temp file and moved over the target with
    os.replace, so the target gets a new inode: an existing symlink is
    replaced rather than written through, and ``mode`` is applied as given
    regardless of the umask. The parent directory must already exist.
    """
    target = Path(path)
    _atomic_write_text(target, content, encoding=encoding, mode=mode)
    return target

"""
Filesystem helpers for writing generated files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def make_directory(path: Path | str, mode: int = 0o755) -> Path:
    """
    Create a single directory, failing if it already exists or its parent is missing.
    """
    target = Path(path)
    target.mkdir(mode=mode)
    logger.debug("Created directory %s", target)
    return target


def write_text_file(path: Path | str, content: str, *, mode: int = 0o644, encoding: str = "utf-8") -> Path:
    """
    Create or overwrite a file with the given permission bits.

    The parent directory must already exist. The mode is applied explicitly so the
    result does not depend on the process umask. Surrogate-escaped characters (the
    way undecodable argv bytes reach Python) are written back as the original bytes.
    """
    target = Path(path)
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "w", encoding=encoding, errors="surrogateescape") as handle:
        handle.write(content)
    os.chmod(target, mode)
    logger.debug("Wrote %s (%d chars, mode %o)", target, len(content), mode)
    return target

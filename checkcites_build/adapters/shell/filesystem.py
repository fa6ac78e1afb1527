"""
Filesystem adapter — write generated distribution files to disk.

Writes are plain overwrites, not transactional: an I/O error halfway
through can leave a partial file behind. Errors propagate as
``OSError``; the generators decide which packaging error they become.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from checkcites_build.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def write_text_file(target: Path, content: str, *, executable: bool = False) -> Path:
    """Create or overwrite ``target`` with UTF-8 ``content``.

    Raises:
        OSError: The file could not be written or its mode changed.
    """
    target = Path(target)
    # newline="" keeps "\n" endings on every platform
    with target.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)

    if executable:
        mode = target.stat().st_mode
        target.chmod(mode | _EXEC_BITS)

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), target)
    return target


def write_generated(generated: GeneratedFile, target: Path) -> Path:
    """Write a ``GeneratedFile`` to ``target``, honouring its exec flag."""
    return write_text_file(target, generated.content, executable=generated.executable)

"""Atomic file output."""

import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from identicon.errors import ImageWriteError

logger = logging.getLogger(__name__)

FILE_MODE = 0o666


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` so that readers see all of it or nothing.

    The bytes go to a temporary file next to ``path`` which is then renamed
    over it. On failure the temporary file is removed. The file is created
    with ``FILE_MODE`` filtered by the process umask, the same permissions a
    plain ``open(path, "wb")`` would give.

    Raises:
        ImageWriteError: If the directory or file cannot be written.
    """
    temp_path: Optional[Path] = None
    try:
        candidate = path.with_name(f"{path.name}.{uuid.uuid4().hex}.tmp")
        fd = os.open(candidate, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
        temp_path = candidate
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(temp_path, path)
    except OSError as exc:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise ImageWriteError(f"Cannot write image to {path}: {exc}") from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)

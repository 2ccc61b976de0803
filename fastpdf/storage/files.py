"""Writing service responses to the local filesystem."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


def save(content: bytes, file_path: Union[str, Path] = "") -> Optional[bytes]:
    """Write ``content`` to ``file_path`` or return it untouched.

    An empty ``file_path`` means the caller wants the bytes back, so nothing is
    written. Otherwise the file is created or truncated with mode ``0o644`` and
    ``None`` is returned. Write errors propagate unchanged.
    """

    if not str(file_path):
        return content

    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(content)
    logger.debug("Wrote %d bytes to %s", len(content), file_path)
    return None

"""Extraction of zip archives returned by the split-zip endpoint."""

from __future__ import annotations

import io
import logging
import shutil
import zipfile
from pathlib import Path
from typing import List, Union

from fastpdf.exceptions import ExtractionError

logger = logging.getLogger(__name__)


def _target_path(root: Path, name: str) -> Path:
    target = (root / name).resolve()
    if target != root and root not in target.parents:
        raise ExtractionError(f"Archive entry escapes destination: {name}")
    return target


def extract_zip(content: bytes, destination: Union[str, Path]) -> List[Path]:
    """Unpack ``content`` under ``destination`` and return the files written.

    Entries are processed in archive order and the first failure aborts the
    run: ``zipfile.BadZipFile`` for a corrupt archive, ``OSError`` for
    filesystem problems and :class:`ExtractionError` for entries pointing
    outside ``destination``. Files extracted before the failure are left in
    place.
    """

    root = Path(destination).resolve()
    written: List[Path] = []

    with zipfile.ZipFile(io.BytesIO(content)) as archive:
        for entry in archive.infolist():
            target = _target_path(root, entry.filename)
            if entry.is_dir():
                target.mkdir(parents=True, exist_ok=True)
                continue

            target.parent.mkdir(parents=True, exist_ok=True)
            with archive.open(entry) as source, target.open("wb") as sink:
                shutil.copyfileobj(source, sink)
            written.append(target)

    logger.debug("Extracted %d files to %s", len(written), root)
    return written

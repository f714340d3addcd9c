"""File source and sink for running the optimize pipeline over a directory."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from asset_streams.models import AssetFile

logger = logging.getLogger(__name__)


def iter_files(root: str | Path) -> Iterator[AssetFile]:
    """Yield every entry below ``root`` in sorted order. Directories carry no contents."""
    root_path = Path(root)
    for path in sorted(root_path.rglob("*")):
        contents = None if path.is_dir() else path.read_bytes()
        yield AssetFile(path=str(path), base=str(root_path), contents=contents)


def write_files(files: Iterable[AssetFile], dest: str | Path) -> int:
    """Write each file to ``dest / file.relative``. Returns the number of files written."""
    dest_path = Path(dest)
    dest_path.mkdir(parents=True, exist_ok=True)
    written = 0

    for file in files:
        target = dest_path / file.relative
        if not target.resolve().is_relative_to(dest_path.resolve()):
            logger.error(f"Path traversal detected: {file.relative}")
            continue
        if file.contents is None:
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(file.contents)
        written += 1
        logger.debug(f"Wrote {target}")

    return written

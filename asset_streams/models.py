"""File objects that flow through the optimize pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class AssetFile:
    """One asset in flight. Transforms replace ``contents`` in place."""

    path: str
    base: str = ""
    contents: bytes | None = None

    @property
    def relative(self) -> str:
        """Path relative to ``base``, always ``/``-separated."""
        if not self.path:
            return ""
        rel = os.path.relpath(self.path, self.base) if self.base else self.path
        return rel.replace(os.sep, "/").replace("\\", "/")

    @property
    def is_directory(self) -> bool:
        return self.contents is None

    def text(self) -> str:
        if self.contents is None:
            raise ValueError(f"{self.path} has no contents")
        return self.contents.decode("utf-8")

    def set_text(self, text: str) -> None:
        self.contents = text.encode("utf-8")

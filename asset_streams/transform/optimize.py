"""Generic optimize worker: runs one optimizer over each file's text.

If the optimizer raises, the failure is logged and the file passes through
with its original contents. A single bad file never fails the build.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from asset_streams.config.models import DEFAULT_PROTECTED_PATHS
from asset_streams.models import AssetFile
from asset_streams.optimizers import glob_match

from .pipeline import Transform

logger = logging.getLogger(__name__)

Optimizer = Callable[[str, Any], str]


class OptimizeFailure(Exception):
    """An optimizer raised while processing one file."""

    def __init__(self, optimizer: str, path: str, cause: Exception) -> None:
        self.optimizer = optimizer
        self.path = path
        super().__init__(str(cause) or type(cause).__name__)
        self.__cause__ = cause


@dataclass
class OptimizeResult:
    text: str | None = None
    error: OptimizeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class OptimizeTransform(Transform):
    def __init__(
        self,
        name: str,
        optimizer: Optimizer,
        options: Any = None,
        protected: list[str] | None = None,
        enabled: bool = True,
    ):
        """
        Args:
            name: Optimizer name used in log messages
            optimizer: ``(text, options) -> text`` callable
            options: Passed through to ``optimizer`` untouched
            protected: Full-path globs that are never optimized
            enabled: When False every file passes through without calling ``optimizer``
        """
        self.name = name
        self.optimizer = optimizer
        self.options = options
        self.protected = list(DEFAULT_PROTECTED_PATHS if protected is None else protected)
        self.enabled = enabled

    def apply(self, file: AssetFile) -> AssetFile:
        if not self.enabled or self.is_protected(file) or file.contents is None:
            return file

        result = self.optimize(file)
        if result.ok:
            file.set_text(result.text)
        else:
            logger.warning(
                "%s: Unable to optimize %s: %s", self.name, file.path, result.error
            )
        return file

    def optimize(self, file: AssetFile) -> OptimizeResult:
        try:
            return OptimizeResult(text=self.optimizer(file.text(), self.options))
        except Exception as exc:
            return OptimizeResult(error=OptimizeFailure(self.name, file.path, exc))

    def is_protected(self, file: AssetFile) -> bool:
        if not file.path:
            return True
        path = file.path.replace("\\", "/")
        return any(glob_match(path, pattern) for pattern in self.protected)

    def __repr__(self) -> str:
        return f"OptimizeTransform({self.name!r})"

"""Decides whether a stage applies to a file."""

from __future__ import annotations

from asset_streams.config.models import StageOption, exclusions
from asset_streams.models import AssetFile
from asset_streams.optimizers import glob_match

from .pipeline import FilePredicate


def matches(file: AssetFile, extension: str, option: StageOption | None) -> bool:
    """True when ``file`` ends with ``extension`` and no exclusion glob matches it."""
    if not file.path:
        return False
    relative = file.relative
    if not relative.endswith(extension):
        return False
    return not any(glob_match(relative, pattern) for pattern in exclusions(option))


def matches_ext_and_not_excluded(extension: str, option: StageOption | None) -> FilePredicate:
    return lambda file: matches(file, extension, option)

"""TransformPipeline: runs ordered, gated transforms over a stream of files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator

from asset_streams.models import AssetFile

FilePredicate = Callable[[AssetFile], bool]


class Transform(ABC):
    @abstractmethod
    def apply(self, file: AssetFile) -> AssetFile:
        """Process one file and return it for the next stage."""
        ...

    def __call__(self, files: Iterable[AssetFile]) -> Iterator[AssetFile]:
        for file in files:
            yield self.apply(file)


class GatedStage(Transform):
    """Applies ``transform`` only to files ``predicate`` accepts; others pass through."""

    def __init__(
        self,
        predicate: FilePredicate,
        transform: Transform,
        exclude: list[str] | None = None,
    ):
        self.predicate = predicate
        self.transform = transform
        # globs the predicate rejects; informational only
        self.exclude = list(exclude or [])

    def apply(self, file: AssetFile) -> AssetFile:
        if self.predicate(file):
            return self.transform.apply(file)
        return file

    def __repr__(self) -> str:
        return f"GatedStage({self.transform!r})"


class TransformPipeline:
    def __init__(self, stages: list[Transform]):
        self.stages = stages

    def run(self, files: Iterable[AssetFile]) -> Iterator[AssetFile]:
        """Lazily chain every stage; files come out in arrival order."""
        stream: Iterable[AssetFile] = files
        for stage in self.stages:
            stream = stage(stream)
        yield from stream

"""Shared dataclasses for the course build stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(slots=True, frozen=True)
class PackageLayout:
    """Filesystem locations used by a single build."""

    base_dir: Path
    input_dir: Path
    output_dir: Path
    manifest_path: Path
    index_path: Path

    @property
    def resource_prefix(self) -> str:
        """Leading path segment of every packaged resource href."""

        return self.output_dir.name


@dataclass(slots=True)
class ConvertedPage:
    """A Markdown source and the HTML page rendered from it."""

    source: Path
    target: Path
    title: str
    written: bool


@dataclass(slots=True)
class StageResult:
    """Outcome of one build stage; ``error`` is set when it was aborted."""

    name: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ConversionSummary(StageResult):
    """Tracks the pages written by the tree converter."""

    pages: List[ConvertedPage] = field(default_factory=list)


@dataclass(slots=True)
class ListingResult(StageResult):
    """Result of a stage driven by the shallow resource scan."""

    resources: List[str] = field(default_factory=list)
    path: Optional[Path] = None


@dataclass(slots=True)
class PipelineReport:
    """Represents the outputs of every stage for callers."""

    conversion: ConversionSummary
    manifest: ListingResult
    index: ListingResult

    @property
    def ok(self) -> bool:
        return all(
            stage.ok for stage in (self.conversion, self.manifest, self.index)
        )

"""Markdown to SCORM course package builder."""

from .errors import CourseBuildError, FilesystemError, PatternNotFoundError
from .layout import default_layout
from .models import (
    ConversionSummary,
    ListingResult,
    PackageLayout,
    PipelineReport,
)
from .pipeline import build_course

__all__ = [
    "ConversionSummary",
    "CourseBuildError",
    "FilesystemError",
    "ListingResult",
    "PackageLayout",
    "PatternNotFoundError",
    "PipelineReport",
    "build_course",
    "default_layout",
]

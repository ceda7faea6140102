"""High-level orchestration for a course build."""

from __future__ import annotations

from .converter import convert_tree
from .index_page import update_index
from .manifest import generate_manifest
from .models import PackageLayout, PipelineReport


def build_course(layout: PackageLayout) -> PipelineReport:
    """Convert the sources, then refresh the manifest and the index page.

    Every stage runs even when an earlier one failed; the later stages work
    on whatever the output tree holds at that point.
    """

    conversion = convert_tree(layout.input_dir, layout.output_dir)
    manifest = generate_manifest(
        layout.output_dir, layout.manifest_path, layout.resource_prefix
    )
    index = update_index(
        layout.output_dir, layout.index_path, layout.resource_prefix
    )
    return PipelineReport(
        conversion=conversion, manifest=manifest, index=index
    )

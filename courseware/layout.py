"""Deterministic path helpers for the generated course package."""

from __future__ import annotations

import os
from pathlib import Path

from .models import PackageLayout

PROGRAM_DIR = Path(__file__).resolve().parent.parent
RESOURCES_DIRNAME = "resources"
MANIFEST_NAME = "imsmanifest.xml"
INDEX_RELPATH = Path("config") / "index.html"


def base_dir() -> Path:
    """Return the package base directory.

    ``COURSEWARE_BASE`` wins when set. A checkout that carries its own
    config/index.html builds next to the program; an installed copy builds
    in the working directory instead.
    """
    override = os.getenv("COURSEWARE_BASE")
    if override:
        return Path(override).resolve()
    if (PROGRAM_DIR / INDEX_RELPATH).is_file():
        return PROGRAM_DIR
    return Path.cwd().resolve()


def resources_dir(base: Path | None = None) -> Path:
    return (base or base_dir()) / RESOURCES_DIRNAME


def manifest_path(base: Path | None = None) -> Path:
    return (base or base_dir()) / MANIFEST_NAME


def index_path(base: Path | None = None) -> Path:
    return (base or base_dir()) / INDEX_RELPATH


def default_layout(
    input_dir: Path | str, base: Path | None = None
) -> PackageLayout:
    """Build the standard layout rooted at ``base`` for ``input_dir``."""
    root = base or base_dir()
    return PackageLayout(
        base_dir=root,
        input_dir=Path(input_dir),
        output_dir=resources_dir(root),
        manifest_path=manifest_path(root),
        index_path=index_path(root),
    )


__all__ = [
    "MANIFEST_NAME",
    "RESOURCES_DIRNAME",
    "base_dir",
    "default_layout",
    "index_path",
    "manifest_path",
    "resources_dir",
]

"""Directory traversal shared by the converter and the resource scans."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Callable, Iterator, List, Optional

from .errors import FilesystemError

HTML_SUFFIX = ".html"
MARKDOWN_SUFFIX = ".md"


@dataclass(slots=True, frozen=True)
class TreeEntry:
    """A directory or accepted file found while walking a tree."""

    relative: PurePosixPath
    path: Path
    is_dir: bool


def is_markdown(path: Path) -> bool:
    return path.name.endswith(MARKDOWN_SUFFIX)


def is_html(path: Path) -> bool:
    return path.name.endswith(HTML_SUFFIX)


def list_entries(directory: Path) -> List[Path]:
    """Return the entries of ``directory`` in name order."""
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise FilesystemError("list", directory, str(exc)) from exc


def iter_tree(
    root: Path,
    predicate: Callable[[Path], bool],
    *,
    max_depth: Optional[int] = None,
) -> Iterator[TreeEntry]:
    """Walk ``root`` depth-first, yielding directories and accepted files.

    Each directory is yielded before its contents. ``max_depth`` limits how
    many levels are listed: 1 lists ``root`` only, 2 adds its direct
    subdirectories, and None walks the whole tree. Symlinks are skipped.
    """
    yield from _walk(root, PurePosixPath(), predicate, 1, max_depth)


def _walk(
    directory: Path,
    relative: PurePosixPath,
    predicate: Callable[[Path], bool],
    depth: int,
    max_depth: Optional[int],
) -> Iterator[TreeEntry]:
    for entry in list_entries(directory):
        if entry.is_symlink():
            continue
        entry_relative = relative / entry.name
        if entry.is_dir():
            yield TreeEntry(entry_relative, entry, True)
            if max_depth is None or depth < max_depth:
                yield from _walk(
                    entry, entry_relative, predicate, depth + 1, max_depth
                )
        elif entry.is_file() and predicate(entry):
            yield TreeEntry(entry_relative, entry, False)


def resource_href(prefix: str, relative: PurePosixPath) -> str:
    return str(PurePosixPath(prefix) / relative)


def scan_resources(output_dir: Path, prefix: str) -> List[str]:
    """Collect hrefs of the HTML pages at most one directory deep.

    Top-level pages come first, then the pages of each subdirectory in
    name order. Anything nested deeper is not listed.
    """
    top_level = list(iter_tree(output_dir, is_html, max_depth=1))
    resources = [
        resource_href(prefix, entry.relative)
        for entry in top_level
        if not entry.is_dir
    ]
    for directory in (entry for entry in top_level if entry.is_dir):
        for entry in iter_tree(directory.path, is_html, max_depth=1):
            if entry.is_dir:
                continue
            resources.append(
                resource_href(prefix, directory.relative / entry.relative)
            )
    return resources


__all__ = [
    "TreeEntry",
    "is_html",
    "is_markdown",
    "iter_tree",
    "list_entries",
    "resource_href",
    "scan_resources",
]

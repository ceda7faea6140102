"""Refresh the generated page list embedded in the course index page."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import FilesystemError, PatternNotFoundError
from .models import ListingResult
from .walk import scan_resources

STAGE_NAME = "index"
PAGE_ARRAY_RE = re.compile(r"var pageArray = .*;")


def page_array_declaration(resources: Sequence[str]) -> str:
    payload = json.dumps(
        list(resources), ensure_ascii=False, separators=(",", ":")
    )
    return f"var pageArray = {payload};"


def replace_page_array(
    text: str,
    resources: Sequence[str],
    *,
    source: Optional[Path] = None,
) -> str:
    """Swap the first pageArray declaration in ``text`` for ``resources``.

    Raises PatternNotFoundError when no declaration is present.
    """
    declaration = page_array_declaration(resources)
    updated, count = PAGE_ARRAY_RE.subn(lambda _: declaration, text, count=1)
    if not count:
        raise PatternNotFoundError(source)
    return updated


def read_index(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise FilesystemError("read", path, str(exc)) from exc


def write_index(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise FilesystemError("write", path, str(exc)) from exc


def update_index(
    output_dir: Path,
    index_path: Path,
    prefix: Optional[str] = None,
) -> ListingResult:
    """Rescan ``output_dir`` and rewrite the pageArray line of the index."""

    output_dir = Path(output_dir)
    index_path = Path(index_path)
    result = ListingResult(name=STAGE_NAME, path=index_path)
    try:
        result.resources = scan_resources(
            output_dir, prefix or output_dir.name
        )
        original = read_index(index_path)
        updated = replace_page_array(
            original, result.resources, source=index_path
        )
        write_index(index_path, updated)
        print(f"Updated {index_path.name} with new pageArray")
    except Exception as exc:
        result.error = exc
        print(
            f"⚠️ Error updating {index_path.name}: {exc}", file=sys.stderr
        )
    return result


__all__ = [
    "PAGE_ARRAY_RE",
    "page_array_declaration",
    "replace_page_array",
    "update_index",
]

"""Mirror a Markdown source tree into templated HTML pages."""

from __future__ import annotations

import sys
from pathlib import Path

from .checksum import write_text_if_changed
from .errors import FilesystemError
from .models import ConversionSummary, ConvertedPage
from .template import page_title, render_markdown, render_page
from .walk import HTML_SUFFIX, MARKDOWN_SUFFIX, is_markdown, iter_tree

STAGE_NAME = "convert"


def ensure_dir(path: Path) -> Path:
    """Create ``path`` if needed and return it for fluent chaining."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError("create directory", path, str(exc)) from exc
    return path


def html_name(markdown_name: str) -> str:
    return markdown_name[: -len(MARKDOWN_SUFFIX)] + HTML_SUFFIX


def convert_file(source: Path, target: Path) -> ConvertedPage:
    """Render one Markdown file into a templated page at ``target``."""

    try:
        markdown_text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemError("read", source, str(exc)) from exc

    title = page_title(source.name)
    page = render_page(title, render_markdown(markdown_text))
    written = write_text_if_changed(target, page)
    return ConvertedPage(
        source=source, target=target, title=title, written=written
    )


def convert_tree(input_dir: Path, output_dir: Path) -> ConversionSummary:
    """Convert every Markdown file under ``input_dir`` into ``output_dir``.

    The first failure stops the walk; pages written before it are kept and
    reported in the returned summary.
    """

    input_dir = Path(input_dir)
    output_dir = Path(output_dir)
    summary = ConversionSummary(name=STAGE_NAME)
    try:
        ensure_dir(output_dir)
        for entry in iter_tree(input_dir, is_markdown):
            if entry.is_dir:
                ensure_dir(output_dir / entry.relative)
                continue
            target = (
                output_dir / entry.relative.parent / html_name(entry.path.name)
            )
            page = convert_file(entry.path, target)
            summary.pages.append(page)
            print(f"Converted {entry.path} to {target}")
    except Exception as exc:
        summary.error = exc
        print(f"⚠️ Error processing files: {exc}", file=sys.stderr)
    return summary


__all__ = ["convert_file", "convert_tree", "ensure_dir", "html_name"]

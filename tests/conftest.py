"""Pytest fixtures that build throwaway course packages."""

from pathlib import Path

import pytest

from courseware import default_layout

INDEX_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Course</title></head>
<body>
	<script type="text/javascript">
		// navigation
		var pageArray = [];
		var currentPage = 0;
	</script>
</body>
</html>
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def source_tree(tmp_path):
    """Markdown sources two levels deep plus a file that is not Markdown."""
    root = tmp_path / "docs"
    write(root / "intro.md", "# Intro\n\nHello *world*.\n")
    write(root / "getting-started.md", "# Getting started\n\n1. Install\n")
    write(root / "guide" / "setup.md", "## Setup\n\n`pip install`\n")
    write(root / "guide" / "deep" / "extra.md", "Deep page\n")
    write(root / "notes.txt", "not markdown\n")
    (root / "empty").mkdir()
    return root


@pytest.fixture
def course_base(tmp_path):
    """A package directory holding only the pre-existing index page."""
    base = tmp_path / "package"
    write(base / "config" / "index.html", INDEX_TEMPLATE)
    return base


@pytest.fixture
def course_layout(source_tree, course_base):
    return default_layout(source_tree, course_base)

"""Render Markdown sources into standalone course pages."""

from __future__ import annotations

from markdown_it import MarkdownIt

from .walk import MARKDOWN_SUFFIX

PAGE_TEMPLATE = """
<!DOCTYPE html
	PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" dir="ltr" lang="en-US">

<head>
	<title>{{title}}</title>
	<style type="text/css" media="screen">
		@import url(../styles/styles.css);
	</style>
	<script src="/config/api.js" type="text/javascript"></script>
</head>

<body>
	<div class="container">
		{{content}}
	</div>
</body>

</html>
"""

TITLE_SLOT = "{{title}}"
CONTENT_SLOT = "{{content}}"

# markdown-it's stock preset: CommonMark plus tables and strikethrough.
_renderer = MarkdownIt("js-default")


def page_title(filename: str) -> str:
    """Derive the page title from a Markdown filename."""

    stem = filename
    if stem.endswith(MARKDOWN_SUFFIX):
        stem = stem[: -len(MARKDOWN_SUFFIX)]
    return stem.replace("-", " ")


def render_markdown(markdown_text: str) -> str:
    return _renderer.render(markdown_text)


def render_page(title: str, content_html: str) -> str:
    """Fill the page template; each slot is substituted once."""

    return PAGE_TEMPLATE.replace(TITLE_SLOT, title, 1).replace(
        CONTENT_SLOT, content_html, 1
    )


__all__ = ["PAGE_TEMPLATE", "page_title", "render_markdown", "render_page"]

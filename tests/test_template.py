"""Test page rendering helpers."""

from courseware.template import (
    PAGE_TEMPLATE,
    page_title,
    render_markdown,
    render_page,
)


def test_page_title_replaces_every_hyphen():
    assert page_title("getting-started-with-prompts.md") == (
        "getting started with prompts"
    )


def test_page_title_keeps_other_characters():
    assert page_title("Intro_2.md") == "Intro_2"


def test_render_markdown_uses_commonmark_output():
    html = render_markdown("# Title\n\nSome *emphasis*.\n")
    assert "<h1>Title</h1>" in html
    assert "<p>Some <em>emphasis</em>.</p>" in html


def test_render_page_fills_both_slots():
    page = render_page("My page", "<p>Body</p>")
    assert "<title>My page</title>" in page
    assert '<div class="container">\n\t\t<p>Body</p>\n\t</div>' in page
    assert "{{title}}" not in page
    assert "{{content}}" not in page


def test_render_page_keeps_template_head():
    page = render_page("x", "y")
    assert "@import url(../styles/styles.css);" in page
    assert '<script src="/config/api.js" type="text/javascript">' in page
    assert page.startswith("\n<!DOCTYPE html")
    assert PAGE_TEMPLATE.count("{{title}}") == 1


def test_render_page_substitutes_first_occurrence_only():
    page = render_page("{{content}}", "<p>Body</p>")
    assert "<title><p>Body</p></title>" in page
    assert "\t\t{{content}}\n" in page

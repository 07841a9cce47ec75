"""Unit tests for core/assemble.py"""

from mdpage.config import Settings
from mdpage.core.assemble import (
    assemble_document,
    build_front_matter_html,
    build_toc_html,
    error_page,
    welcome_page,
)
from mdpage.core.models import AugmentedBody, TOCEntry


def test_toc_html_empty():
    assert build_toc_html([]) == ""


def test_toc_html_links():
    """Each entry becomes a level-classed link with an encoded, escaped href."""
    html = build_toc_html([
        TOCEntry(level=1, id="intro", title="Intro"),
        TOCEntry(level=3, id="a b'c", title="A <b> & C"),
    ], title="Contents")
    assert '<div class="toc-title">Contents</div>' in html
    assert '<a class="toc-link level-1" href="#intro">Intro</a>' in html
    assert '<a class="toc-link level-3" href="#a%20b&#39;c">A &lt;b&gt; &amp; C</a>' in html


def test_front_matter_html():
    assert build_front_matter_html(None) == ""
    html = build_front_matter_html("---\ntitle: X\n---", summary="Meta")
    assert '<details class="frontmatter-details">' in html
    assert '<summary class="frontmatter-summary">Meta</summary>' in html
    assert '<span class="yaml-key">title</span>' in html


def test_assemble_document_with_toc():
    body = AugmentedBody(html='<h1 id="t">T</h1>', toc=[TOCEntry(level=1, id="t", title="T")])
    page = assemble_document(body, base_href="file:///docs/", initial_fragment='a"b\nc')
    assert page.startswith("<!doctype html>")
    assert '<base href="file:///docs/">' in page
    assert '<div class="layout has-toc">' in page
    assert '<aside class="toc-panel">' in page
    assert '<h1 id="t">T</h1>' in page
    assert 'const initialFragment = "a\\"b\\nc";' in page
    assert "frontmatter-details" not in page.split("<body>")[1].split("<script>")[0]


def test_assemble_document_script_resyncs_after_load():
    """The client script re-applies the hash and active TOC link once the page has loaded."""
    body = AugmentedBody(html='<h1 id="t">T</h1>', toc=[TOCEntry(level=1, id="t", title="T")])
    page = assemble_document(body, initial_fragment="</script>")
    assert 'window.addEventListener("load"' in page
    assert "{ once: true }" in page
    assert 'const initialFragment = "\\u003c/script>";' in page
    assert page.count("</script>") == 1


def test_assemble_document_without_toc():
    """No headings switches to the single-column layout and omits the TOC panel."""
    page = assemble_document(AugmentedBody(html="<p>x</p>"), settings=Settings(toc_title="Nav"))
    assert '<div class="layout no-toc">' in page
    assert "toc-panel\">" not in page
    assert '<base href="">' in page
    assert 'const initialFragment = "";' in page


def test_assemble_document_escapes_base_href():
    page = assemble_document(AugmentedBody(html=""), base_href='file:///a"b/')
    assert '<base href="file:///a&quot;b/">' in page


def test_error_page_escapes_message():
    page = error_page("Bad <file> & stuff")
    assert "<p>Bad &lt;file&gt; &amp; stuff</p>" in page
    assert "Unable to open Markdown file" in page


def test_welcome_page_uses_app_name():
    assert "<h1>mdpage</h1>" in welcome_page()
    assert "<h1>Docs &amp; Notes</h1>" in welcome_page(Settings(app_name="Docs & Notes"))

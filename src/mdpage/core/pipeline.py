"""Render pipeline: Markdown text -> augmented, self-contained HTML page"""

import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote

from mdpage.config import Settings
from mdpage.core.assemble import assemble_document, error_page
from mdpage.core.augment import augment_headings
from mdpage.core.models import AugmentedBody, TOCEntry
from mdpage.core.parse import (
    Converter,
    extract_front_matter,
    extract_heading_candidates,
    make_converter,
    normalize_markdown,
)


logger = logging.getLogger(__name__)

Location = Union[str, Path]


def _base_href(base_location: Optional[Location]) -> str:
    """Folder locations become file:// URIs with a trailing slash; strings pass through."""
    if base_location is None:
        return ""
    if isinstance(base_location, Path):
        uri = base_location.absolute().as_uri()
        return uri if uri.endswith("/") else uri + "/"
    return base_location


def _augment(markdown: str, converter: Converter) -> tuple[Optional[str], AugmentedBody]:
    extracted = extract_front_matter(markdown)
    body = extracted.body_markdown
    candidates = extract_heading_candidates(body)
    html = converter(normalize_markdown(body))
    return extracted.front_matter, augment_headings(html, candidates)


def render(
    markdown: str,
    base_location: Optional[Location] = None,
    initial_fragment: Optional[str] = None,
    settings: Optional[Settings] = None,
    converter: Optional[Converter] = None,
    ) -> str:
    """Render Markdown text to a complete HTML document.

    Pure and stateless: no I/O, nothing shared between calls. base_location
    becomes the page's <base href> so relative links resolve against the
    document's folder; initial_fragment is the anchor scrolled to on load.
    """
    settings = settings or Settings()
    converter = converter or make_converter(settings.parser_config)
    front_matter, body = _augment(markdown, converter)
    return assemble_document(
        body,
        front_matter=front_matter,
        base_href=_base_href(base_location),
        initial_fragment=initial_fragment,
        settings=settings,
    )


def build_toc(markdown: str, settings: Optional[Settings] = None, converter: Optional[Converter] = None) -> list[TOCEntry]:
    """Return the TOC entries render() would show for markdown."""
    settings = settings or Settings()
    converter = converter or make_converter(settings.parser_config)
    return _augment(markdown, converter)[1].toc


# --- file-level helpers for callers ---

def is_markdown_file(path: Path, settings: Optional[Settings] = None) -> bool:
    settings = settings or Settings()
    return path.suffix.lstrip(".").lower() in settings.markdown_extensions


def discover_files(path: Path, settings: Optional[Settings] = None) -> list[Path]:
    """Return sorted Markdown files under path, or [path] if it is a single file."""
    if path.is_file():
        return [path] if is_markdown_file(path, settings) else []
    return sorted(p for p in path.rglob('*') if p.is_file() and is_markdown_file(p, settings))


def split_location(location: str) -> tuple[str, Optional[str]]:
    """Split 'doc.md#frag' into ('doc.md', 'frag'), percent-decoding the fragment.

    A location that names an existing file is returned whole.
    """
    if "#" not in location or Path(location).is_file():
        return location, None
    path, _, fragment = location.partition("#")
    return path, unquote(fragment) or None


def load_markdown(path: Path, settings: Optional[Settings] = None) -> str:
    """Read a Markdown file; ValueError for other file types, OSError if unreadable."""
    if not is_markdown_file(path, settings):
        raise ValueError("Only Markdown files are supported.")
    if not path.exists():
        raise FileNotFoundError("The file was removed.")
    return path.read_text(encoding="utf-8")


def render_path(
    path: Path,
    initial_fragment: Optional[str] = None,
    settings: Optional[Settings] = None,
    converter: Optional[Converter] = None,
    ) -> tuple[str, bool]:
    """Render a file to HTML. Returns (html, ok); on failure html is the error page."""
    try:
        markdown = load_markdown(path, settings)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        message = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        logger.error("Failed to load %s: %s", path, message)
        return error_page(message), False

    logger.info("Rendering %s", path)
    html = render(markdown, base_location=path.parent, initial_fragment=initial_fragment,
                  settings=settings, converter=converter)
    return html, True

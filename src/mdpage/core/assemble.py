"""Document assembly: TOC panel, front matter block and the final HTML pages"""

from typing import Optional

from mdpage.config import Settings
from mdpage.core import templates
from mdpage.core.highlight import highlight_front_matter
from mdpage.core.models import AugmentedBody, TOCEntry
from mdpage.core.utils.escape import encode_fragment, escape_attribute, escape_html, escape_js_string


def build_toc_html(entries: list[TOCEntry], title: str = "On This Page") -> str:
    """Render the TOC panel; empty string when there are no entries."""
    if not entries:
        return ""
    links = "".join(
        templates.TOC_LINK.substitute(
            level=min(max(entry.level, 1), 6),
            href=escape_attribute("#" + encode_fragment(entry.id)),
            title=escape_html(entry.title),
        )
        for entry in entries
    )
    return templates.TOC.substitute(title=escape_html(title), links=links)


def build_front_matter_html(front_matter: Optional[str], summary: str = "YAML front matter") -> str:
    """Render the collapsible highlighted front matter block; empty string when absent."""
    if not front_matter:
        return ""
    return templates.FRONT_MATTER.substitute(
        summary=escape_html(summary),
        code=highlight_front_matter(front_matter),
    )


def assemble_document(
    body: AugmentedBody,
    front_matter: Optional[str] = None,
    base_href: str = "",
    initial_fragment: Optional[str] = None,
    settings: Optional[Settings] = None,
    ) -> str:
    """Compose the complete HTML page around an augmented body."""
    settings = settings or Settings()
    return templates.DOCUMENT.substitute(
        base_href=escape_html(base_href),
        layout_class="layout has-toc" if body.toc else "layout no-toc",
        toc_html=build_toc_html(body.toc, settings.toc_title),
        front_matter_html=build_front_matter_html(front_matter, settings.front_matter_summary),
        body_html=body.html,
        initial_fragment=escape_js_string(initial_fragment or ""),
    )


def error_page(message: str) -> str:
    """Minimal standalone page reporting a load or render failure."""
    return templates.ERROR_PAGE.substitute(message=escape_html(message))


def welcome_page(settings: Optional[Settings] = None) -> str:
    settings = settings or Settings()
    return templates.WELCOME_PAGE.substitute(app_name=escape_html(settings.app_name))

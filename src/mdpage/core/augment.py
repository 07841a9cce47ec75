"""Heading augmentation: assign unique anchor ids to <hN> tags and build the TOC"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from mdpage.core.anchors import AnchorRegistry
from mdpage.core.models import AugmentedBody, HeadingCandidate, TOCEntry
from mdpage.core.utils.escape import escape_attribute
from mdpage.core.utils.slug import slugify


logger = logging.getLogger(__name__)

HEADING_TAG_RE = re.compile(r'<h([1-6])([^>]*)>(.*?)</h\1>', re.DOTALL | re.IGNORECASE)
ID_ATTR_RES = (
    re.compile(r'(?<![\w-])id\s*=\s*"([^"]+)"', re.IGNORECASE),
    re.compile(r"(?<![\w-])id\s*=\s*'([^']+)'", re.IGNORECASE),
)
ID_ATTR_STRIP_RE = re.compile(r'''\s+id\s*=\s*(".*?"|'.*?')''', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')
WHITESPACE_RE = re.compile(r'\s+')

ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
)


@dataclass(frozen=True)
class HeadingTag:
    """Location and parts of one heading element found in HTML."""
    start: int
    end: int
    level: int
    attributes: str
    inner_html: str


class HeadingFinder(Protocol):
    def find(self, html: str) -> list[HeadingTag]: ...


class RegexHeadingFinder:
    """Finds <h1>..<h6> elements by lazy regex match to the nearest same-level close tag."""

    def find(self, html: str) -> list[HeadingTag]:
        return [
            HeadingTag(
                start=m.start(),
                end=m.end(),
                level=int(m.group(1)),
                attributes=m.group(2),
                inner_html=m.group(3),
            )
            for m in HEADING_TAG_RE.finditer(html)
        ]


def extract_id_attribute(attributes: str) -> Optional[str]:
    """Return the value of an existing id="..." or id='...' attribute."""
    for pattern in ID_ATTR_RES:
        if m := pattern.search(attributes):
            return m.group(1)
    return None


def remove_id_attribute(attributes: str) -> str:
    return ID_ATTR_STRIP_RE.sub("", attributes)


def decode_entities(text: str) -> str:
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def heading_title(inner_html: str) -> str:
    """Plain text of a heading: tags stripped, basic entities decoded, whitespace collapsed."""
    text = decode_entities(TAG_RE.sub("", inner_html))
    return WHITESPACE_RE.sub(" ", text).strip()


def augment_headings(
    html: str,
    candidates: Sequence[HeadingCandidate] = (),
    finder: Optional[HeadingFinder] = None,
    registry: Optional[AnchorRegistry] = None,
    ) -> AugmentedBody:
    """Rewrite every heading tag in html with a unique id and collect TOC entries.

    The i-th heading tag is paired with candidates[i], which relies on the
    converter emitting exactly one tag per source ATX heading, in order.
    When the counts differ the pairing cannot be trusted, so every candidate
    is ignored and headings fall back to existing ids or slugs.
    Id precedence: existing id attribute, then the candidate's {#id}, then
    the slug of the heading text.
    """
    finder = finder or RegexHeadingFinder()
    registry = registry if registry is not None else AnchorRegistry()

    tags = finder.find(html)
    if not tags:
        return AugmentedBody(html=html)
    if candidates and len(tags) != len(candidates):
        logger.warning(
            "Heading count mismatch: %d source headings, %d in converted HTML; using slug ids",
            len(candidates), len(tags),
        )
        candidates = ()

    parts: list[str] = []
    toc: list[TOCEntry] = []
    cursor = 0

    for index, tag in enumerate(tags):
        parts.append(html[cursor:tag.start])
        candidate = candidates[index] if candidates else None
        title = heading_title(tag.inner_html)

        preferred = (
            extract_id_attribute(tag.attributes)
            or (candidate.explicit_id if candidate else None)
            or slugify(title)
        )
        anchor = registry.claim(preferred)

        attributes = remove_id_attribute(tag.attributes).strip()
        id_attr = f'id="{escape_attribute(anchor)}"'
        attributes = f" {attributes} {id_attr}" if attributes else f" {id_attr}"
        parts.append(f"<h{tag.level}{attributes}>{tag.inner_html}</h{tag.level}>")

        toc.append(TOCEntry(level=tag.level, id=anchor, title=title or f"Section {index + 1}"))
        cursor = tag.end

    parts.append(html[cursor:])
    logger.debug("Augmented %d heading(s)", len(toc))
    return AugmentedBody(html="".join(parts), toc=toc)

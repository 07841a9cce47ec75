"""Source-level parsing: ATX headings, YAML front matter, reference links, conversion"""

import logging
import re
from typing import Callable, Iterator, Optional

from markdown_it import MarkdownIt

from mdpage.core.models import FrontMatterExtraction, HeadingCandidate, ParsedHeadingLine


logger = logging.getLogger(__name__)

Converter = Callable[[str], str]

YAML_KEY_RE = re.compile(r'^\s*[\w-]+\s*:')
FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
FRONTMATTER_CLOSERS = {"---", "..."}


def make_converter(preset: str = "gfm-like") -> Converter:
    """Build the Markdown -> HTML converter for the given markdown-it preset name."""
    return MarkdownIt(preset, options_update={"linkify": False}).render


def parse_heading_line(line: str) -> Optional[ParsedHeadingLine]:
    """Parse an ATX heading line ('## Title {#id}'); None for anything else."""
    trimmed = line.strip(" \t")
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if not 1 <= level <= 6 or trimmed[level:level + 1] != " ":
        return None

    content = trimmed[level + 1:].strip(" \t")
    if not content:
        return None

    explicit_id = None
    marker = content.rfind("{#")
    if content.endswith("}") and marker != -1 and marker + 2 < len(content) - 1:
        anchor = content[marker + 2:-1].strip(" \t")
        body = content[:marker].strip(" \t")
        if anchor and body:
            explicit_id = anchor
            content = body

    return ParsedHeadingLine(level=level, text=content, explicit_id=explicit_id)


def iter_lines(markdown: str) -> Iterator[tuple[str, bool]]:
    """Yield (line, in_code) pairs; in_code is True for fence lines and fenced content."""
    fence = None
    for line in markdown.split("\n"):
        m = FENCE_RE.match(line)
        if fence is None:
            if m:
                fence = m.group(1)
            yield line, fence is not None
        else:
            closes = m and m.group(1)[0] == fence[0] and len(m.group(1)) >= len(fence)
            if closes and not line[m.end():].strip():
                fence = None
            yield line, True


def extract_heading_candidates(markdown: str) -> list[HeadingCandidate]:
    """Return one HeadingCandidate per ATX heading line outside code fences, in source order."""
    candidates = []
    for line, in_code in iter_lines(markdown):
        heading = None if in_code else parse_heading_line(line)
        if heading is not None:
            candidates.append(HeadingCandidate(level=heading.level, explicit_id=heading.explicit_id))
    return candidates


def extract_front_matter(markdown: str) -> FrontMatterExtraction:
    """Split a leading YAML front matter block from the Markdown body.

    The block must open on the first line with '---', close with a '---' or
    '...' line, be non-empty and contain at least one 'key:' shaped line;
    anything else (e.g. a document opening with a horizontal rule) is left
    in the body untouched.
    """
    text = markdown[1:] if markdown.startswith("\ufeff") else markdown
    not_found = FrontMatterExtraction(front_matter=None, body_markdown=text)

    normalized = text.replace("\r\n", "\n")
    if not normalized.startswith("---\n"):
        return not_found

    lines = normalized.split("\n")
    if len(lines) < 3:
        return not_found

    end_idx = next((i for i in range(1, len(lines)) if lines[i] in FRONTMATTER_CLOSERS), None)
    if end_idx is None or end_idx <= 1:
        return not_found

    if not any(YAML_KEY_RE.match(line) for line in lines[1:end_idx]):
        return not_found

    front_matter = "\n".join(lines[:end_idx + 1])
    body = "\n".join(lines[end_idx + 1:]).lstrip("\n")
    logger.debug("Front matter detected (%d lines)", end_idx + 1)
    return FrontMatterExtraction(front_matter=front_matter, body_markdown=body)


def normalize_reference_line(line: str) -> Optional[str]:
    """Rewrite '[label]: <url> "title"' to '[label]: url "title"'; None if the line has another shape."""
    trimmed = line.strip(" \t")
    declaration = trimmed.find("]:")
    if not trimmed.startswith("[") or declaration == -1:
        return None

    name = trimmed[:declaration + 2]
    target = trimmed[declaration + 2:].strip(" \t")
    closing = target.find(">")
    if not target.startswith("<") or closing <= 0:
        return None

    url = target[1:closing]
    tail = target[closing + 1:].strip(" \t")
    return f"{name} {url} {tail}" if tail else f"{name} {url}"


def normalize_markdown(markdown: str) -> str:
    """Prepare the body for conversion: unwrap <url> references, drop {#id} heading suffixes."""
    normalized = []
    for line, in_code in iter_lines(markdown):
        if in_code:
            normalized.append(line)
            continue

        reference = normalize_reference_line(line)
        if reference is not None:
            normalized.append(reference)
            continue

        heading = parse_heading_line(line)
        if heading is not None and heading.explicit_id is not None:
            normalized.append(f"{'#' * heading.level} {heading.text}")
            continue

        normalized.append(line)
    return "\n".join(normalized)

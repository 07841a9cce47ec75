"""Intermediate data models for the render pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ParsedHeadingLine:
    """One ATX heading line split into level, text and optional {#id} anchor."""
    level: int
    text: str
    explicit_id: Optional[str] = None


@dataclass(frozen=True)
class HeadingCandidate:
    """Source-side heading, paired by position with the converter's <hN> tags."""
    level: int
    explicit_id: Optional[str] = None


@dataclass(frozen=True)
class FrontMatterExtraction:
    front_matter: Optional[str]     # raw block including both delimiters; None if absent
    body_markdown: str


class TOCEntry(BaseModel):
    """A single table of contents row, in document order."""
    level: int = Field(ge=1, le=6)
    id: str
    title: str


@dataclass
class AugmentedBody:
    """Converter HTML with heading ids rewritten, plus the TOC built from it."""
    html: str
    toc: list[TOCEntry] = field(default_factory=list)


class SpanClass(str, Enum):
    key = "key"
    string = "string"
    number = "number"
    bool = "bool"
    null = "null"
    punct = "punct"
    comment = "comment"


@dataclass(frozen=True)
class YamlSpan:
    """A run of front matter text; cls None means plain (unhighlighted) text."""
    text: str
    cls: Optional[SpanClass] = None

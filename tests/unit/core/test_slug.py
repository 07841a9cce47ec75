"""Unit tests for core/utils/slug.py"""

import unicodedata

import pytest

from mdpage.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("Mixed - _ separators", "mixed-separators"),
    ("", "section"),
    ("!!!", "section"),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


def test_slugify_keeps_unicode_letters():
    """slugify keeps non-ASCII alphanumerics unchanged (lower-cased)."""
    assert slugify("Überblick Café") == "überblick-café"
    assert slugify("日本語 テスト") == "日本語-テスト"


def test_slugify_keeps_combining_marks():
    """Vowel signs and decomposed accents stay attached to their base letters."""
    assert slugify("हिन्दी") == "हिन्दी"
    assert slugify(unicodedata.normalize("NFD", "Café")) == unicodedata.normalize("NFD", "café")


def test_slugify_preserves_hyphens():
    """slugify keeps existing hyphens intact."""
    assert slugify("already-slugified") == "already-slugified"


def test_slugify_strips_leading_trailing_hyphens():
    """slugify strips leading/trailing hyphens from result."""
    assert slugify("-- edge --") == "edge"

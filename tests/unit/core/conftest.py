"""Shared fixtures for core unit tests"""

import pytest

from mdpage.core.parse import make_converter


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2 {#second}

- item one
- item two

## Heading 1
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
tags: [a, b]
draft: false
---

# Title

Body content.
"""


@pytest.fixture(name="converter")
def converter_fixture():
    return make_converter("gfm-like")


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD

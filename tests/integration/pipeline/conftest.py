"""Shared fixtures for pipeline integration tests"""

import pytest


@pytest.fixture(name="sample_front_matter_md")
def sample_front_matter_md_fixture():
    return (
        "---\n"
        "title: Test Doc  # shown in the header\n"
        "tags: [a, b]\n"
        "draft: false\n"
        "---\n"
        "\n"
        "# Title\n"
        "\n"
        "Body content.\n"
    )

"""Slug generation for heading anchors"""

import unicodedata


def slugify(text: str) -> str:
    """Convert heading text to a lowercase, hyphen-separated anchor slug.

    Alphanumerics and combining marks (any script) are kept, runs of whitespace, '-' and '_'
    become a single '-', everything else is dropped. Returns 'section'
    when nothing survives.
    """
    chars: list[str] = []
    previous_dash = False
    for ch in text.lower():
        if ch.isalnum() or unicodedata.category(ch)[0] == "M":
            chars.append(ch)
            previous_dash = False
        elif ch.isspace() or ch in "-_":
            if not previous_dash:
                chars.append("-")
                previous_dash = True
    return "".join(chars).strip("-") or "section"

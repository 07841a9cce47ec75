"""Lexical YAML highlighting for front matter blocks.

Each line is classified on its own into spans (key, string, number, bool,
null, punct, comment); there is no multi-line scalar folding and no real
YAML parsing. Inline sequences are split on every comma, including commas
inside quoted items.
"""

import re

from mdpage.core.models import SpanClass, YamlSpan
from mdpage.core.utils.escape import escape_html


KEY_LINE_RE = re.compile(r'^(-\s+)?([A-Za-z0-9_.-]+)(\s*:\s*)(.*)$')
NUMBER_RE = re.compile(r'-?[0-9]+(\.[0-9]+)?')
BOOL_WORDS = {"true", "false", "yes", "no", "on", "off"}
HSPACE = " \t"


def _leading(text: str) -> str:
    return text[:len(text) - len(text.lstrip(HSPACE))]


def _trailing(text: str) -> str:
    return text[len(text.rstrip(HSPACE)):]


def split_comment(text: str) -> tuple[str, str]:
    """Split text into (value, comment) at the first unquoted '#' that starts a comment.

    A '#' opens a comment at the start of text or right after whitespace.
    Backslash escapes the next character inside double quotes only.
    """
    in_single = in_double = escaped = False
    for i, ch in enumerate(text):
        if in_double:
            if escaped:
                escaped = False
                continue
            if ch == "\\":
                escaped = True
                continue
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "#" and not in_single and not in_double:
            if i == 0 or text[i - 1].isspace():
                return text[:i], text[i:]
    return text, ""


def scalar_spans(token: str) -> list[YamlSpan]:
    """Classify one trimmed scalar token (or an inline [a, b] sequence)."""
    if token.startswith("[") and token.endswith("]"):
        return sequence_spans(token)
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "'\"":
        return [YamlSpan(token, SpanClass.string)]
    if NUMBER_RE.fullmatch(token):
        return [YamlSpan(token, SpanClass.number)]
    lowered = token.lower()
    if lowered in BOOL_WORDS:
        return [YamlSpan(token, SpanClass.bool)]
    if lowered == "null" or token == "~":
        return [YamlSpan(token, SpanClass.null)]
    return [YamlSpan(token, SpanClass.string)]


def sequence_spans(token: str) -> list[YamlSpan]:
    if len(token) < 2:
        return [YamlSpan(token)]
    inner = token[1:-1]
    if not inner:
        return [YamlSpan("[", SpanClass.punct), YamlSpan("]", SpanClass.punct)]

    spans = [YamlSpan("[", SpanClass.punct)]
    parts = inner.split(",")
    for i, part in enumerate(parts):
        if part.strip():
            spans.append(YamlSpan(_leading(part)))
            spans.extend(scalar_spans(part.strip()))
            spans.append(YamlSpan(_trailing(part)))
        else:
            spans.append(YamlSpan(part))
        if i < len(parts) - 1:
            spans.append(YamlSpan(",", SpanClass.punct))
    spans.append(YamlSpan("]", SpanClass.punct))
    return spans


def value_spans(value: str) -> list[YamlSpan]:
    """Spans for a value with optional trailing comment; whitespace kept as plain text."""
    leading = _leading(value)
    core = value[len(leading):]
    if not core:
        return [YamlSpan(value)]

    value_part, comment = split_comment(core)
    token = value_part.strip()
    spans = [YamlSpan(leading), YamlSpan(_leading(value_part))]
    if token:
        spans.extend(scalar_spans(token))
    spans.append(YamlSpan(_trailing(value_part)))
    if comment:
        spans.append(YamlSpan(comment, SpanClass.comment))
    return spans


def tokenize_line(line: str) -> list[YamlSpan]:
    """Split one front matter line into classified spans."""
    trimmed = line.strip(HSPACE)
    if not trimmed:
        return []
    if trimmed in ("---", "..."):
        return [YamlSpan(line, SpanClass.punct)]
    if trimmed.startswith("#"):
        return [YamlSpan(line, SpanClass.comment)]

    leading = _leading(line)
    content = line[len(leading):]

    if m := KEY_LINE_RE.match(content):
        dash, key, separator, value = m.groups()
        spans = [YamlSpan(leading)]
        if dash:
            spans += [YamlSpan("-", SpanClass.punct), YamlSpan(dash[1:])]
        before, _, after = separator.partition(":")
        spans += [
            YamlSpan(key, SpanClass.key),
            YamlSpan(before),
            YamlSpan(":", SpanClass.punct),
            YamlSpan(after),
        ]
        return spans + value_spans(value)

    if content.startswith("- ") or content == "-":
        return [YamlSpan(leading), YamlSpan("-", SpanClass.punct)] + value_spans(content[1:])

    return [YamlSpan(leading)] + value_spans(content)


def render_spans(spans: list[YamlSpan]) -> str:
    out = []
    for span in spans:
        if not span.text:
            continue
        text = escape_html(span.text)
        out.append(f'<span class="yaml-{span.cls.value}">{text}</span>' if span.cls else text)
    return "".join(out)


def highlight_line(line: str) -> str:
    return render_spans(tokenize_line(line))


def highlight_front_matter(front_matter: str) -> str:
    """Highlight a raw front matter block (delimiters included) as HTML, line by line."""
    return "\n".join(highlight_line(line) for line in front_matter.split("\n"))

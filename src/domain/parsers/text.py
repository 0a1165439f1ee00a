"""Markup stripping and whitespace normalization for extracted fragments."""

import re

# A tag starts with "<" followed by a letter, "/" or "!"; an unterminated tag runs to the end.
_TAG_PATTERN = re.compile(r"<[A-Za-z/!][^>]*(?:>|\Z)")
_HORIZONTAL_SPACE = re.compile(r"[ \t]+")
_LINE_EDGE_SPACE = re.compile(r"^[ \t]+|[ \t]+$", re.MULTILINE)
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize(raw: str | None) -> str:
    """
    Strip markup and collapse whitespace.

    A bare ``<`` that does not open a tag (``1 < n``, ``a<=b``) is kept.
    Paragraph breaks survive as a single blank line.
    """
    if not raw:
        return ""

    text = _TAG_PATTERN.sub("", str(raw))
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _LINE_EDGE_SPACE.sub("", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()

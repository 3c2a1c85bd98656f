# og_cards/text.py

from __future__ import annotations

_XML_ENTITIES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


class SafeText(str):
    """Text that has already been escaped for embedding in SVG markup."""

    __slots__ = ()


def escape_xml(text) -> SafeText:
    """Sanitize text for SVG output. Already-escaped text passes through untouched."""
    if isinstance(text, SafeText):
        return text
    escaped = str(text)
    for raw, entity in _XML_ENTITIES:
        escaped = escaped.replace(raw, entity)
    return SafeText(escaped)


def wrap_text(text: str, max_width: int) -> list[str]:
    """Greedy first-fit wrap on whitespace. Words longer than max_width get their own line."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= max_width:
            current += " " + word
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines

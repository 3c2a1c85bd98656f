"""Builders for the card URLs that pages put in their og:image tags."""

from __future__ import annotations

from urllib.parse import quote, urlencode

from . import config


def _encode(params: list[tuple[str, str]]) -> str:
    # Same escaping as JavaScript's encodeURIComponent.
    return urlencode(params, quote_via=quote, safe="-_.!~*'()")


def _base(base_url: str | None) -> str:
    return (base_url or config.OG_IMAGE_BASE_URL).rstrip("/")


def baby_name_card_url(slug: str, name: str = "", pronunciation: str = "", meaning: str = "",
                       story: str = "", gender: str = "", base_url: str | None = None) -> str:
    """URL of the baby-name card. The display name falls back to the pronunciation, then the slug."""
    display_name = name or pronunciation or slug.replace("-", " ")
    query = _encode([
        ("name", display_name),
        ("pronunciation", pronunciation),
        ("meaning", meaning),
        ("story", story),
        ("gender", gender),
    ])
    return f"{_base(base_url)}/baby-name/{quote(slug, safe='')}?{query}"


def word_card_url(word_id, sanskrit: str = "", transliteration: str = "", meaning: str = "",
                  base_url: str | None = None) -> str:
    query = _encode([
        ("sanskrit", sanskrit),
        ("transliteration", transliteration),
        ("meaning", meaning),
    ])
    return f"{_base(base_url)}/word/{quote(str(word_id), safe='')}?{query}"

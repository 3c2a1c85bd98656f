# word_of_day.py

from __future__ import annotations

from dataclasses import dataclass

from .og_base import OGCardBase
from .text import escape_xml

TITLE = "Sanskrit Word of the Day"
MEANING_WIDTH = 70
MEANING_Y = 420
MEANING_LINE_HEIGHT = 32


@dataclass(frozen=True)
class WordOfDayCard(OGCardBase):
    sanskrit: str = ""
    transliteration: str = ""
    meaning: str = ""

    route_prefix = "/word/"
    cache_control = "public, max-age=3600"

    @classmethod
    def from_query(cls, path_remainder: str, params: dict[str, str]) -> "WordOfDayCard":
        # The word id in the path only keys the CDN cache.
        return cls(
            sanskrit=params.get("sanskrit", ""),
            transliteration=params.get("transliteration", ""),
            meaning=params.get("meaning", ""),
        )

    def render_body(self) -> str:
        meaning_svg, _ = self._render_wrapped(
            self.meaning, MEANING_WIDTH, MEANING_Y, MEANING_LINE_HEIGHT, 28, "#000000"
        )
        title_svg = self._text_element(80, escape_xml(TITLE), 24, "#666666")
        word_svg = self._text_element(270, escape_xml(self.sanskrit), 90, "#000000", ' font-weight="bold"')
        transliteration_svg = self._text_element(
            370, escape_xml(self.transliteration), 32, "#666666", ' font-style="italic"'
        )

        return f"""  <!-- Title -->
{title_svg}

  <!-- Rounded rect box for word -->
  <rect x="150" y="150" width="900" height="180" rx="20" fill="#FFFFFF" stroke="#000000" stroke-width="2"/>

  <!-- Sanskrit word (centered in box) -->
{word_svg}

  <!-- Transliteration -->
{transliteration_svg}

  <!-- Meaning -->
{meaning_svg}"""

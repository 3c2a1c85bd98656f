# baby_name.py

from __future__ import annotations

from dataclasses import dataclass

from .og_base import OGCardBase
from .text import escape_xml

MEANING_WIDTH = 60
MEANING_Y = 360
MEANING_LINE_HEIGHT = 35
STORY_WIDTH = 80
STORY_GAP = 30
STORY_LINE_HEIGHT = 28


@dataclass(frozen=True)
class BabyNameCard(OGCardBase):
    name: str = ""
    pronunciation: str = ""
    meaning: str = ""
    story: str = ""
    gender: str = ""  # accepted from the query string, not drawn

    route_prefix = "/baby-name/"
    cache_control = "public, max-age=31536000, immutable"

    @classmethod
    def from_query(cls, path_remainder: str, params: dict[str, str]) -> "BabyNameCard":
        name = params.get("name", "")
        if not name:
            name = path_remainder.replace("-", " ")
        return cls(
            name=name,
            pronunciation=params.get("pronunciation", ""),
            meaning=params.get("meaning", ""),
            story=params.get("story", ""),
            gender=params.get("gender", ""),
        )

    def story_offset(self, meaning_line_count: int) -> int:
        return MEANING_Y + meaning_line_count * MEANING_LINE_HEIGHT + STORY_GAP

    def render_body(self) -> str:
        meaning_svg, meaning_count = self._render_wrapped(
            self.meaning, MEANING_WIDTH, MEANING_Y, MEANING_LINE_HEIGHT, 28, "#000000"
        )

        story_svg = ""
        if self.story:
            story_svg, _ = self._render_wrapped(
                self.story, STORY_WIDTH, self.story_offset(meaning_count), STORY_LINE_HEIGHT, 22, "#333333"
            )

        name_svg = self._text_element(230, escape_xml(self.name), 72, "#000000", ' font-weight="bold"')
        pronunciation_svg = self._text_element(
            310, escape_xml(self.pronunciation), 24, "#666666", ' font-style="italic"'
        )

        return f"""  <!-- Rounded rect box for name -->
  <rect x="100" y="140" width="1000" height="140" rx="20" fill="#FFFFFF" stroke="#000000" stroke-width="2"/>

  <!-- Name (centered in box) -->
{name_svg}

  <!-- Pronunciation -->
{pronunciation_svg}

  <!-- Meaning -->
{meaning_svg}

  <!-- Story -->
{story_svg}"""

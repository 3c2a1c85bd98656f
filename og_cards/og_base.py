# og_base.py

from __future__ import annotations

from .text import SafeText, escape_xml, wrap_text

FONT_FAMILY = "system-ui, -apple-system, sans-serif"
BRAND_TEXT = "sanskrit.roj.app"


# ==========================================
# THE SHARED CARD FRAME
# ==========================================
class OGCardBase:
    """Fixed-size social preview card. Subclasses supply the body markup."""

    width = 1200
    height = 630
    center_x = 600
    cache_control = "public, max-age=3600"
    content_type = "image/svg+xml"

    @classmethod
    def from_query(cls, path_remainder: str, params: dict[str, str]):
        """Override this method to build a card from the route remainder and query params."""
        raise NotImplementedError

    def render_body(self) -> str:
        """Override this method to generate the card-specific SVG markup."""
        raise NotImplementedError

    def render(self) -> str:
        return self._render_frame(self.render_body())

    def _render_frame(self, body: str) -> str:
        """Wraps specific content in the bordered canvas with branding."""
        w, h = self.width, self.height
        return f"""<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">
  <!-- Background with 4px border -->
  <rect width="{w}" height="{h}" fill="#FFFFFF" rx="4"/>
  <rect x="4" y="4" width="{w - 8}" height="{h - 8}" fill="#FFFFFF" stroke="#000000" stroke-width="4" rx="4"/>

{body}

  <!-- Branding -->
  <text x="60" y="590" font-family="{FONT_FAMILY}" font-size="20" fill="#666666">{BRAND_TEXT}</text>
</svg>"""

    def _text_element(self, y: int, content: SafeText, font_size: int, fill: str, extra: str = "") -> str:
        return (
            f'  <text x="{self.center_x}" y="{y}" font-family="{FONT_FAMILY}" '
            f'font-size="{font_size}"{extra} fill="{fill}" text-anchor="middle">{content}</text>'
        )

    def _render_wrapped(self, text: str, max_width: int, y_start: int, line_height: int,
                        font_size: int, fill: str) -> tuple[str, int]:
        """Wraps text into centered lines. Returns (svg_str, line_count)."""
        lines = wrap_text(text, max_width)
        svg = "\n".join(
            self._text_element(y_start + i * line_height, escape_xml(line), font_size, fill)
            for i, line in enumerate(lines)
        )
        return svg, len(lines)

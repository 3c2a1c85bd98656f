"""Social preview (Open Graph) SVG cards for baby names and the word of the day."""

from .baby_name import BabyNameCard
from .og_base import OGCardBase
from .routes import CardResponse, RouteNotFound, dispatch
from .text import SafeText, escape_xml, wrap_text
from .urls import baby_name_card_url, word_card_url
from .word_of_day import WordOfDayCard

__all__ = [
    "BabyNameCard",
    "CardResponse",
    "OGCardBase",
    "RouteNotFound",
    "SafeText",
    "WordOfDayCard",
    "baby_name_card_url",
    "dispatch",
    "escape_xml",
    "word_card_url",
    "wrap_text",
]

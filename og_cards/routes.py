# routes.py

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, urlsplit

from .baby_name import BabyNameCard
from .logging_utils import create_logger
from .word_of_day import WordOfDayCard

log = create_logger("routes")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# First matching prefix wins.
ROUTES = (
    (BabyNameCard.route_prefix, BabyNameCard),
    (WordOfDayCard.route_prefix, WordOfDayCard),
)


class RouteNotFound(LookupError):
    def __init__(self, path: str):
        super().__init__(f"No card route for {path!r}")
        self.path = path


@dataclass(frozen=True)
class CardResponse:
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "")


def parse_query(query: str) -> dict[str, str]:
    """Decode a query string; the last occurrence of a repeated key wins."""
    return dict(parse_qsl(query, keep_blank_values=True))


def resolve_route(path: str):
    """Return (card class, path remainder) for a request path."""
    for prefix, card_cls in ROUTES:
        if path.startswith(prefix):
            return card_cls, path[len(prefix):]
    raise RouteNotFound(path)


def dispatch(method: str, url: str) -> CardResponse:
    """Route a request to a card. `url` may be absolute or a path with query string."""
    parts = urlsplit(url)

    if method.upper() == "OPTIONS":
        log.debug("preflight", path=parts.path)
        return CardResponse(200, dict(CORS_HEADERS))

    try:
        card_cls, remainder = resolve_route(parts.path)
    except RouteNotFound as e:
        log.info("route_not_found", method=method, path=e.path)
        return CardResponse(404, {"Content-Type": "text/plain; charset=utf-8"}, b"Not found")

    card = card_cls.from_query(remainder, parse_query(parts.query))
    svg = card.render().encode("utf-8")
    log.info("card_rendered", route=card_cls.route_prefix, key=remainder, bytes=len(svg))

    headers = {"Content-Type": card.content_type, "Cache-Control": card.cache_control}
    headers.update(CORS_HEADERS)
    return CardResponse(200, headers, svg)

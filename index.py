from og_cards.handler import CardRequestHandler
from og_cards.logging_utils import configure_logging

configure_logging()


class handler(CardRequestHandler):
    pass

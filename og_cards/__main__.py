"""Local development server: python -m og_cards"""

from http.server import ThreadingHTTPServer

from . import config
from .handler import CardRequestHandler
from .logging_utils import configure_logging, create_logger


def main():
    configure_logging()
    log = create_logger("server")
    server = ThreadingHTTPServer((config.HOST, config.PORT), CardRequestHandler)
    log.info("server_started", url=f"http://{config.HOST}:{server.server_port}/")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
        log.info("server_stopped")


if __name__ == "__main__":
    main()

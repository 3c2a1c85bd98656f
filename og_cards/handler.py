# handler.py

from http.server import BaseHTTPRequestHandler

from .logging_utils import create_logger
from .routes import CardResponse, dispatch

log = create_logger("handler")


def _respond(handler: BaseHTTPRequestHandler, include_body: bool = True):
    try:
        response = dispatch(handler.command, handler.path)
    except Exception:
        log.exception("dispatch_failed", method=handler.command, path=handler.path)
        response = CardResponse(500, {"Content-Type": "text/plain; charset=utf-8"}, b"Internal Server Error")

    handler.send_response(response.status)
    for name, value in response.headers.items():
        handler.send_header(name, value)
    handler.send_header("Content-Length", str(len(response.body)))
    handler.end_headers()
    if include_body:
        handler.wfile.write(response.body)


class CardRequestHandler(BaseHTTPRequestHandler):
    server_version = "OGCards/1.0"

    def do_GET(self):
        _respond(self)

    # Matched routes do not look at the method.
    do_OPTIONS = do_POST = do_PUT = do_PATCH = do_DELETE = do_GET

    def do_HEAD(self):
        _respond(self, include_body=False)

    def log_message(self, format, *args):
        log.debug("http_access", client=self.client_address[0], message=format % args)

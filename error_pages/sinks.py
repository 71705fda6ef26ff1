import abc
from http.server import BaseHTTPRequestHandler
from typing import Optional

from werkzeug.wrappers import Response

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


class ResponseSink(abc.ABC):
    """Where a rendered page goes: a status code followed by the body"""

    @abc.abstractmethod
    def set_status(self, code: int) -> None:
        raise NotImplementedError()  # pragma: no cover

    @abc.abstractmethod
    def write(self, body: bytes) -> None:
        raise NotImplementedError()  # pragma: no cover


class WerkzeugResponseSink(ResponseSink):
    def __init__(self, response: Optional[Response] = None):
        if response is None:
            response = Response(content_type=HTML_CONTENT_TYPE)
        self.response = response

    def set_status(self, code: int) -> None:
        self.response.status_code = int(code)

    def write(self, body: bytes) -> None:
        self.response.stream.write(body)


class RequestHandlerSink(ResponseSink):
    """Sink for handlers of the standard library's `http.server`"""

    def __init__(self, handler: BaseHTTPRequestHandler):
        self.handler = handler

    def set_status(self, code: int) -> None:
        self.handler.send_response(int(code))
        self.handler.send_header("Content-Type", HTML_CONTENT_TYPE)
        self.handler.end_headers()

    def write(self, body: bytes) -> None:
        self.handler.wfile.write(body)

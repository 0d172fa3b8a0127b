from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from . import __title__, __version__, status
from .errors import UnsupportedMethod
from .status import HttpStatus


class Method(Enum):
    GET = "GET"
    HEAD = "HEAD"
    PUT = "PUT"
    POST = "POST"

    @classmethod
    def from_token(cls, token: str) -> "Method":
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMethod(f"Unsupported HTTP method: {token!r}") from None


@dataclass(frozen=True)
class ContentType:
    mime: str

    def __str__(self) -> str:
        return self.mime


PLAIN_TEXT = ContentType("text/plain")
HTML = ContentType("text/html;charset=utf-8")


@dataclass(frozen=True)
class Request:
    method: Method
    path: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Response:
    status: HttpStatus
    content_type: ContentType
    body: bytes = b""

    @classmethod
    def success(cls, content_type: ContentType, body: bytes) -> "Response":
        return cls(status=status.OK, content_type=content_type, body=body)

    @classmethod
    def error(cls, error_status: HttpStatus, message: str) -> "Response":
        return cls(status=error_status, content_type=PLAIN_TEXT, body=message.encode("utf-8"))

    def without_body(self) -> "Response":
        return replace(self, body=b"")

    def serialize(self, now: Optional[datetime] = None) -> bytes:
        """Render the status line, headers and body as sent on the wire.

        Content-Length is always the exact length of ``body``; the header
        block ends with an empty line even when the body is empty.
        """
        head = "\r\n".join([
            f"HTTP/1.0 {self.status.code} {self.status.reason}",
            f"Server: {__title__}/{__version__}",
            f"Date: {self._http_date(now)}",
            f"Content-Type: {self.content_type.mime}",
            f"Content-Length: {len(self.body)}",
            "\r\n",
        ])
        return head.encode("iso-8859-1") + self.body

    @staticmethod
    def _http_date(now: Optional[datetime] = None) -> str:
        dt = now if now is not None else datetime.now()
        return dt.astimezone().strftime("%a, %d %b %Y %H:%M:%S %z")

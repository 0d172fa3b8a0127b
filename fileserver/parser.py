from typing import Dict

from .errors import InvalidRequest
from .models import Method, Request


def parse_request(text: str) -> Request:
    """Parse raw request text into a :class:`Request`.

    The request line must carry method, path and version, and the text must
    span at least three lines (request line, terminator, trailing marker).
    Header lines that do not split into exactly one name and one value are
    skipped. The path is kept verbatim: no percent-decoding or normalization.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    parts = lines[0].split(" ")
    if len(lines) < 3 or len(parts) < 3:
        raise InvalidRequest("Received invalid request")

    method = Method.from_token(parts[0])

    headers: Dict[str, str] = {}
    for line in lines[1:]:
        if not line:
            break
        pieces = line.split(":")
        if len(pieces) == 2:
            headers[pieces[0]] = pieces[1].strip()

    return Request(method=method, path=parts[1], headers=headers)

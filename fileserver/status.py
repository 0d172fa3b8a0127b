from dataclasses import dataclass


@dataclass(frozen=True)
class HttpStatus:
    code: int
    reason: str


OK = HttpStatus(200, "OK")

BAD_REQUEST = HttpStatus(400, "Bad Request")
FORBIDDEN = HttpStatus(403, "Forbidden")
NOT_FOUND = HttpStatus(404, "Not Found")

INTERNAL_ERROR = HttpStatus(500, "Internal Server Error")
NOT_IMPLEMENTED = HttpStatus(501, "Not Implemented")

from . import status
from .status import HttpStatus


class HTTPError(Exception):
    """Request failure that maps onto a response status."""

    status: HttpStatus = status.INTERNAL_ERROR


class InvalidRequest(HTTPError):
    status = status.BAD_REQUEST


class UnsupportedMethod(HTTPError):
    status = status.NOT_IMPLEMENTED


class MethodNotImplemented(HTTPError):
    status = status.NOT_IMPLEMENTED


class PathForbidden(HTTPError):
    status = status.FORBIDDEN


class FileNotFound(HTTPError):
    status = status.NOT_FOUND


class ReadFailure(HTTPError):
    status = status.INTERNAL_ERROR

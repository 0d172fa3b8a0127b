import logging
from typing import Callable, Iterable

from .errors import HTTPError, MethodNotImplemented
from .fs import FileSystem
from .listing import render_listing
from .models import HTML, PLAIN_TEXT, Method, Request, Response
from .parser import parse_request

logger = logging.getLogger(__name__)

Renderer = Callable[[Iterable[str], str], bytes]


class FileHandler:
    def __init__(self, filesystem: FileSystem, renderer: Renderer = render_listing) -> None:
        self.filesystem = filesystem
        self.renderer = renderer

    def handle_raw(self, text: str) -> Response:
        """Parse and dispatch one request; failures come back as error responses."""
        try:
            req = parse_request(text)
        except HTTPError as e:
            logger.debug("Rejected request: %s", e)
            return Response.error(e.status, str(e))
        return self.handle(req)

    def handle(self, req: Request) -> Response:
        try:
            if req.method is Method.GET:
                return self._get(req.path)
            if req.method is Method.HEAD:
                # Same status and content type as GET, never a body.
                return self._get(req.path).without_body()
            raise MethodNotImplemented(f"Method {req.method.value} is not implemented.")
        except HTTPError as e:
            resp = Response.error(e.status, str(e))
            return resp.without_body() if req.method is Method.HEAD else resp

    def _get(self, path: str) -> Response:
        if path.endswith("/"):
            names = self.filesystem.list_dir(path)
            return Response.success(HTML, self.renderer(names, path))

        return Response.success(PLAIN_TEXT, self.filesystem.read_file(path))

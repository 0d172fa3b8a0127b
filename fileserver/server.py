import logging
import socket
import threading
from typing import Optional, Tuple

from .config import Config
from .engine import HTTPEngine
from .fs import FileSystem
from .handler import FileHandler

logger = logging.getLogger(__name__)


class HTTPServer:
    """Accepts connections one at a time and serves each to completion."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.engine = HTTPEngine(config, FileHandler(FileSystem(config.root)))

        # Created on bind()
        self._listen_sock: Optional[socket.socket] = None

        self._stop_event = threading.Event()

    @property
    def server_address(self) -> Tuple[str, int]:
        assert self._listen_sock is not None
        return self._listen_sock.getsockname()[:2]

    def run(self) -> None:
        self.bind()
        try:
            self.serve_forever()
        finally:
            self._cleanup()

    def bind(self) -> None:
        """Open the listening socket; port 0 picks a free port, see ``server_address``."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

        sock.bind((self.config.host, self.config.port))
        sock.listen(self.config.backlog)

        sock.settimeout(self.config.accept_timeout)

        self._listen_sock = sock
        host, port = self.server_address
        logger.info("Serving %s on %s:%d", self.engine.request_handler.filesystem.root_real, host, port)

    def stop(self) -> None:
        self._stop_event.set()

        # wakes serve_forever without waiting out accept_timeout
        if self._listen_sock is not None:
            try:
                self._listen_sock.close()
            except OSError:
                pass

    def _cleanup(self) -> None:
        if self._listen_sock is not None:
            try:
                self._listen_sock.close()
            except OSError:
                pass
        self._listen_sock = None

    def serve_forever(self) -> None:
        """Serve connections in arrival order until ``stop()`` is called."""
        assert self._listen_sock is not None
        self._stop_event.clear()

        while not self._stop_event.is_set():
            try:
                conn, addr = self._listen_sock.accept()
            except socket.timeout:
                continue
            except OSError:
                # listener closed
                break

            try:
                conn.settimeout(self.config.recv_timeout)
            except OSError:
                conn.close()
                continue

            peer = f"{addr[0]}:{addr[1]}"
            try:
                self.engine.handle_connection(conn, peer)
            except Exception:
                logger.exception("Unhandled error while serving %s", peer)

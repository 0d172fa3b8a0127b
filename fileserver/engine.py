import logging
import socket

from .config import Config
from .handler import FileHandler

logger = logging.getLogger(__name__)

TERMINATORS = (b"\r\n\r\n", b"\n\n")


class HTTPEngine:
    def __init__(self, config: Config, request_handler: FileHandler) -> None:
        self.config = config
        self.request_handler = request_handler

    def handle_connection(self, conn: socket.socket, peer: str = "-") -> None:
        try:
            self.process(conn, peer)
        finally:
            try:
                conn.close()
            except OSError:
                pass

    def process(self, conn: socket.socket, peer: str = "-") -> None:
        try:
            raw = self._read_request(conn)
            if raw is None:
                logger.debug("%s closed the connection before a full request", peer)
                return

            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("%s sent non-text bytes, dropping request", peer)
                return

            resp = self.request_handler.handle_raw(text)
            conn.sendall(resp.serialize())
        except (socket.timeout, TimeoutError):
            logger.debug("%s timed out", peer)
            return
        except OSError as e:
            logger.debug("%s connection error: %s", peer, e)
            return

        logger.info('%s "%s" %d', peer, text.split("\n", 1)[0].rstrip("\r"), resp.status.code)

    def _read_request(self, conn: socket.socket) -> bytes | None:
        buf = bytearray()
        while True:
            if any(t in buf for t in TERMINATORS):
                return bytes(buf)
            if len(buf) > self.config.max_header_bytes:
                return bytes(buf)
            chunk = conn.recv(self.config.chunk_size)
            if chunk == b"":
                return None
            buf.extend(chunk)

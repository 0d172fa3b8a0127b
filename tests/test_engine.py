import logging
import socket

import pytest

from fileserver.config import Config
from fileserver.engine import HTTPEngine


@pytest.fixture
def engine(handler):
    return HTTPEngine(Config(recv_timeout=2.0), handler)


def _exchange(engine, payload: bytes) -> bytes:
    server_side, client_side = socket.socketpair()
    server_side.settimeout(2.0)
    with client_side:
        client_side.sendall(payload)
        engine.handle_connection(server_side, "test")
        chunks = []
        while True:
            chunk = client_side.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def test_serves_file(engine):
    raw = _exchange(engine, b"GET /readme.txt HTTP/1.0\r\nHost: x\r\n\r\n")
    head, _, body = raw.partition(b"\r\n\r\n")
    assert head.startswith(b"HTTP/1.0 200 OK\r\n")
    assert b"Content-Length: 5" in head
    assert body == b"hello"


def test_bare_newline_framing(engine):
    raw = _exchange(engine, b"GET /missing HTTP/1.0\n\n")
    assert raw.startswith(b"HTTP/1.0 404 Not Found\r\n")


def test_head_sends_headers_only(engine):
    raw = _exchange(engine, b"HEAD /readme.txt HTTP/1.0\r\n\r\n")
    head, _, body = raw.partition(b"\r\n\r\n")
    assert b"Content-Length: 0" in head
    assert body == b""


def test_non_text_request_gets_no_response(engine, caplog):
    with caplog.at_level(logging.WARNING, logger="fileserver.engine"):
        raw = _exchange(engine, b"GET /\xff\xfe HTTP/1.0\r\n\r\n")
    assert raw == b""
    assert "non-text" in caplog.text


def test_peer_closing_early_gets_no_response(engine):
    server_side, client_side = socket.socketpair()
    client_side.sendall(b"GET / HTTP/1.0\r\n")
    client_side.shutdown(socket.SHUT_WR)
    engine.handle_connection(server_side, "test")
    assert client_side.recv(4096) == b""
    client_side.close()


def test_access_log_line(engine, caplog):
    with caplog.at_level(logging.INFO, logger="fileserver.engine"):
        _exchange(engine, b"GET /missing.txt HTTP/1.0\r\n\r\n")
    assert 'test "GET /missing.txt HTTP/1.0" 404' in caplog.text


@pytest.mark.parametrize("path", [b"/a\x00b", b"/a\x00b/"])
def test_nul_in_path_gets_bad_request(engine, path):
    raw = _exchange(engine, b"GET " + path + b" HTTP/1.0\r\n\r\n")
    assert raw.startswith(b"HTTP/1.0 400 Bad Request\r\n")

from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    host: str = "127.0.0.1"
    port: int = 8000
    root: str = "."
    backlog: int = 128
    recv_timeout: float = 2.0
    accept_timeout: float = 1.0
    max_header_bytes: int = 65536
    chunk_size: int = 1000
    debug: bool = False

import pytest

from fileserver.fs import FileSystem
from fileserver.handler import FileHandler


@pytest.fixture
def docroot(tmp_path):
    (tmp_path / "readme.txt").write_bytes(b"hello")
    (tmp_path / "a.txt").write_text("alpha")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "nested.bin").write_bytes(bytes(range(256)))
    (sub / "deeper").mkdir()
    return tmp_path


@pytest.fixture
def handler(docroot):
    return FileHandler(FileSystem(str(docroot)))

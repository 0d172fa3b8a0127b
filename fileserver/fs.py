import logging
import os
from typing import List

from .errors import FileNotFound, InvalidRequest, PathForbidden, ReadFailure

logger = logging.getLogger(__name__)


class FileSystem:
    """Read-only view of the directory tree below ``root``."""

    def __init__(self, root: str) -> None:
        self.root_real = os.path.realpath(root)

    def resolve(self, url_path: str) -> str:
        """Map a server-relative path onto the host filesystem.

        The join is normalized lexically; anything landing outside the root
        (``/../secret`` and the like) is refused, as is a path carrying a NUL.
        """
        if "\x00" in url_path:
            raise InvalidRequest("Path contains a NUL character")

        rel = url_path.lstrip("/")
        candidate = os.path.normpath(os.path.join(self.root_real, rel))

        root_prefix = self.root_real.rstrip(os.sep) + os.sep
        if candidate != self.root_real and not candidate.startswith(root_prefix):
            raise PathForbidden(f"Path escapes the served root: {url_path}")
        return candidate

    def read_file(self, url_path: str) -> bytes:
        abs_path = self.resolve(url_path)
        try:
            f = open(abs_path, "rb")
        except OSError:
            raise FileNotFound("Could not find file at requested path.") from None

        with f:
            try:
                data = f.read()
            except OSError:
                raise ReadFailure("Failed to read file.") from None

        logger.debug("Read %d bytes from file %s", len(data), abs_path)
        return data

    def list_dir(self, url_path: str) -> List[str]:
        """Return the immediate entries of a directory, directories suffixed with ``/``.

        Entries whose name is not valid text or whose type cannot be read are
        left out instead of failing the whole listing.
        """
        abs_path = self.resolve(url_path)
        names = []
        try:
            with os.scandir(abs_path) as it:
                for entry in it:
                    try:
                        entry.name.encode("utf-8")
                        is_dir = entry.is_dir()
                    except (UnicodeEncodeError, OSError):
                        logger.debug("Skipping unreadable entry in %s", abs_path)
                        continue
                    names.append(entry.name + "/" if is_dir else entry.name)
        except OSError:
            raise ReadFailure("Failed to list files.") from None
        return names

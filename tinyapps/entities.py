"""Gallery entities: albums and the pictures they hold."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote, unquote, urlparse

_DRIVE_PATH = re.compile(r"^/[A-Za-z]:/")


@dataclass
class Album:
    """A named album; ``id`` is -1 until it is stored in the database."""

    name: str = ""
    id: int = -1


@dataclass
class Picture:
    """A picture referenced by URL; ids are -1 until stored in an album."""

    file_url: str = ""
    id: int = -1
    album_id: int = -1

    @classmethod
    def from_path(cls, path: str) -> Picture:
        """Build a picture whose URL points at a local file path."""
        if not path:
            return cls("")
        if re.match(r"^[A-Za-z]:/", path):
            path = "/" + path
        quoted = quote(path, safe="/:")
        if path.startswith("/"):
            return cls(f"file://{quoted}")
        return cls(f"file:{quoted}")

    def file_name(self) -> str:
        """The last segment of the URL path, decoded."""
        path = unquote(urlparse(self.file_url).path)
        return path.rsplit("/", 1)[-1]

    def local_file(self) -> str:
        """The local file path of a ``file`` URL, or an empty string otherwise."""
        parsed = urlparse(self.file_url)
        if parsed.scheme != "file":
            return ""
        path = unquote(parsed.path)
        if parsed.netloc and parsed.netloc != "localhost":
            return f"//{parsed.netloc}{path}"
        if _DRIVE_PATH.match(path):
            return path[1:]
        return path
"""SQLite data access for albums and pictures."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, ClassVar, Sequence

from .entities import Album, Picture

DATABASE_FILENAME = "gallery.db"

logger = logging.getLogger(__name__)


def _execute(connection: sqlite3.Connection, sql: str, params: Sequence[Any] | dict = ()) -> sqlite3.Cursor:
    try:
        cursor = connection.execute(sql, params)
    except sqlite3.Error as exc:
        logger.warning("Query KO: %s", exc)
        logger.warning("Query text: %s", sql)
        raise
    logger.debug("Query OK: %s", sql)
    return cursor


def _has_table(connection: sqlite3.Connection, name: str) -> bool:
    cursor = _execute(
        connection,
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
        (name,),
    )
    return cursor.fetchone() is not None


class AlbumDao:
    """Create, read, update and delete albums."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def init(self) -> None:
        """Create the albums table if it does not exist yet."""
        if not _has_table(self._connection, "albums"):
            _execute(
                self._connection,
                "CREATE TABLE albums (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT)",
            )

    def add_album(self, album: Album) -> None:
        """Store the album and set its id."""
        cursor = _execute(
            self._connection,
            "INSERT INTO albums (name) VALUES (:name)",
            {"name": album.name},
        )
        album.id = cursor.lastrowid

    def update_album(self, album: Album) -> None:
        _execute(
            self._connection,
            "UPDATE albums SET name = (:name) WHERE id = (:id)",
            {"name": album.name, "id": album.id},
        )

    def remove_album(self, album_id: int) -> None:
        _execute(self._connection, "DELETE FROM albums WHERE id = (:id)", {"id": album_id})

    def albums(self) -> list[Album]:
        cursor = _execute(self._connection, "SELECT id, name FROM albums ORDER BY id")
        return [Album(name=name, id=album_id) for album_id, name in cursor]


class PictureDao:
    """Create, read and delete pictures belonging to albums."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def init(self) -> None:
        """Create the pictures table if it does not exist yet."""
        if not _has_table(self._connection, "pictures"):
            _execute(
                self._connection,
                "CREATE TABLE pictures"
                " (id INTEGER PRIMARY KEY AUTOINCREMENT, album_id INTEGER, url TEXT)",
            )

    def add_picture_to_album(self, album_id: int, picture: Picture) -> None:
        """Store the picture in an album and set its id and album id."""
        cursor = _execute(
            self._connection,
            "INSERT INTO pictures (album_id, url) VALUES (:album_id, :url)",
            {"album_id": album_id, "url": picture.file_url},
        )
        picture.id = cursor.lastrowid
        picture.album_id = album_id

    def remove_picture(self, picture_id: int) -> None:
        _execute(self._connection, "DELETE FROM pictures WHERE id = (:id)", {"id": picture_id})

    def remove_pictures_for_album(self, album_id: int) -> None:
        _execute(
            self._connection,
            "DELETE FROM pictures WHERE album_id = (:album_id)",
            {"album_id": album_id},
        )

    def pictures_for_album(self, album_id: int) -> list[Picture]:
        cursor = _execute(
            self._connection,
            "SELECT id, album_id, url FROM pictures WHERE album_id = (:album_id) ORDER BY id",
            {"album_id": album_id},
        )
        return [
            Picture(file_url=url or "", id=picture_id, album_id=owner)
            for picture_id, owner, url in cursor
        ]


class DatabaseManager:
    """Owns the database connection and the data access objects."""

    _instance: ClassVar[DatabaseManager | None] = None

    def __init__(self, path: str = DATABASE_FILENAME) -> None:
        self._connection = sqlite3.connect(path, isolation_level=None)
        self.album_dao = AlbumDao(self._connection)
        self.picture_dao = PictureDao(self._connection)
        self.album_dao.init()
        self.picture_dao.init()

    @staticmethod
    def instance() -> DatabaseManager:
        """The shared manager using the default database file."""
        if DatabaseManager._instance is None:
            DatabaseManager._instance = DatabaseManager()
        return DatabaseManager._instance

    def close(self) -> None:
        """Close the connection; a closed shared manager is replaced on next use."""
        self._connection.close()
        if DatabaseManager._instance is self:
            DatabaseManager._instance = None

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
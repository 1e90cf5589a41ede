"""List models of albums and pictures backed by the gallery database."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto
from typing import Any, Callable

from .dao import DatabaseManager
from .entities import Album, Picture


class Signal:
    """A list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        self._callbacks.append(callback)

    def emit(self, *args: Any) -> None:
        for callback in list(self._callbacks):
            callback(*args)


class Role(Enum):
    """Kinds of data a model row can provide."""

    DISPLAY = auto()
    DECORATION = auto()
    ID = auto()
    NAME = auto()
    URL = auto()
    FILE_PATH = auto()


class _ListModel:
    def __init__(self) -> None:
        self.rows_inserted = Signal()
        self.rows_removed = Signal()
        self.data_changed = Signal()
        self.model_reset = Signal()

    def row_count(self) -> int:
        raise NotImplementedError

    def _valid(self, row: int) -> bool:
        return 0 <= row < self.row_count()

    def _valid_range(self, row: int, count: int) -> bool:
        return 0 <= row < self.row_count() and count >= 0 and row + count <= self.row_count()


class AlbumModel(_ListModel):
    """The albums stored in the database, as an ordered list."""

    def __init__(self, db: DatabaseManager | None = None) -> None:
        super().__init__()
        self._db = db if db is not None else DatabaseManager.instance()
        self._albums: list[Album] = self._db.album_dao.albums()

    def add_album(self, album: Album) -> int:
        """Store a copy of the album and return its row."""
        row = self.row_count()
        stored = replace(album)
        self._db.album_dao.add_album(stored)
        self._albums.append(stored)
        self.rows_inserted.emit(row, row)
        return row

    def row_count(self) -> int:
        return len(self._albums)

    def data(self, row: int, role: Role = Role.DISPLAY) -> Any:
        if not self._valid(row):
            return None
        album = self._albums[row]
        if role is Role.ID:
            return album.id
        if role in (Role.NAME, Role.DISPLAY):
            return album.name
        return None

    def set_data(self, row: int, value: Any, role: Role) -> bool:
        """Rename the album at ``row``; only the name role is editable."""
        if not self._valid(row) or role is not Role.NAME:
            return False
        album = self._albums[row]
        album.name = str(value)
        self._db.album_dao.update_album(album)
        self.data_changed.emit(row)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        if not self._valid_range(row, count):
            return False
        for album in reversed(self._albums[row:row + count]):
            self._db.album_dao.remove_album(album.id)
        del self._albums[row:row + count]
        if count:
            self.rows_removed.emit(row, row + count - 1)
        return True

    def role_names(self) -> dict[Role, str]:
        return {Role.ID: "id", Role.NAME: "name"}


class PictureModel(_ListModel):
    """The pictures of the currently selected album."""

    def __init__(self, album_model: AlbumModel, db: DatabaseManager | None = None) -> None:
        super().__init__()
        self._db = db if db is not None else DatabaseManager.instance()
        self.album_id = -1
        self._pictures: list[Picture] = []
        album_model.rows_removed.connect(lambda first, last: self.delete_pictures_for_album())

    def add_picture(self, picture: Picture) -> int:
        """Store a copy of the picture in the current album and return its row."""
        row = self.row_count()
        stored = replace(picture)
        self._db.picture_dao.add_picture_to_album(self.album_id, stored)
        self._pictures.append(stored)
        self.rows_inserted.emit(row, row)
        return row

    def row_count(self) -> int:
        return len(self._pictures)

    def data(self, row: int, role: Role = Role.DISPLAY) -> Any:
        if not self._valid(row):
            return None
        picture = self._pictures[row]
        if role is Role.DISPLAY:
            return picture.file_name()
        if role is Role.URL:
            return picture.file_url
        if role is Role.FILE_PATH:
            return picture.local_file()
        return None

    def remove_rows(self, row: int, count: int) -> bool:
        if not self._valid_range(row, count):
            return False
        for picture in reversed(self._pictures[row:row + count]):
            self._db.picture_dao.remove_picture(picture.id)
        del self._pictures[row:row + count]
        if count:
            self.rows_removed.emit(row, row + count - 1)
        return True

    def role_names(self) -> dict[Role, str]:
        return {Role.FILE_PATH: "filepath"}

    def set_album_id(self, album_id: int) -> None:
        """Show the pictures of another album."""
        self.album_id = album_id
        self._load_pictures(album_id)
        self.model_reset.emit()

    def clear_album(self) -> None:
        self.set_album_id(-1)

    def delete_pictures_for_album(self) -> None:
        """Delete every picture of the current album and clear the model."""
        self._db.picture_dao.remove_pictures_for_album(self.album_id)
        self.clear_album()

    def _load_pictures(self, album_id: int) -> None:
        if album_id <= 0:
            self._pictures = []
        else:
            self._pictures = self._db.picture_dao.pictures_for_album(album_id)
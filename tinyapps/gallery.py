"""The gallery's interaction logic: albums, their pictures and the picture viewer."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .dao import DatabaseManager
from .entities import Album, Picture
from .models import AlbumModel, PictureModel, Role
from .thumbnails import ThumbnailProxyModel


class View(Enum):
    """Which screen of the gallery is shown."""

    GALLERY = "gallery"
    PICTURE = "picture"


class GallerySession:
    """Album list, album view and picture viewer sharing one selection state."""

    def __init__(self, db: DatabaseManager | None = None) -> None:
        self.album_model = AlbumModel(db)
        self.picture_model = PictureModel(self.album_model, db)
        self.thumbnails = ThumbnailProxyModel(self.picture_model)
        self.view = View.GALLERY

        self.selected_album: int | None = None
        self.album_name = ""
        self.album_actions_visible = False

        self.current_picture: int | None = None
        self.picture_name = ""
        self.picture_path = ""
        self.previous_enabled = False
        self.next_enabled = False
        self.delete_enabled = False

        self.album_model.data_changed.connect(self._album_data_changed)
        self.picture_model.model_reset.connect(lambda: self._select_picture(None))

    # Albums

    def create_album(self, name: str) -> int:
        """Add an album with a non-empty name, select it and return its row."""
        if not name:
            raise ValueError("album name must not be empty")
        row = self.album_model.add_album(Album(name))
        self.select_album(row)
        return row

    def select_album(self, row: int | None) -> None:
        """Select the album at ``row``, or clear the selection with None."""
        if row is None:
            self._clear_album()
            return
        if not 0 <= row < self.album_model.row_count():
            raise IndexError(f"no album at row {row}")
        self.selected_album = row
        self._load_album(row)

    def edit_album(self, name: str) -> bool:
        """Rename the selected album; False when no album is selected."""
        if self.selected_album is None:
            return False
        if not name:
            raise ValueError("album name must not be empty")
        return self.album_model.set_data(self.selected_album, name, Role.NAME)

    def delete_album(self) -> bool:
        """Delete the selected album and select a neighbour; False when none is selected."""
        if self.selected_album is None:
            return False
        row = self.selected_album
        self.album_model.remove_rows(row, 1)
        count = self.album_model.row_count()
        if 0 <= row - 1 < count:
            self.select_album(row - 1)
        elif row < count:
            self.select_album(row)
        else:
            self.select_album(None)
        return True

    def _album_data_changed(self, row: int) -> None:
        if row == self.selected_album:
            self._load_album(row)

    def _load_album(self, row: int) -> None:
        self.picture_model.set_album_id(self.album_model.data(row, Role.ID))
        self.album_name = self.album_model.data(row, Role.DISPLAY)
        self.album_actions_visible = True

    def _clear_album(self) -> None:
        self.selected_album = None
        self.album_name = ""
        self.album_actions_visible = False

    # Pictures

    def add_pictures(self, paths: Iterable[str]) -> int | None:
        """Add files to the selected album and make the last one current."""
        if self.selected_album is None:
            raise RuntimeError("no album selected")
        last_row = None
        for path in paths:
            last_row = self.picture_model.add_picture(Picture.from_path(path))
        if last_row is not None:
            self._select_picture(last_row)
        return last_row

    def activate_picture(self, row: int) -> None:
        """Open the picture at ``row`` in the picture viewer."""
        if not 0 <= row < self.picture_model.row_count():
            raise IndexError(f"no picture at row {row}")
        self._select_picture(row)
        self.view = View.PICTURE

    def next_picture(self) -> None:
        current = -1 if self.current_picture is None else self.current_picture
        self._select_picture(current + 1)

    def previous_picture(self) -> None:
        current = -1 if self.current_picture is None else self.current_picture
        self._select_picture(current - 1)

    def delete_picture(self) -> None:
        """Delete the current picture and show a neighbour, or go back to the gallery."""
        if self.current_picture is not None:
            row = self.current_picture
            self.picture_model.remove_rows(row, 1)
            count = self.picture_model.row_count()
            if 0 <= row - 1 < count:
                self._select_picture(row - 1)
                return
            if row < count:
                self._select_picture(row)
                return
            self._select_picture(None)
        self.back_to_gallery()

    def back_to_gallery(self) -> None:
        self.view = View.GALLERY

    def _select_picture(self, row: int | None) -> None:
        count = self.picture_model.row_count()
        if row is None or not 0 <= row < count:
            self.current_picture = None
            self.picture_name = ""
            self.picture_path = ""
            self.delete_enabled = False
            return
        self.current_picture = row
        self.picture_name = self.thumbnails.data(row, Role.DISPLAY)
        self.picture_path = self.thumbnails.data(row, Role.FILE_PATH)
        self.previous_enabled = row > 0
        self.next_enabled = row < count - 1
        self.delete_enabled = True
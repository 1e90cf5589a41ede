"""Thumbnail images for the pictures of an album, and the banner drawn over them."""

from __future__ import annotations

from typing import Any

from PIL import Image, ImageOps

from .models import PictureModel, Role

THUMBNAIL_SIZE = 350

BANNER_HEIGHT = 20
BANNER_COLOR = 0x303030
BANNER_ALPHA = 200
BANNER_TEXT_COLOR = 0xFFFFFF
HIGHLIGHT_ALPHA = 100


def banner_box(x: int, y: int, width: int) -> tuple[int, int, int, int]:
    """The (x, y, width, height) box of the name banner over a thumbnail."""
    return x, y, width, BANNER_HEIGHT


def _load_thumbnail(path: str) -> Image.Image | None:
    try:
        with Image.open(path) as image:
            image.load()
            return ImageOps.contain(
                image, (THUMBNAIL_SIZE, THUMBNAIL_SIZE), method=Image.Resampling.LANCZOS
            )
    except (OSError, ValueError):
        return None


class ThumbnailProxyModel:
    """Passes picture data through and adds a scaled thumbnail as decoration."""

    def __init__(self, picture_model: PictureModel) -> None:
        self.picture_model = picture_model
        self._thumbnails: dict[str, Image.Image | None] = {}
        picture_model.model_reset.connect(self.reload_thumbnails)
        picture_model.rows_inserted.connect(
            lambda first, last: self.generate_thumbnails(first, last - first + 1)
        )

    def data(self, row: int, role: Role = Role.DISPLAY) -> Any:
        """The source data for ``row``, or its thumbnail for the decoration role."""
        if role is not Role.DECORATION:
            return self.picture_model.data(row, role)
        path = self.picture_model.data(row, Role.FILE_PATH)
        if path is None:
            return None
        return self._thumbnails.get(path)

    def size_hint(self, row: int) -> tuple[int, int]:
        """The size of the thumbnail at ``row``; (0, 0) when there is none."""
        thumbnail = self.data(row, Role.DECORATION)
        if thumbnail is None:
            return 0, 0
        return thumbnail.size

    def generate_thumbnails(self, start: int, count: int) -> None:
        """Build thumbnails for ``count`` rows from ``start``."""
        row_count = self.picture_model.row_count()
        if not 0 <= start < row_count:
            return
        for row in range(start, min(start + count, row_count)):
            path = self.picture_model.data(row, Role.FILE_PATH)
            self._thumbnails[path] = _load_thumbnail(path)

    def reload_thumbnails(self) -> None:
        """Drop every thumbnail and build them again for all rows."""
        self._thumbnails.clear()
        self.generate_thumbnails(0, self.picture_model.row_count())
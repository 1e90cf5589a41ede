import pytest
from PIL import Image

from tinyapps.dao import DatabaseManager
from tinyapps.entities import Album, Picture
from tinyapps.models import AlbumModel, PictureModel, Role
from tinyapps.thumbnails import (
    BANNER_HEIGHT,
    THUMBNAIL_SIZE,
    ThumbnailProxyModel,
    banner_box,
)


@pytest.fixture
def db():
    manager = DatabaseManager(":memory:")
    yield manager
    manager.close()


@pytest.fixture
def pictures(db):
    albums = AlbumModel(db)
    row = albums.add_album(Album("holiday"))
    model = PictureModel(albums, db)
    model.set_album_id(albums.data(row, Role.ID))
    return model


def _image(tmp_path, name, size):
    path = tmp_path / name
    Image.new("RGB", size, (10, 20, 30)).save(path)
    return str(path)


def test_banner_box_uses_banner_height():
    assert banner_box(3, 4, 120) == (3, 4, 120, BANNER_HEIGHT)


def test_thumbnail_generated_on_insert_keeps_aspect(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    path = _image(tmp_path, "wide.png", (700, 350))
    pictures.add_picture(Picture.from_path(path))
    thumbnail = proxy.data(0, Role.DECORATION)
    width, height = thumbnail.size
    assert max(width, height) == THUMBNAIL_SIZE
    assert width == 2 * height


def test_small_image_is_scaled_up(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    path = _image(tmp_path, "tall.png", (20, 40))
    pictures.add_picture(Picture.from_path(path))
    width, height = proxy.size_hint(0)
    assert height == THUMBNAIL_SIZE
    assert height == 2 * width


def test_other_roles_pass_through(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    path = _image(tmp_path, "a.png", (10, 10))
    pictures.add_picture(Picture.from_path(path))
    assert proxy.data(0, Role.FILE_PATH) == path
    assert proxy.data(0, Role.DISPLAY) == "a.png"


def test_missing_file_has_no_thumbnail(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    pictures.add_picture(Picture.from_path(str(tmp_path / "gone.png")))
    assert proxy.data(0, Role.DECORATION) is None
    assert proxy.size_hint(0) == (0, 0)


def test_invalid_row_has_no_data(pictures):
    proxy = ThumbnailProxyModel(pictures)
    assert proxy.data(5, Role.DECORATION) is None
    assert proxy.size_hint(5) == (0, 0)


def test_reset_reloads_thumbnails(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    path = _image(tmp_path, "b.png", (30, 30))
    pictures.add_picture(Picture.from_path(path))
    album_id = pictures.album_id
    pictures.clear_album()
    assert proxy.data(0, Role.DECORATION) is None
    pictures.set_album_id(album_id)
    assert proxy.size_hint(0) == (THUMBNAIL_SIZE, THUMBNAIL_SIZE)


def test_generate_out_of_range_start_is_ignored(pictures, tmp_path):
    proxy = ThumbnailProxyModel(pictures)
    path = _image(tmp_path, "c.png", (30, 30))
    pictures.add_picture(Picture.from_path(path))
    proxy.reload_thumbnails()
    proxy.generate_thumbnails(7, 3)
    assert proxy.size_hint(0) == (THUMBNAIL_SIZE, THUMBNAIL_SIZE)
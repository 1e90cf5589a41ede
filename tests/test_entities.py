import pytest

from tinyapps.entities import Album, Picture


def test_album_defaults_to_unsaved_with_empty_name():
    album = Album()
    assert album.id == -1
    assert album.name == ""


def test_album_keeps_given_name():
    album = Album("Holidays")
    assert album.name == "Holidays"
    assert album.id == -1


def test_picture_defaults():
    picture = Picture()
    assert picture.file_url == ""
    assert picture.id == -1
    assert picture.album_id == -1


def test_from_path_absolute_builds_file_url():
    picture = Picture.from_path("/tmp/photos/cat.jpg")
    assert picture.file_url == "file:///tmp/photos/cat.jpg"


@pytest.mark.parametrize(
    "path",
    ["/tmp/photos/cat.jpg", "/tmp/my pics/a b.png", "relative/dog.png", "/tmp/100%/x.jpg"],
)
def test_from_path_round_trips_through_local_file(path):
    assert Picture.from_path(path).local_file() == path


def test_file_name_is_last_segment_decoded():
    picture = Picture.from_path("/tmp/my pics/a b.png")
    assert picture.file_name() == "a b.png"


def test_empty_path_gives_empty_url():
    picture = Picture.from_path("")
    assert picture.file_url == ""
    assert picture.local_file() == ""
    assert picture.file_name() == ""


def test_non_file_url_has_no_local_file():
    picture = Picture("https://example.com/images/x.png")
    assert picture.local_file() == ""
    assert picture.file_name() == "x.png"


def test_drive_letter_path_round_trips():
    path = "C:/Users/someone/pic.jpg"
    picture = Picture.from_path(path)
    assert picture.file_url.startswith("file:///C:/")
    assert picture.local_file() == path


def test_pictures_compare_by_fields():
    a = Picture.from_path("/tmp/a.jpg")
    b = Picture.from_path("/tmp/a.jpg")
    assert a == b
    b.id = 3
    assert a != b and a.file_url == b.file_url
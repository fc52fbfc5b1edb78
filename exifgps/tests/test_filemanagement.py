import pytest
import structlog

from exifgps.common.filemanagement import (
    classify_path,
    file_extension,
    find_images,
    is_image,
    walk_files,
)
from exifgps.common.types import PathKind
from exifgps.exceptions import PathNotFoundError


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def test_classify_path(tmp_path):
    assert classify_path(tmp_path) is PathKind.dir
    assert classify_path(str(touch(tmp_path / "a.jpg"))) is PathKind.file


def test_classify_missing_path(tmp_path):
    with pytest.raises(PathNotFoundError) as exc_info:
        classify_path(tmp_path / "nope")
    assert "does not exist" in str(exc_info.value)


@pytest.mark.parametrize(
    "path, extension",
    [
        ("a.jpg", ".jpg"),
        ("dir.d/a", ""),
        ("a.tar.gz", ".gz"),
        ("photos/.png", ".png"),
    ],
)
def test_file_extension(path, extension):
    assert file_extension(path) == extension


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a.jpg", True),
        ("a.jpeg", True),
        ("a.png", True),
        ("a.JPG", False),
        ("a.gif", False),
        ("a", False),
    ],
)
def test_is_image(path, expected):
    assert is_image(path) is expected


def test_is_image_logs_rejected_files():
    with structlog.testing.capture_logs() as cap_logs:
        is_image("notes.txt")
        is_image("photo.jpg")
    assert [log["event"] for log in cap_logs] == [
        "Not a valid image file format: notes.txt"
    ]


def test_walk_files_lexical_depth_first(tmp_path):
    for name in ["b.jpg", "a/z.png", "a/b/c.jpg", "c.txt", "a.jpg", "ab.jpeg"]:
        touch(tmp_path / name)

    names = [p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path)]
    assert names == ["a/b/c.jpg", "a/z.png", "a.jpg", "ab.jpeg", "b.jpg", "c.txt"]


def test_find_images(tmp_path):
    for name in ["b.jpg", "a/notes.txt", "a/c.PNG", "a/d.png"]:
        touch(tmp_path / name)

    names = [p.relative_to(tmp_path).as_posix() for p in find_images(tmp_path)]
    assert names == ["a/d.png", "b.jpg"]


def test_find_images_empty_directory(tmp_path):
    assert list(find_images(tmp_path)) == []

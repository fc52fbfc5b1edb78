import os
import pathlib
import stat
from typing import Iterator

from exifgps.exceptions import PathNotFoundError

from . import constants
from .logs import logger
from .types import FilePath, PathKind


def classify_path(path: FilePath) -> PathKind:
    """
    Determine whether a path names a directory or a single file.

    Raises `PathNotFoundError` if nothing exists at the path. Other OS
    errors (e.g. permission denied) are raised as-is.
    """
    try:
        stat_result = os.stat(path)
    except FileNotFoundError as e:
        raise PathNotFoundError(path) from e

    if stat.S_ISDIR(stat_result.st_mode):
        return PathKind.dir
    return PathKind.file


def file_extension(path: FilePath) -> str:
    """
    Return the extension of the last element of a path, including the dot.

    Everything from the final dot of the file name is the extension, so a
    hidden file with no other dot is treated as all extension.

    >>> file_extension("photos/IMG_0001.jpg")
    '.jpg'
    >>> file_extension("archive.tar.gz")
    '.gz'
    >>> file_extension(".png")
    '.png'
    >>> file_extension("README")
    ''
    """
    name = os.path.basename(os.fspath(path))
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def is_image(path: FilePath) -> bool:
    """
    Check by extension whether a path names a supported image.

    The comparison is case-sensitive: `IMG_0001.JPG` is not an image.
    """
    if file_extension(path) in constants.SUPPORTED_IMAGE_EXTENSIONS:
        return True

    logger.info(f"Not a valid image file format: {path}")
    return False


def walk_files(base_directory: FilePath) -> Iterator[pathlib.Path]:
    """
    Yield every non-directory path below `base_directory`, depth-first.

    Entries of each directory are visited in lexical order of their names,
    with sub-directories descended into at their position in that order.
    Symlinks are yielded as files and never followed. Errors listing a
    directory are raised to the caller.
    """
    base_directory = pathlib.Path(base_directory)
    for entry in sorted(base_directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            yield from walk_files(entry)
        else:
            yield entry


def find_images(base_directory: FilePath) -> Iterator[pathlib.Path]:
    logger.info(f"Scanning '{base_directory}' for images")
    for path in walk_files(base_directory):
        if is_image(path):
            yield path

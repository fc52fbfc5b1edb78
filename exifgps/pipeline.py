from exifgps.common.filemanagement import (
    classify_path,
    file_extension,
    find_images,
    is_image,
)
from exifgps.common.logs import logger
from exifgps.common.types import PathKind
from exifgps.exceptions import ExifGPSError, UnsupportedFormatError
from exifgps.gps import read_exif
from exifgps.schemas import ImageRecord, RunConfig


def read_image_record(path: str) -> ImageRecord:
    latitude, longitude = read_exif(path)
    return ImageRecord(file_path=path, latitude=latitude, longitude=longitude)


def collect_file_record(path: str) -> list[ImageRecord]:
    """
    Read a single image. Any error is raised to the caller.
    """
    if not is_image(path):
        raise UnsupportedFormatError(path, file_extension(path))
    return [read_image_record(path)]


def collect_directory_records(base_directory: str) -> list[ImageRecord]:
    """
    Read every image below `base_directory` in walk order.

    Images whose GPS position cannot be read are logged and left out. Errors
    while walking the directory tree are raised to the caller.
    """
    records = []
    skipped = 0
    for path in find_images(base_directory):
        try:
            records.append(read_image_record(str(path)))
        except ExifGPSError as e:
            logger.error(f"Failed to read EXIF data from {path}: {e}")
            skipped += 1
    logger.info(
        f"Found GPS data in {len(records)} images, skipped {skipped} images "
        f"in '{base_directory}'"
    )
    return records


def collect_records(config: RunConfig) -> list[ImageRecord]:
    path_kind = classify_path(config.path)
    if path_kind is PathKind.file:
        return collect_file_record(config.path)
    else:
        return collect_directory_records(config.path)

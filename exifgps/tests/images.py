"""
Build small test images with EXIF tags using Pillow.
"""

import pathlib
import struct
import zlib
from typing import Optional

import PIL.ExifTags
import PIL.Image
from PIL.TiffImagePlugin import IFDRational

IMAGE_DESCRIPTION_TAG = 0x010E

# 40° 26' 46.19" N, 79° 58' 56.17" W
LATITUDE = ((40, 1), (26, 1), (4619, 100))
LONGITUDE = ((79, 1), (58, 1), (5617, 100))
EXPECTED_LATITUDE = "40 26 46.19 "
EXPECTED_LONGITUDE = "79 58 56.17 "


def rationals(pairs) -> tuple:
    return tuple(IFDRational(num, den) for num, den in pairs)


def gps_ifd(latitude=LATITUDE, longitude=LONGITUDE) -> dict:
    """
    GPSInfo tags as Pillow expects them. Pass `None` to leave a coordinate out.
    """
    tags = {}
    if latitude is not None:
        tags[1] = "N"
        tags[2] = rationals(latitude)
    if longitude is not None:
        tags[3] = "W"
        tags[4] = rationals(longitude)
    return tags


def make_image(
    path: pathlib.Path,
    gps: Optional[dict] = None,
    description: Optional[str] = "Image with test EXIF tags",
    image_format: Optional[str] = None,
) -> pathlib.Path:
    """
    Save a tiny image to `path`, with EXIF tags if any are given.

    The format is taken from the file extension unless `image_format` is set.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    img = PIL.Image.new("RGB", (16, 16), color=(120, 160, 80))

    exif = PIL.Image.Exif()
    if description:
        exif[IMAGE_DESCRIPTION_TAG] = description
    if gps is not None:
        exif[PIL.ExifTags.IFD.GPSInfo] = gps

    if len(exif):
        img.save(path, format=image_format, exif=exif)
    else:
        img.save(path, format=image_format)
    return path


def make_corrupt_image(path: pathlib.Path) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"this is not really an image")
    return path


def png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + chunk_type + data + struct.pack(">I", crc)


def make_oversized_png(path: pathlib.Path, width=40000, height=40000) -> pathlib.Path:
    """
    A PNG header claiming more pixels than Pillow will open, with no image data.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    path.write_bytes(
        b"\x89PNG\r\n\x1a\n" + png_chunk(b"IHDR", header) + png_chunk(b"IEND", b"")
    )
    return path

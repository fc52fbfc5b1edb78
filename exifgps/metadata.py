"""
Metadata trees built from the EXIF block of JPEG and PNG images.

Parsing of the binary image structure is delegated to Pillow. Each supported
format is bound to its own parser, selected once from the file extension.
"""

import enum
import struct
from dataclasses import dataclass
from typing import Any, Optional

import PIL.ExifTags
import PIL.Image
import PIL.TiffImagePlugin

from exifgps.common.filemanagement import file_extension
from exifgps.common.logs import logger
from exifgps.common.types import FilePath
from exifgps.exceptions import (
    IfdNotFoundError,
    MetadataParseError,
    TagNotFoundError,
    UnsupportedFormatError,
)

ROOT_IFD_NAME = "IFD"

# Sub-IFDs reachable from the root IFD, by name
SUB_IFDS = {
    "Exif": PIL.ExifTags.IFD.Exif,
    "GPSInfo": PIL.ExifTags.IFD.GPSInfo,
    "Interop": PIL.ExifTags.IFD.Interop,
}


@dataclass(frozen=True)
class Tag:
    tag_id: int
    value: Any

    @property
    def name(self) -> str:
        return PIL.ExifTags.GPSTAGS.get(self.tag_id) or PIL.ExifTags.TAGS.get(
            self.tag_id, f"0x{self.tag_id:04x}"
        )

    def rationals(self) -> list[tuple[int, int]]:
        """
        Return the tag value as a list of (numerator, denominator) pairs.

        Single rationals are returned as a list of one.
        """
        values = self.value
        if not isinstance(values, (tuple, list)):
            values = [values]
        pairs = []
        for value in values:
            if isinstance(value, PIL.TiffImagePlugin.IFDRational):
                pairs.append((value.numerator, value.denominator))
            elif (
                isinstance(value, (tuple, list))
                and len(value) == 2
                and all(isinstance(v, int) for v in value)
            ):
                pairs.append((value[0], value[1]))
            else:
                raise MetadataParseError(
                    f"Tag {self.name} does not hold rational values: {self.value!r}"
                )
        return pairs

    def value_bytes(self) -> bytes:
        """
        Encode the value of a rational tag as big-endian bytes.

        Each rational is a 4-byte unsigned numerator followed by a 4-byte
        unsigned denominator.
        """
        pairs = self.rationals()
        try:
            return b"".join(struct.pack(">LL", num, den) for num, den in pairs)
        except struct.error as e:
            raise MetadataParseError(
                f"Tag {self.name} has a value outside the unsigned rational range"
            ) from e


class Ifd:
    def __init__(self, path: str, tags: dict):
        self.path = path
        self.tags = tags

    def __len__(self):
        return len(self.tags)

    def __repr__(self):
        return f"<Ifd {self.path} ({len(self.tags)} tags)>"

    def find_tag(self, tag_id: int) -> Tag:
        if tag_id not in self.tags:
            raise TagNotFoundError(self.path, tag_id)
        return Tag(tag_id=tag_id, value=self.tags[tag_id])


class MetadataTree:
    """
    The IFDs of a single image, addressed by path (e.g. "IFD/GPSInfo").
    """

    def __init__(self, exif: PIL.Image.Exif):
        self.exif = exif

    def __len__(self):
        return len(self.exif)

    def get_ifd(self, ifd_path: str) -> Ifd:
        """
        Return the IFD at `ifd_path`.

        Raises `IfdNotFoundError` if the image has no such IFD or it holds no
        tags.
        """
        parts = ifd_path.split("/")
        if parts[0] != ROOT_IFD_NAME or len(parts) > 2:
            raise IfdNotFoundError(ifd_path)
        if len(parts) == 1:
            return Ifd(ifd_path, dict(self.exif))

        ifd_tag = SUB_IFDS.get(parts[1])
        if ifd_tag is None:
            raise IfdNotFoundError(ifd_path)
        try:
            tags = self.exif.get_ifd(ifd_tag)
        except (OSError, struct.error) as e:
            raise MetadataParseError(f"Could not read IFD '{ifd_path}': {e}") from e
        if not tags:
            raise IfdNotFoundError(ifd_path)
        return Ifd(ifd_path, dict(tags))


class MetadataParser:
    # Pillow format identifier this parser is restricted to
    pil_format: str

    def open(self, path: FilePath) -> PIL.Image.Image:
        return PIL.Image.open(path, formats=[self.pil_format])

    def parse(self, path: FilePath) -> MetadataTree:
        try:
            with self.open(path) as img:
                exif = img.getexif()
        except (
            OSError,
            SyntaxError,
            ValueError,
            struct.error,
            PIL.Image.DecompressionBombError,
        ) as e:
            # PIL.UnidentifiedImageError is an OSError
            raise MetadataParseError(
                f"Could not parse {self.pil_format} structure of {path}: {e}"
            ) from e

        if not len(exif):
            raise MetadataParseError(f"No EXIF data found in {path}")
        logger.debug(f"Read {len(exif)} EXIF tags from {path}")
        return MetadataTree(exif)


class JpegMetadataParser(MetadataParser):
    pil_format = "JPEG"


class PngMetadataParser(MetadataParser):
    pil_format = "PNG"


class ImageFormat(str, enum.Enum):
    jpeg = "jpeg"
    png = "png"

    @classmethod
    def from_path(cls, path: FilePath) -> "ImageFormat":
        extension = file_extension(path)
        image_format = EXTENSION_FORMATS.get(extension)
        if image_format is None:
            raise UnsupportedFormatError(path, extension)
        return image_format

    @property
    def parser(self) -> MetadataParser:
        return PARSERS[self]


EXTENSION_FORMATS = {
    ".jpg": ImageFormat.jpeg,
    ".jpeg": ImageFormat.jpeg,
    ".png": ImageFormat.png,
}

PARSERS: dict[ImageFormat, MetadataParser] = {
    ImageFormat.jpeg: JpegMetadataParser(),
    ImageFormat.png: PngMetadataParser(),
}


def parse_metadata(
    path: FilePath, image_format: Optional[ImageFormat] = None
) -> MetadataTree:
    image_format = image_format or ImageFormat.from_path(path)
    return image_format.parser.parse(path)

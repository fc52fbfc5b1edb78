import decimal
import math
import struct
from typing import Literal

from exifgps.common import constants
from exifgps.common.logs import logger
from exifgps.common.types import FilePath
from exifgps.exceptions import GPSDataError
from exifgps.metadata import ImageFormat, Tag, parse_metadata

RATIONAL_SIZE = 8

# Decimal exponents outside [MIN, MAX) are written in scientific notation
MIN_POSITIONAL_EXPONENT = -4
MAX_POSITIONAL_EXPONENT = 6

ByteOrder = Literal[">", "<"]


def parse_rationals(
    data: bytes, count: int, byte_order: ByteOrder = ">"
) -> list[tuple[int, int]]:
    """
    Unpack `count` unsigned rationals from the start of `data`.

    Each rational is a 4-byte numerator followed by a 4-byte denominator.

    >>> parse_rationals(bytes([0, 0, 0, 3, 0, 0, 0, 2]), 1)
    [(3, 2)]
    """
    size = count * RATIONAL_SIZE
    if len(data) < size:
        raise GPSDataError(
            f"Expected {size} bytes for {count} rationals, got {len(data)}"
        )
    values = struct.unpack(f"{byte_order}{count * 2}L", data[:size])
    return list(zip(values[0::2], values[1::2]))


def format_float(value: float) -> str:
    """
    Shortest string that round-trips `value`, in "%g" style.

    Scientific notation is used when the decimal exponent is below -4 or at
    least 6, with a signed exponent of at least two digits.

    >>> format_float(40.0)
    '40'
    >>> format_float(20.5)
    '20.5'
    >>> format_float(0.00001)
    '1e-05'
    >>> format_float(1234567.5)
    '1.2345675e+06'
    """
    if value == 0:
        return "0"
    if not math.isfinite(value):
        return repr(value)

    number = decimal.Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    # Exponent of the leading digit
    leading_exponent = len(digits) - 1 + exponent

    if MIN_POSITIONAL_EXPONENT <= leading_exponent < MAX_POSITIONAL_EXPONENT:
        return format(number, "f")

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    exponent_sign = "+" if leading_exponent >= 0 else "-"
    prefix = "-" if sign else ""
    return f"{prefix}{mantissa}e{exponent_sign}{abs(leading_exponent):02d}"


def gps_data_to_string(data: bytes) -> str:
    """
    Render a degrees/minutes/seconds payload as three space-separated floats.

    The payload is read as big-endian. No hemisphere sign is applied and the
    parts are not merged into decimal degrees.

    >>> gps_data_to_string(bytes([0, 0, 0, 40, 0, 0, 0, 1, 0, 0, 0, 20, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1]))
    '40 20 0 '
    """
    location_info = ""
    rationals = parse_rationals(data, constants.GPS_RATIONALS_COUNT, ">")
    for numerator, denominator in rationals:
        if denominator == 0:
            raise GPSDataError(
                f"Zero denominator in GPS rational {numerator}/{denominator}"
            )
        location_info += f"{format_float(numerator / denominator)} "
    return location_info


def read_gps_tag(tag: Tag) -> str:
    rationals = tag.rationals()
    if len(rationals) != constants.GPS_RATIONALS_COUNT:
        raise GPSDataError(
            f"Expected {constants.GPS_RATIONALS_COUNT} rationals in {tag.name}, "
            f"found {len(rationals)}"
        )
    return gps_data_to_string(tag.value_bytes())


def read_exif(path: FilePath) -> tuple[str, str]:
    """
    Read the GPS latitude and longitude of a JPEG or PNG image.

    Returns a (latitude, longitude) pair of degrees/minutes/seconds strings.
    Raises an `ExifGPSError` subclass if the image cannot be parsed or either
    coordinate is missing.
    """
    image_format = ImageFormat.from_path(path)
    tree = parse_metadata(path, image_format)
    gps_ifd = tree.get_ifd(constants.GPS_IFD_PATH)

    latitude_tag = gps_ifd.find_tag(constants.GPS_LATITUDE_TAG_ID)
    latitude = read_gps_tag(latitude_tag)

    longitude_tag = gps_ifd.find_tag(constants.GPS_LONGITUDE_TAG_ID)
    longitude = read_gps_tag(longitude_tag)

    logger.debug(
        f"GPS position of {path}: latitude='{latitude}' longitude='{longitude}'"
    )
    return latitude, longitude

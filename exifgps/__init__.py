from .common import constants
from .common.logs import logger
from .gps import read_exif

__version__ = "0.1"

__all__ = [
    "logger",
    "constants",
    "read_exif",
]

class ExifGPSError(Exception):
    """Base class for every error raised while building a GPS report."""


class PathNotFoundError(ExifGPSError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Path or file '{path}' does not exist")


class UnsupportedFormatError(ExifGPSError):
    def __init__(self, path, extension: str):
        self.path = path
        self.extension = extension
        super().__init__(f"Unsupported image extension '{extension}' for {path}")


class MetadataParseError(ExifGPSError):
    """
    The image structure or its EXIF block could not be read.

    The underlying Pillow or OS error is kept as `__cause__`.
    """


class GPSDataError(MetadataParseError):
    """A GPS tag was found but its value is not a valid rational triple."""


class IfdNotFoundError(ExifGPSError):
    def __init__(self, ifd_path: str):
        self.ifd_path = ifd_path
        super().__init__(f"IFD '{ifd_path}' not found")


class TagNotFoundError(ExifGPSError):
    def __init__(self, ifd_path: str, tag_id: int):
        self.ifd_path = ifd_path
        self.tag_id = tag_id
        super().__init__(f"Tag (0x{tag_id:04x}) not found in IFD '{ifd_path}'")


class ReportWriteError(ExifGPSError):
    pass

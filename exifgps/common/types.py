import enum
import pathlib
from typing import Union


class PathKind(str, enum.Enum):
    dir = "dir"
    file = "file"


FilePath = Union[pathlib.Path, str]

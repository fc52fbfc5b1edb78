import enum
import pathlib

import pydantic


class ReportFormat(str, enum.Enum):
    csv = "csv"
    html = "html"


class ImageRecord(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    file_path: str
    latitude: str
    longitude: str

    def to_row(self) -> list[str]:
        return [self.file_path, self.latitude, self.longitude]


class RunConfig(pydantic.BaseModel):
    """
    Options for a single run, built once from the command line arguments.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    path: str
    report_format: ReportFormat = ReportFormat.csv
    outfile: pathlib.Path

import pathlib
import sys
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich import print as rprint

from exifgps.common import constants


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="exifgps_",
        extra="ignore",
    )

    output_dir: pathlib.Path = pathlib.Path(".")
    csv_filename: str = constants.DEFAULT_CSV_FILENAME
    html_filename: str = constants.DEFAULT_HTML_FILENAME

    @field_validator("output_dir")
    @classmethod
    def validate_path(cls, v):
        """
        Expand the user directory. Relative paths stay relative to the
        working directory at the time the report is written.
        """
        return pathlib.Path(v).expanduser()

    @field_validator("csv_filename", "html_filename")
    @classmethod
    def validate_filename(cls, v):
        if not v or pathlib.Path(v).name != v:
            raise ValueError(f"Expected a plain file name, got '{v}'")
        return v


cli_help_message = """
    Configuration for the CLI is currently set in the following sources, in order of priority:
        - The system environment (os.environ)
        - ".env" file, prefix settings with "EXIFGPS_"
    """


@lru_cache
def read_settings(*args, **kwargs):
    try:
        return Settings(*args, **kwargs)
    except ValidationError as e:
        rprint(cli_help_message)
        rprint(e)
        sys.exit(1)


if __name__ == "__main__":
    rprint(read_settings())

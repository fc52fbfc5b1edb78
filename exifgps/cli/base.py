import pathlib
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from exifgps.common.logs import logger
from exifgps.exceptions import ExifGPSError, PathNotFoundError, ReportWriteError
from exifgps.pipeline import collect_records
from exifgps.report import save_report
from exifgps.schemas import ReportFormat, RunConfig
from exifgps.settings import Settings, read_settings

cli = typer.Typer(add_completion=False)


def build_config(
    path: str,
    html: bool = False,
    outfile: Optional[pathlib.Path] = None,
    settings: Optional[Settings] = None,
) -> RunConfig:
    """
    Combine the command line arguments with the configured output location.
    """
    settings = settings or read_settings()
    report_format = ReportFormat.html if html else ReportFormat.csv
    if outfile is None:
        if report_format is ReportFormat.html:
            filename = settings.html_filename
        else:
            filename = settings.csv_filename
        outfile = settings.output_dir / filename
    return RunConfig(path=path, report_format=report_format, outfile=outfile)


@cli.command()
def run(
    path: Optional[str] = typer.Option(
        None, "--path", help="Path of image or directory"
    ),
    html: bool = typer.Option(False, "--html", help="Save result as HTML"),
    outfile: Optional[pathlib.Path] = typer.Option(
        None,
        "--outfile",
        help="Where to write the report. Defaults to output.csv or output.html",
    ),
):
    """
    Extract the GPS latitude & longitude of JPEG and PNG images into a report.
    """
    if not path:
        print("Please provide a file-path for an image.")
        raise typer.Exit(code=1)

    config = build_config(path, html=html, outfile=outfile)

    try:
        records = collect_records(config)
    except PathNotFoundError:
        print("Please provide a valid file-path for an image.")
        raise typer.Exit(code=1)
    except ExifGPSError as e:
        print(escape(str(e)))
        raise typer.Exit(code=1)
    except OSError as e:
        logger.error(f"Error while reading '{config.path}': {e}")
        raise typer.Exit(code=1)

    try:
        save_report(records, config)
    except ReportWriteError as e:
        logger.error(f"Error writing {config.report_format.value} file: {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()

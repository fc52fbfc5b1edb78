import csv
import pathlib
from functools import lru_cache
from typing import Sequence

import jinja2
from rich import print

from exifgps.common.constants import REPORT_HEADER
from exifgps.common.logs import logger
from exifgps.exceptions import ReportWriteError
from exifgps.schemas import ImageRecord, ReportFormat, RunConfig

HTML_TEMPLATE_NAME = "report.html"


@lru_cache
def get_template_environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.PackageLoader("exifgps", "templates"),
        autoescape=jinja2.select_autoescape(["html"]),
    )


def save_to_csv(
    records: Sequence[ImageRecord], outfile: pathlib.Path
) -> pathlib.Path:
    """
    Write one row per record below a fixed header.

    A row that cannot be written is logged and the remaining rows are still
    written. Failing to open the file or to write the header raises
    `ReportWriteError`.
    """
    try:
        with open(outfile, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            try:
                writer.writerow(REPORT_HEADER)
            except csv.Error as e:
                raise ReportWriteError(f"Failed to write csv header: {e}") from e

            for record in records:
                try:
                    writer.writerow(record.to_row())
                except (csv.Error, OSError) as e:
                    logger.error(
                        f"Error writing CSV row for {record.file_path}: {e}"
                    )
    except OSError as e:
        raise ReportWriteError(f"Could not write CSV file {outfile}: {e}") from e

    logger.info(f'Exported {len(records)} records to "{outfile}"')
    print("CSV file created successfully!")
    return outfile


def save_to_html(
    records: Sequence[ImageRecord], outfile: pathlib.Path
) -> pathlib.Path:
    """
    Render the records into the HTML report template.

    Any template or write error aborts the report with `ReportWriteError`.
    """
    try:
        template = get_template_environment().get_template(HTML_TEMPLATE_NAME)
        html = template.render(header=REPORT_HEADER, records=records)
        outfile.write_text(html, encoding="utf-8")
    except (jinja2.TemplateError, OSError) as e:
        raise ReportWriteError(f"Could not write HTML file {outfile}: {e}") from e

    logger.info(f'Exported {len(records)} records to "{outfile}"')
    print("HTML file created successfully!")
    return outfile


def save_report(records: Sequence[ImageRecord], config: RunConfig) -> pathlib.Path:
    if config.report_format is ReportFormat.html:
        return save_to_html(records, config.outfile)
    else:
        return save_to_csv(records, config.outfile)

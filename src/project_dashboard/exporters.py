"""File boundaries: CSV uploads in, JSON/CSV exports out."""

from collections.abc import Sequence
from datetime import date
import mimetypes
from pathlib import Path

import structlog

from project_dashboard.csv_codec import csv_template, encode_projects
from project_dashboard.exceptions import FileReadError, InvalidFileTypeError
from project_dashboard.models import Project
from project_dashboard.storage import projects_to_json

logger = structlog.get_logger(__name__)

TEMPLATE_FILENAME = "projects-template.csv"
CSV_MIME_TYPE = "text/csv"


def dated_filename(extension: str, today: date | None = None) -> str:
    """``projects-<YYYY-MM-DD>.<extension>``"""
    today = today or date.today()
    return f"projects-{today.isoformat()}.{extension}"


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def export_json(
    projects: Sequence[Project], directory: Path | str, today: date | None = None
) -> Path:
    path = _write(Path(directory) / dated_filename("json", today), projects_to_json(projects))
    logger.info("projects_exported", format="json", path=str(path), count=len(projects))
    return path


def export_csv(
    projects: Sequence[Project], directory: Path | str, today: date | None = None
) -> Path:
    path = _write(Path(directory) / dated_filename("csv", today), encode_projects(projects))
    logger.info("projects_exported", format="csv", path=str(path), count=len(projects))
    return path


def write_template(directory: Path | str) -> Path:
    path = _write(Path(directory) / TEMPLATE_FILENAME, csv_template())
    logger.info("template_written", path=str(path))
    return path


def validate_csv_upload(path: Path | str) -> Path:
    """Reject anything that is neither named ``.csv`` nor typed ``text/csv``.

    Raises:
        InvalidFileTypeError: If the file is not a CSV file.
    """
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    if mime_type != CSV_MIME_TYPE and path.suffix.lower() != ".csv":
        raise InvalidFileTypeError()
    return path


def read_csv_upload(path: Path | str) -> str:
    """Validate and read an uploaded CSV file.

    Raises:
        InvalidFileTypeError: If the file is not a CSV file.
        FileReadError: If the file cannot be read as UTF-8 text.
    """
    path = validate_csv_upload(path)
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("csv_upload_unreadable", path=str(path), error=str(e))
        raise FileReadError() from e

"""CSV encoding and decoding of dashboard projects.

Wire format: an unquoted header row of field names, then one row per project
with every cell double-quoted (embedded quotes doubled). List fields such as
``tags`` and ``activityLog`` are joined with ``"; "`` inside a single cell.
"""

from collections.abc import Callable, Iterable
import re
from typing import Any

from pydantic import ValidationError
import structlog

from project_dashboard.models import (
    CSVImportResult,
    Project,
    ProjectStage,
    clamp_progress,
    generate_project_id,
)
from project_dashboard.models.project import (
    DEFAULT_USEFULNESS,
    MAX_USEFULNESS,
    MIN_USEFULNESS,
)

logger = structlog.get_logger(__name__)

LIST_SEPARATOR = "; "
NO_DATA_ROWS_ERROR = "CSV file has no data rows"
REQUIRED_FIELDS = ("name", "description", "type", "status")
MISSING_FIELDS_ERROR = "Missing required fields (name, description, type, status)"
TRUTHY_VALUES = frozenset({"true", "yes"})

TEMPLATE_HEADERS = (
    "id",
    "name",
    "summary",
    "description",
    "type",
    "usefulness",
    "status",
    "stage",
    "isMonetized",
    "githubUrl",
    "websiteUrl",
    "nextAction",
    "lastUpdated",
    "progress",
    "activityLog",
    "tags",
)

_TEMPLATE_EXAMPLE = (
    "1",
    "Example Project",
    "Short summary here",
    "Longer description",
    "personal",
    "5",
    "in_progress",
    "Build",
    "false",
    "https://github.com/example/project",
    "https://example.com",
    "Next step to take",
    "2023-05-10",
    "75",
    "Update 1; Update 2",
    "Tag1; Tag2",
)

_LEADING_INT = re.compile(r"^[+-]?\d+")

ColumnSetter = Callable[[dict[str, Any], str], None]


# === Encoding ===


def _format_value(value: Any) -> str:
    if isinstance(value, list):
        return LIST_SEPARATOR.join(str(item) for item in value)
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if value is None:
        return ""
    return str(value)


def _quote(cell: str) -> str:
    escaped = cell.replace('"', '""')
    return f'"{escaped}"'


def encode_projects(projects: Iterable[Project]) -> str:
    """Encode projects as CSV text.

    The column set is the union of fields present across all projects, in
    order of first appearance, so records with different optional fields
    still produce one rectangular table.
    """
    records = [project.to_record() for project in projects]

    columns: dict[str, None] = {}
    for record in records:
        columns.update(dict.fromkeys(record))

    lines = [",".join(columns)]
    for record in records:
        lines.append(",".join(_quote(_format_value(record.get(c))) for c in columns))
    return "\n".join(lines) + "\n"


def csv_template() -> str:
    """Return a one-row example CSV showing every supported column."""
    header = ",".join(TEMPLATE_HEADERS)
    example = ",".join(_quote(value) for value in _TEMPLATE_EXAMPLE)
    return f"{header}\n{example}"


# === Tokenizing ===


def _ends_field(text: str, index: int) -> bool:
    return index >= len(text) or text[index] in ",\r\n"


def parse_csv_row(row: str) -> list[str]:
    """Split a single CSV row into raw field strings.

    A quote opens a quoted field only at the start of a field and closes it
    only before a comma or the end of the row. Commas inside quoted fields
    are literal, a doubled quote inside a quoted field is one quote, and any
    other quote (``5 ft 6" tall``) is kept as text.
    """
    fields: list[str] = []
    current: list[str] = []
    inside_quotes = False
    field_start = True

    i = 0
    while i < len(row):
        char = row[i]
        if inside_quotes:
            if char == '"' and row.startswith('"', i + 1):
                current.append('"')
                i += 1
            elif char == '"' and _ends_field(row, i + 1):
                inside_quotes = False
            else:
                current.append(char)
        elif char == '"' and field_start:
            inside_quotes = True
        elif char == ",":
            fields.append("".join(current))
            current = []
            field_start = True
            i += 1
            continue
        else:
            current.append(char)
        field_start = False
        i += 1

    fields.append("".join(current))
    return fields


def split_csv_records(csv_content: str) -> list[str]:
    """Split CSV text into records on newlines that are not inside quotes.

    Quoted fields are recognized with the same rules as ``parse_csv_row``,
    so a stray quote in an unquoted value cannot swallow the following lines.
    """
    records: list[str] = []
    current: list[str] = []
    inside_quotes = False
    field_start = True

    i = 0
    while i < len(csv_content):
        char = csv_content[i]
        if inside_quotes:
            if char == '"' and csv_content.startswith('"', i + 1):
                current.append('""')
                i += 2
                continue
            if char == '"' and _ends_field(csv_content, i + 1):
                inside_quotes = False
            current.append(char)
        elif char == "\n":
            records.append("".join(current).removesuffix("\r"))
            current = []
            field_start = True
        else:
            inside_quotes = char == '"' and field_start
            current.append(char)
            field_start = char == ","
        i += 1

    records.append("".join(current).removesuffix("\r"))
    return records


# === Decoding ===


def _parse_int(value: str) -> int | None:
    match = _LEADING_INT.match(value)
    return int(match.group()) if match else None


def _set_text(attr: str) -> ColumnSetter:
    def setter(fields: dict[str, Any], value: str) -> None:
        fields[attr] = value or None

    return setter


def _set_list(attr: str) -> ColumnSetter:
    def setter(fields: dict[str, Any], value: str) -> None:
        fields[attr] = [item.strip() for item in value.split(";") if item.strip()]

    return setter


def _set_id(fields: dict[str, Any], value: str) -> None:
    fields["id"] = value or generate_project_id()


def _set_is_monetized(fields: dict[str, Any], value: str) -> None:
    fields["is_monetized"] = value.lower() in TRUTHY_VALUES


def _set_usefulness(fields: dict[str, Any], value: str) -> None:
    rating = _parse_int(value)
    if rating is None or not MIN_USEFULNESS <= rating <= MAX_USEFULNESS:
        rating = DEFAULT_USEFULNESS
    fields["usefulness"] = rating


def _set_progress(fields: dict[str, Any], value: str) -> None:
    progress = _parse_int(value)
    fields["progress"] = clamp_progress(progress) if progress is not None else 0


def _set_stage(fields: dict[str, Any], value: str) -> None:
    if not value:
        fields["stage"] = None
        return
    try:
        fields["stage"] = ProjectStage(value)
    except ValueError:
        fields["stage"] = ProjectStage.IDEA


COLUMN_SETTERS: dict[str, ColumnSetter] = {
    "id": _set_id,
    "name": _set_text("name"),
    "description": _set_text("description"),
    "summary": _set_text("summary"),
    "type": _set_text("type"),
    "usefulness": _set_usefulness,
    "status": _set_text("status"),
    "stage": _set_stage,
    "isMonetized": _set_is_monetized,
    "githubUrl": _set_text("github_url"),
    "websiteUrl": _set_text("website_url"),
    "nextAction": _set_text("next_action"),
    "lastUpdated": _set_text("last_updated"),
    "progress": _set_progress,
    "activityLog": _set_list("activity_log"),
    "tags": _set_list("tags"),
}


def _decode_row(headers: list[str], values: list[str]) -> dict[str, Any]:
    """Map row cells onto project fields.

    Headers drive the iteration: a row shorter than the header assigns fewer
    fields, and cells beyond the header are ignored.
    """
    fields: dict[str, Any] = {}
    for header, value in zip(headers, values):
        setter = COLUMN_SETTERS.get(header)
        if setter is not None:
            setter(fields, value.strip())
    return fields


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def parse_csv_to_projects(csv_content: str) -> CSVImportResult:
    """Decode CSV text into projects, salvaging every row that validates.

    Row numbers in error messages count from the header (row 0), so the first
    data line is row 1.
    """
    records = split_csv_records(csv_content)
    while records and not records[0].strip():
        records.pop(0)

    if not any(record.strip() for record in records[1:]):
        return CSVImportResult(successful=[], failed=1, errors=[NO_DATA_ROWS_ERROR])

    header_row = records[0].lstrip("\ufeff").strip()
    headers = [header.strip() for header in parse_csv_row(header_row)]
    unknown = [header for header in headers if header not in COLUMN_SETTERS]
    if unknown:
        logger.debug("csv_unknown_columns_ignored", columns=unknown)

    result = CSVImportResult()
    for row_number, record in enumerate(records[1:], start=1):
        row = record.strip()
        if not row:
            continue

        try:
            fields = _decode_row(headers, parse_csv_row(row))
            if not all(fields.get(name) for name in REQUIRED_FIELDS):
                result.failed += 1
                result.errors.append(f"Row {row_number}: {MISSING_FIELDS_ERROR}")
                logger.debug("csv_row_rejected", row=row_number, reason="missing_fields")
                continue

            result.successful.append(Project.model_validate(fields))
        except ValidationError as e:
            result.failed += 1
            result.errors.append(f"Row {row_number}: {_format_validation_error(e)}")
            logger.debug("csv_row_invalid", row=row_number, error=str(e))
        except Exception as e:
            result.failed += 1
            result.errors.append(f"Row {row_number}: {e}")
            logger.warning("csv_row_failed", row=row_number, error=str(e))

    logger.info(
        "csv_decoded",
        successful=len(result.successful),
        failed=result.failed,
    )
    return result

"""File ingestion for Chartify: detect, parse and normalise uploaded tables."""
from __future__ import annotations

import csv
import io
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Union

import pandas as pd

from utils.logging import get_logger, log_event

from .errors import IngestionInProgressError
from .models import FileKind, IngestResult, Record, Table

logger = get_logger(__name__)

UNSUPPORTED_FORMAT = "Unsupported file format. Please upload CSV or Excel files."
NO_CSV_DATA = "No data found in CSV file"
NO_WORKSHEETS = "No worksheets found in Excel file"
NO_EXCEL_DATA = "No data found in Excel file"
READ_ERROR = "Error reading file"
EXCEL_PARSE_ERROR = "Error parsing Excel file: {cause}"

CSV_ENCODINGS = ("utf-8-sig", "cp1252")
CSV_DELIMITERS = (",", ";", "\t", "|")
SNIFF_SAMPLE_CHARS = 64 * 1024
TOO_FEW_FIELDS = "Too few fields: expected {expected} fields but parsed {parsed}"

Content = Union[bytes, bytearray, memoryview, BinaryIO]


def detect_file_kind(filename: str) -> Optional[FileKind]:
    """Return the :class:`FileKind` for ``filename`` or ``None`` if unsupported."""

    _, dot, extension = str(filename or "").rpartition(".")
    if not dot:
        return None
    try:
        return FileKind(extension.lower())
    except ValueError:
        return None


def read_content(content: Content) -> bytes:
    """Return the raw bytes of ``content``.

    Accepts bytes-like objects or anything exposing ``read()`` (such as a
    Streamlit ``UploadedFile``).  Read faults surface as :class:`OSError`.
    """

    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    reader = getattr(content, "read", None)
    if reader is None:
        raise OSError(f"Unreadable upload of type {type(content).__name__}")
    data = reader()
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _cell(value: Any) -> Any:
    return "" if _is_missing(value) else value


def _header_name(value: Any) -> str:
    if _is_missing(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_record(header: Sequence[str], values: Sequence[Any]) -> Record:
    # Repeated header names collapse onto one key; the right-most cell wins.
    record: Record = {}
    for index, name in enumerate(header):
        record[name] = _cell(values[index]) if index < len(values) else ""
    return record


def _decode(data: bytes) -> str:
    for encoding in CSV_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError("csv", data, 0, len(data), "no supported encoding matched")


def _parser_message(exc: Exception) -> str:
    lines = [line.strip() for line in str(exc).splitlines() if line.strip()]
    return lines[0] if lines else type(exc).__name__


def sniff_delimiter(text: str) -> str:
    """Guess the field separator from the start of ``text``; ``,`` when unsure."""

    try:
        dialect = csv.Sniffer().sniff(text[:SNIFF_SAMPLE_CHARS], delimiters="".join(CSV_DELIMITERS))
    except csv.Error:
        return ","
    return dialect.delimiter


def _short_row_message(frame: pd.DataFrame) -> Optional[str]:
    # Fields absent from a short row come back as NaN; empty fields stay "".
    missing = frame.iloc[1:].isna()
    short = missing.any(axis=1)
    if not short.any():
        return None
    expected = len(frame.columns)
    parsed = expected - int(missing[short].iloc[0].sum())
    return TOO_FEW_FIELDS.format(expected=expected, parsed=parsed)


def parse_csv(data: bytes) -> IngestResult:
    """Parse delimited text whose first row is the header."""

    try:
        text = _decode(data)
    except UnicodeDecodeError:
        logger.warning("CSV payload could not be decoded with %s", ", ".join(CSV_ENCODINGS))
        return IngestResult.failure(READ_ERROR)

    delimiter = sniff_delimiter(text)
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return IngestResult.failure(NO_CSV_DATA)
    except pd.errors.ParserError as exc:
        return IngestResult.failure(_parser_message(exc))

    short_row = _short_row_message(frame)
    if short_row:
        return IngestResult.failure(short_row)
    if len(frame.index) < 2:
        return IngestResult.failure(NO_CSV_DATA)

    frame = frame.fillna("")
    header: List[str] = [str(value) for value in frame.iloc[0].tolist()]
    rows = [_to_record(header, values) for values in frame.iloc[1:].itertuples(index=False, name=None)]
    return IngestResult.success(Table.from_records(header, rows))


def _trim_header(values: Sequence[Any]) -> List[Any]:
    end = len(values)
    while end and _is_missing(values[end - 1]):
        end -= 1
    return list(values[:end])


def parse_spreadsheet(data: bytes, kind: FileKind = FileKind.XLSX) -> IngestResult:
    """Parse the first worksheet of an Excel workbook positionally."""

    engine = "xlrd" if kind is FileKind.XLS else "openpyxl"
    try:
        sheets: Dict[Any, pd.DataFrame] = pd.read_excel(
            io.BytesIO(data),
            sheet_name=None,
            header=None,
            dtype=object,
            keep_default_na=False,
            engine=engine,
        )
    except Exception as exc:
        cause = str(exc) or type(exc).__name__
        logger.warning("Workbook could not be parsed: %s", cause)
        return IngestResult.failure(EXCEL_PARSE_ERROR.format(cause=cause))

    if not sheets:
        return IngestResult.failure(NO_WORKSHEETS)

    first_sheet = next(iter(sheets.values()))
    if len(first_sheet.index) == 0:
        return IngestResult.failure(NO_EXCEL_DATA)

    matrix = first_sheet.values.tolist()
    header = [_header_name(value) for value in _trim_header(matrix[0])]
    rows = [_to_record(header, values) for values in matrix[1:]]
    rows = [row for row in rows if any(value != "" for value in row.values())]
    if not rows:
        return IngestResult.failure(NO_EXCEL_DATA)
    return IngestResult.success(Table.from_records(header, rows))


def ingest(filename: str, content: Content) -> IngestResult:
    """Turn an uploaded file into a :class:`Table` or an error message."""

    kind = detect_file_kind(filename)
    if kind is None:
        log_event("ingest_rejected", {"file": filename}, level="warning", logger=logger)
        return IngestResult.failure(UNSUPPORTED_FORMAT)

    try:
        data = read_content(content)
    except OSError as exc:
        logger.error("Failed to read %s: %s", filename, exc)
        return IngestResult.failure(READ_ERROR)

    if kind.is_spreadsheet:
        result = parse_spreadsheet(data, kind)
    else:
        result = parse_csv(data)

    if result.ok:
        rows, cols = result.table.shape
        log_event("ingest_succeeded", {"file": filename, "rows": rows, "columns": cols}, logger=logger)
    else:
        log_event("ingest_failed", {"file": filename, "error": result.error}, level="warning", logger=logger)
    return result


class DataLoader:
    """Stateful front for :func:`ingest` tracking the in-flight upload.

    ``busy`` is advisory: the UI disables the uploader while it is set, and a
    second :meth:`parse` during a running one raises
    :class:`IngestionInProgressError`.
    """

    def __init__(self) -> None:
        self.busy = False
        self.last_result = IngestResult()

    def parse(self, filename: str, content: Content) -> IngestResult:
        """Ingest ``content`` and remember the outcome."""

        if self.busy:
            raise IngestionInProgressError(f"Cannot ingest '{filename}' while another file is being parsed.")
        self.busy = True
        try:
            result = ingest(filename, content)
        finally:
            self.busy = False
        self.last_result = result
        return result

    def reset(self) -> None:
        self.last_result = IngestResult()


__all__ = [
    "DataLoader",
    "EXCEL_PARSE_ERROR",
    "NO_CSV_DATA",
    "NO_EXCEL_DATA",
    "NO_WORKSHEETS",
    "READ_ERROR",
    "TOO_FEW_FIELDS",
    "UNSUPPORTED_FORMAT",
    "detect_file_kind",
    "ingest",
    "parse_csv",
    "parse_spreadsheet",
    "read_content",
    "sniff_delimiter",
]

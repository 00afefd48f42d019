import logging
import os
import re
from pathlib import Path

from app_utils.config import (
    CSV_BOM,
    CSV_DELIMITER,
    CSV_LINE_SEPARATOR,
    CSV_MEDIA_TYPE,
    EXPORT_DIR,
)

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = re.compile(r'[;"\r\n]')


def cell_text(value) -> str:
    if value is None:
        return ""
    # 60.0 -> "60", same as the numbers shown on screen
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_cell(value) -> str:
    s = cell_text(value)
    if _NEEDS_QUOTES.search(s):
        return '"' + s.replace('"', '""') + '"'
    return s


def serialize_csv(rows) -> bytes:
    """Semicolon-separated CSV, UTF-8 with a BOM so spreadsheets pick the right encoding.

    Rows are joined with a bare newline and there is no trailing newline.
    """
    lines = [CSV_DELIMITER.join(escape_cell(c) for c in row) for row in rows]
    return (CSV_BOM + CSV_LINE_SEPARATOR.join(lines)).encode("utf-8")


def export_filename(min_weight, max_weight, row_count) -> str:
    return (
        f"besoins-proteines_{cell_text(min_weight)}-{cell_text(max_weight)}kg_"
        f"{cell_text(row_count)}lignes.csv"
    )


def save_csv(rows, directory=EXPORT_DIR, filename=None) -> Path:
    """Write the table to `directory` and return the file path.

    For scripted or offline exports; the Streamlit page hands the same bytes
    to st.download_button instead. OSError is left to the caller.
    """
    rows = list(rows)
    if not rows:
        raise ValueError("Nothing to export: the table is empty")

    if filename is None:
        filename = "besoins-proteines.csv"
    os.makedirs(directory, exist_ok=True)
    path = Path(directory) / filename
    path.write_bytes(serialize_csv(rows))
    logger.info("CSV export written to %s (%d rows, %s)", path, len(rows), CSV_MEDIA_TYPE)
    return path

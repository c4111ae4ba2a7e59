"""
CSV Export

Builds spreadsheet-friendly CSV text: UTF-8 byte-order mark, every field
double-quoted, embedded quotes doubled, ``\\n`` line endings.
"""

import csv
from io import StringIO
from typing import Any, Mapping, Optional, Sequence


BOM = "\ufeff"


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def build_csv(
    rows: Sequence[Mapping[str, Any]],
    headers: Optional[Sequence[str]] = None,
) -> str:
    """
    Serialize rows into CSV text.

    Args:
        rows: Flat label -> value mappings, already translated for display.
        headers: Column order. Defaults to the keys of the first row.

    Returns:
        str: CSV content prefixed with a BOM.

    Raises:
        ValueError: If there are no rows and no explicit headers.
    """
    if headers is None:
        if not rows:
            raise ValueError("No data to export")
        headers = list(rows[0].keys())

    output = StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_cell(row.get(header)) for header in headers])

    # No trailing newline after the last record
    return BOM + output.getvalue().rstrip("\n")

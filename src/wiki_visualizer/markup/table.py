# ABOUTME: Splits a cleaned wikitable body into rows and cells and coerces cell text to numbers
# ABOUTME: Handles both inline (!! and ||) and one-cell-per-line (! and |) wikitable layouts

import re
from collections.abc import Iterable

from wiki_visualizer.core.models import Cell, Table

ROW_SEPARATOR = "|-"
HEADER_SEPARATOR = "!!"
HEADER_LINE_SEPARATOR = "\n!"
DATA_SEPARATOR = "||"
DATA_LINE_SEPARATOR = "\n|"

# Leading number of a cell, the way lenient float parsing reads "68465[1]" or "12%"
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_THOUSANDS_GROUP = re.compile(r"[+-]?\d{1,3}(?:,\d{3})+")
_SPACES = re.compile(r"\s+")


def split_rows(table_body: str) -> list[str]:
    """Split a table body on the ``|-`` row separator."""
    return table_body.split(ROW_SEPARATOR)


def _split_fields(line: str, separator: str, line_separator: str) -> list[str]:
    fields = line.split(separator)
    if len(fields) < 2:
        fields = line.split(line_separator)
    return fields


def extract_rows(lines: Iterable[str]) -> Table:
    """Turn raw row strings into a header and data rows of string cells.

    Blank rows are dropped before indexing. The first remaining row is the
    header; if it cannot be split into at least two labels it is skipped and
    the table has no header. Data rows that split into a single field are
    kept as they are.
    """
    header: list[Cell] = []
    rows: list[list[Cell]] = []
    first = True

    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        line = line[1:]  # leading "|" or "!"

        if first:
            first = False
            fields = _split_fields(line, HEADER_SEPARATOR, HEADER_LINE_SEPARATOR)
            if len(fields) < 2:
                continue
            header = [Cell.string(field.strip()) for field in fields]
        else:
            fields = _split_fields(line, DATA_SEPARATOR, DATA_LINE_SEPARATOR)
            rows.append([Cell.string(field.strip()) for field in fields])

    return Table(header=header, rows=rows)


def _normalize_separators(text: str) -> str:
    text = _SPACES.sub("", text)
    if "," in text and "." in text:
        # Whichever separator comes last is the decimal point
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if text.count(",") > 1 or _THOUSANDS_GROUP.fullmatch(text):
        return text.replace(",", "")
    if text.count(".") > 1:
        return text.replace(".", "")
    return text.replace(",", ".")


def coerce_number(text: str) -> float:
    """Parse a cell as a number, tolerating locale separators.

    Spaces are dropped and a comma is read as a decimal point unless it is
    clearly grouping thousands, so ``"12 345,6"`` is 12345.6 and ``"1,234"``
    is 1234.0. Text without a leading number is 0.0.
    """
    match = _LEADING_NUMBER.match(_normalize_separators(text.strip()))
    return float(match.group(0)) if match else 0.0


def normalize_table(table: Table, numeric_first_column: bool = False) -> Table:
    """Coerce every data cell except column 0 (unless requested) to a number."""
    start = 0 if numeric_first_column else 1
    rows = [
        [
            Cell.number(coerce_number(str(cell.value))) if index >= start else Cell.string(str(cell.value).strip())
            for index, cell in enumerate(row)
        ]
        for row in table.rows
    ]
    return Table(header=table.header, rows=rows)


def parse_table(table_body: str) -> Table:
    """Split a cleaned table body and extract its string cells."""
    return extract_rows(split_rows(table_body))

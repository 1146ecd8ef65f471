"""Parsing of spreadsheet rows into food candidates.

Rows follow the layout of the food export sheet: column A is the food name,
then calories, protein, fats and carbs per 100 g. The first row is a header,
so data rows are numbered from 2.
"""

import csv
import io
import math
from collections.abc import Iterable, Sequence

from calorie_tracker.domain.foods import ParsedFood

FIRST_DATA_ROW = 2

_NUMERIC_COLUMNS = (
    ("calories_per_100g", 1, "Invalid calories"),
    ("protein_per_100g", 2, "Invalid protein"),
    ("fats_per_100g", 3, "Invalid fats"),
    ("carbs_per_100g", 4, "Invalid carbs"),
)


def parse_food_csv(text: str) -> list[ParsedFood]:
    """Parse CSV text, detecting comma or semicolon delimiters."""
    sample = text[:2048]
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=",;\t")
    except csv.Error:
        dialect = csv.excel
    rows = list(csv.reader(io.StringIO(text), dialect))
    return parse_food_rows(rows[1:])


def parse_food_rows(rows: Iterable[Sequence[object]]) -> list[ParsedFood]:
    """Validate data rows, skipping rows with no content."""
    parsed: list[ParsedFood] = []
    non_blank = (row for row in rows if not _is_blank(row))
    for offset, row in enumerate(non_blank):
        parsed.append(_parse_row(row, offset + FIRST_DATA_ROW))
    return parsed


def _parse_row(row: Sequence[object], row_index: int) -> ParsedFood:
    errors: list[str] = []
    name = str(_cell(row, 0) or "").strip()
    if not name:
        errors.append("Name is required")

    values: dict[str, float] = {}
    for column, position, message in _NUMERIC_COLUMNS:
        value = _to_float(_cell(row, position))
        if value is None or not math.isfinite(value) or value < 0:
            errors.append(message)
            value = 0.0
        values[column] = value

    return ParsedFood(row_index=row_index, name=name, errors=tuple(errors), **values)


def _cell(row: Sequence[object], position: int) -> object | None:
    if position >= len(row):
        return None
    return row[position]


def _is_blank(row: Sequence[object]) -> bool:
    return all(cell is None or str(cell).strip() == "" for cell in row)


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        cleaned = value.strip().replace(",", ".")
        if not cleaned:
            return None
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None

"""Load a CSV file into a flat row-major list with an intercept slot."""

from __future__ import annotations

import csv
import os
from typing import List, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]


def _parse_number(value: str) -> float:
    if value != value.strip() or "_" in value:
        raise ValueError(f"invalid number: {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"invalid number: {value!r}") from exc


def from_csv(path: PathLike, with_headers: bool) -> Tuple[List[float], int]:
    """Read a CSV of numbers into row-major values and a record count.

    Each record is followed by a ``1.0`` that serves as the intercept slot.
    The target is expected in the first column. Records whose width differs
    from the first row raise :class:`ValueError`.
    """
    with open(path, newline="", encoding="utf-8") as handle:
        rows = [row for row in csv.reader(handle) if row]

    if with_headers and rows:
        header, records = rows[0], rows[1:]
    else:
        header = rows[0] if rows else []
        records = rows

    width = len(header)
    staged: List[float] = []
    for line_number, record in enumerate(records, start=1):
        if len(record) != width:
            raise ValueError(
                f"record {line_number} has {len(record)} fields, expected {width}"
            )
        staged.extend(_parse_number(value) for value in record)
        staged.append(1.0)

    feature_count = width + 1
    return staged, len(staged) // feature_count
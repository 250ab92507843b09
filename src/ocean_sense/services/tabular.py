"""Row extraction from CSV text and JSON payloads.

CSV rows come back as plain ``dict[str, str]`` with headers and values stripped;
type coercion is the normalizer's job. Blank lines are skipped, and a row
shorter than the header fills the missing cells with empty strings.
"""

from __future__ import annotations

import csv
import io
from typing import Any


def parse_csv_text(text: str) -> list[dict[str, str]]:
    """Parse CSV text that has a header row."""
    reader = csv.reader(io.StringIO(text))
    header: list[str] | None = None
    rows: list[dict[str, str]] = []
    for cells in reader:
        if not any(cell.strip() for cell in cells):
            continue
        if header is None:
            header = [cell.strip() for cell in cells]
            continue
        padded = cells + [""] * (len(header) - len(cells))
        rows.append({name: value.strip() for name, value in zip(header, padded, strict=False)})
    return rows


def unwrap_records(payload: Any, keys: tuple[str, ...] = ("results", "data", "items")) -> list[Any]:
    """Return the list of objects in a JSON payload.

    Accepts a bare list, an envelope holding the list under one of ``keys``,
    or a single object (returned as a one-item list). Anything else is empty.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in keys:
            inner = payload.get(key)
            if isinstance(inner, list):
                return inner
        return [payload]
    return []

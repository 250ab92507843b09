"""Normalize raw feed rows into canonical records.

Every feed (fisheries CSV/API rows, flattened cyclone track points, seasonal
cyclone table rows, flattened ocean-parameter readings) passes through
``normalize_rows`` with its source kind. Field lookup is driven by the alias
tables in ``reference.fields`` so alias tolerance stays declarative.

Rows whose year cannot be resolved are dropped and counted; nothing here
raises on malformed input.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ocean_sense.reference import fields
from ocean_sense.schemas import CanonicalRecord, SourceKind

_MISSING = object()
_LEADING_YEAR = re.compile(r"^\s*(\d{4})(?:$|[-/T\s])")
_TRAILING_YEAR = re.compile(r"[/\s.,-](\d{4})\s*$")


@dataclass
class NormalizationResult:
    """Records produced from a batch of raw rows, plus the drop count."""

    records: list[CanonicalRecord] = field(default_factory=list)
    dropped: int = 0

    @property
    def total(self) -> int:
        """Number of raw rows seen."""
        return len(self.records) + self.dropped


# =============================================================================
# Field lookup
# =============================================================================


def _lookup_path(row: Mapping[str, Any], path: str, *, fold_case: bool) -> Any:
    node: Any = row
    for part in path.split("."):
        if not isinstance(node, Mapping):
            return _MISSING
        if part in node:
            node = node[part]
            continue
        if not fold_case:
            return _MISSING
        wanted = part.lower()
        for key, value in node.items():
            if isinstance(key, str) and key.lower() == wanted:
                node = value
                break
        else:
            return _MISSING
    return node


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_field(row: Mapping[str, Any], candidates: Iterable[str]) -> Any:
    """Return the first non-blank value among ``candidates``, or None.

    Exact names are tried first in priority order, then the same names
    ignoring case.
    """
    names = tuple(candidates)
    for fold_case in (False, True):
        for name in names:
            value = _lookup_path(row, name, fold_case=fold_case)
            if value is not _MISSING and not _is_blank(value):
                return value
    return None


# =============================================================================
# Coercion
# =============================================================================


def to_number(value: Any) -> float | None:
    """Parse a finite float; anything else is absent (never zero)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _to_year(value: Any) -> int | None:
    number = to_number(value)
    if number is None or not number.is_integer():
        return None
    year = int(number)
    return year if 1 <= year <= 9999 else None


def year_from_date(value: Any) -> int | None:
    """Extract the calendar year from a date or datetime string."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).year
    except ValueError:
        pass
    # Year-month strings, OBIS interval strings ("2005-06-01/2005-06-03"), etc.
    match = _LEADING_YEAR.match(text)
    if match:
        return _to_year(match.group(1))
    # Slash-separated or month-name dates ("06/01/2005", "June 2005")
    match = _TRAILING_YEAR.search(text)
    if match:
        return _to_year(match.group(1))
    return None


def resolve_number(row: Mapping[str, Any], candidates: Iterable[str]) -> float | None:
    """Return the first candidate that parses as a number, or None.

    Same priority as ``resolve_field``, but an unparsable value falls through
    to the next alias instead of ending the lookup.
    """
    names = tuple(candidates)
    for fold_case in (False, True):
        for name in names:
            number = to_number(_lookup_path(row, name, fold_case=fold_case))
            if number is not None:
                return number
    return None


def resolve_year(row: Mapping[str, Any]) -> int | None:
    """Explicit/aliased numeric year first, then the year of a date field."""
    for name in fields.YEAR_FIELDS:
        year = _to_year(resolve_field(row, (name,)))
        if year is not None:
            return year
    return year_from_date(resolve_field(row, fields.DATE_FIELDS))


def resolve_coordinates(row: Mapping[str, Any]) -> tuple[float | None, float | None]:
    """Return (lat, lon) if both resolve to in-range numbers, else (None, None)."""
    lat = resolve_number(row, fields.LATITUDE_FIELDS)
    lon = resolve_number(row, fields.LONGITUDE_FIELDS)
    if lat is None or lon is None:
        return None, None
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None, None
    return lat, lon


def _attribute_value(value: Any) -> str | float | None:
    if _is_blank(value) or isinstance(value, Mapping | list):
        return None
    if isinstance(value, int | float) and not isinstance(value, bool):
        return to_number(value)
    return str(value).strip()


def _resolve_attributes(row: Mapping[str, Any], source_kind: SourceKind) -> dict[str, str | float]:
    attributes: dict[str, str | float] = {}
    for name in fields.ATTRIBUTE_FIELDS[source_kind]:
        value = _attribute_value(resolve_field(row, (name,)))
        if value is not None:
            attributes[name] = value

    # Pre-shaped rows (seasonal tables, flattened feeds) may carry extras
    extra = row.get("attributes")
    if isinstance(extra, Mapping):
        for key, raw in extra.items():
            value = _attribute_value(raw)
            if value is not None:
                attributes[str(key)] = value
    return attributes


# =============================================================================
# Public API
# =============================================================================


def normalize_row(row: Mapping[str, Any], source_kind: SourceKind) -> CanonicalRecord | None:
    """Convert one raw row into a canonical record, or None if it has no year.

    A row with a year but unusable coordinates still yields a record; it just
    carries no position and is skipped by spatial clustering.
    """
    year = resolve_year(row)
    if year is None:
        return None

    lat, lon = resolve_coordinates(row)
    label = resolve_field(row, fields.LABEL_FIELDS[source_kind])

    return CanonicalRecord(
        source_kind=source_kind,
        year=year,
        latitude=lat,
        longitude=lon,
        label=str(label).strip() if label is not None else "Unknown",
        value=resolve_number(row, fields.VALUE_FIELDS[source_kind]),
        attributes=_resolve_attributes(row, source_kind),
    )


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    source_kind: SourceKind,
) -> NormalizationResult:
    """Normalize a batch of raw rows, counting the ones dropped.

    Args:
        rows: Raw rows (CSV dicts of strings or JSON objects).
        source_kind: Feed family the rows came from.

    Returns:
        NormalizationResult with records in input order and the drop count.
        Non-mapping entries (stray JSON scalars) count as dropped.
    """
    result = NormalizationResult()
    for row in rows:
        record = normalize_row(row, source_kind) if isinstance(row, Mapping) else None
        if record is None:
            result.dropped += 1
        else:
            result.records.append(record)
    return result

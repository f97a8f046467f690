"""Ordered date -> weight record store and its two-column text format.

Design:
 - Records are kept ascending by date with unique dates at all times.
 - Readers get an immutable tuple snapshot via `RecordStore.records`.
 - Persistence to disk lives in core.storage; this module only converts text.
"""
from __future__ import annotations

import bisect
import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from operator import attrgetter
from typing import Iterator

from core.errors import DuplicateDate, IndexOutOfRange, InvalidDate, InvalidHeader, InvalidWeight
from core.validation import check_weight, format_date, format_weight, parse_date, parse_weight

logger = logging.getLogger(__name__)

HEADER = ("Date", "Weight")

_date_key = attrgetter("date")


@dataclass(frozen=True)
class Record:
    date: date
    weight: float


def parse_records(text: str) -> tuple[list[Record], int]:
    """Parse header + rows into sorted unique records.

    The header is strict, rows are lenient: rows with a bad date or weight are
    skipped, as are repeated dates (first occurrence wins). Returns the records
    and the number of skipped rows.
    """
    reader = csv.reader(io.StringIO(text), skipinitialspace=True)
    header = next(reader, None)
    if header is None:
        raise InvalidHeader("Missing header line")
    if len(header) != 2 or tuple(field.strip().lower() for field in header) != ("date", "weight"):
        raise InvalidHeader(f"Expected header 'Date, Weight', got {', '.join(header)!r}")

    by_date: dict[date, Record] = {}
    skipped = 0
    for line_no, row in enumerate(reader, start=2):
        if not row or not "".join(row).strip():
            continue
        if len(row) != 2:
            logger.warning("Skipping line %d: expected 2 fields, got %d", line_no, len(row))
            skipped += 1
            continue
        try:
            day = parse_date(row[0])
            weight = parse_weight(row[1])
        except (InvalidDate, InvalidWeight) as exc:
            logger.warning("Skipping line %d: %s", line_no, exc)
            skipped += 1
            continue
        if day in by_date:
            logger.warning("Skipping line %d: duplicate date %s", line_no, format_date(day))
            skipped += 1
            continue
        by_date[day] = Record(day, weight)

    return sorted(by_date.values(), key=_date_key), skipped


def format_records(records) -> str:
    lines = [", ".join(HEADER)]
    lines.extend(f"{format_date(r.date)}, {format_weight(r.weight)}" for r in records)
    return "\n".join(lines) + "\n"


class RecordStore:
    """Sorted, date-unique collection of weight records."""

    def __init__(self, records=()):
        self._records: list[Record] = []
        for record in records:
            self.append(record.date, record.weight)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self._records[self._check_index(index)]

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int) or not 0 <= index < len(self._records):
            raise IndexOutOfRange(f"Row {index!r} out of range for {len(self._records)} records")
        return index

    def index_of(self, day: date) -> int | None:
        pos = bisect.bisect_left(self._records, day, key=_date_key)
        if pos < len(self._records) and self._records[pos].date == day:
            return pos
        return None

    def last_index(self) -> int | None:
        return len(self._records) - 1 if self._records else None

    def append(self, day: date, weight: float) -> int:
        """Insert keeping date order. Returns the insertion index."""
        weight = check_weight(weight)
        pos = bisect.bisect_left(self._records, day, key=_date_key)
        if pos < len(self._records) and self._records[pos].date == day:
            raise DuplicateDate(day)
        self._records.insert(pos, Record(day, weight))
        logger.info("Added %s = %s at row %d", format_date(day), format_weight(weight), pos)
        return pos

    def edit(self, index: int, weight: float) -> Record:
        self._check_index(index)
        weight = check_weight(weight)
        record = Record(self._records[index].date, weight)
        self._records[index] = record
        logger.info("Edited %s = %s", format_date(record.date), format_weight(weight))
        return record

    def delete(self, index: int) -> Record:
        self._check_index(index)
        record = self._records.pop(index)
        logger.info("Deleted %s", format_date(record.date))
        return record

    def import_text(self, text: str) -> int:
        """Replace the whole store from text. Returns the number of skipped rows."""
        records, skipped = parse_records(text)
        self._records = records
        logger.info("Imported %d records (%d rows skipped)", len(records), skipped)
        return skipped

    def export_text(self) -> str:
        return format_records(self._records)

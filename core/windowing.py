"""Chart windowing: visible date range, plot points, axis bounds and labels.

Everything here is a pure function of (mode, anchor, records).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Sequence

import numpy as np
from dateutil.relativedelta import relativedelta

from core.records import Record
from core.validation import format_date

PAD = 2.0
EMPTY_Y_MIN = PAD
EMPTY_Y_MAX = 100.0 - PAD

# Offsets (in months from date_left) of the inner labels for year-long windows
_INNER_LABEL_MONTHS = (4, 8)


class ViewMode(str, Enum):
    MONTH = "month"
    YEAR = "year"
    ROLLING_YEAR = "rolling_year"

    def next(self) -> "ViewMode":
        modes = list(ViewMode)
        return modes[(modes.index(self) + 1) % len(modes)]

    def previous(self) -> "ViewMode":
        modes = list(ViewMode)
        return modes[(modes.index(self) - 1) % len(modes)]


@dataclass(frozen=True)
class ChartWindow:
    mode: ViewMode
    anchor: date
    title: str
    date_left: date
    date_right: date
    delta: int
    points: tuple[tuple[float, float], ...]
    y_min: float
    y_max: float
    x_labels: tuple[str, ...]
    y_labels: tuple[str, str]

    @property
    def is_empty(self) -> bool:
        return not self.points


def window_bounds(mode: ViewMode, anchor: date) -> tuple[date, date]:
    """Return the inclusive (date_left, date_right) range for `mode`."""
    if mode == ViewMode.MONTH:
        date_left = anchor.replace(day=1)
        date_right = date_left + relativedelta(months=1) - timedelta(days=1)
    elif mode == ViewMode.YEAR:
        date_left = date(anchor.year, 1, 1)
        date_right = date(anchor.year, 12, 31)
    elif mode == ViewMode.ROLLING_YEAR:
        date_right = anchor
        date_left = anchor - relativedelta(months=12)
    else:
        raise ValueError(f"Unknown view mode: {mode!r}")
    return date_left, date_right


def step_anchor(mode: ViewMode, anchor: date, steps: int) -> date:
    """Move `anchor` by `steps` units of the mode (month, year or day)."""
    if mode == ViewMode.MONTH:
        return anchor + relativedelta(months=steps)
    if mode == ViewMode.YEAR:
        return anchor + relativedelta(months=12 * steps)
    if mode == ViewMode.ROLLING_YEAR:
        return anchor + timedelta(days=steps)
    raise ValueError(f"Unknown view mode: {mode!r}")


def plot_points(
    records: Sequence[Record], date_left: date, date_right: date
) -> tuple[tuple[float, float], ...]:
    """Map in-window records to (days since date_left, weight); drop the rest."""
    if not records:
        return ()
    delta = (date_right - date_left).days
    offsets = np.fromiter(
        ((r.date - date_left).days for r in records), dtype=np.int64, count=len(records)
    )
    weights = np.fromiter((r.weight for r in records), dtype=np.float64, count=len(records))
    mask = (offsets >= 0) & (offsets <= delta)
    xs = offsets[mask].astype(np.float64)
    return tuple(zip(xs.tolist(), weights[mask].tolist()))


def value_bounds(points: Sequence[tuple[float, float]]) -> tuple[float, float]:
    if not points:
        return EMPTY_Y_MIN, EMPTY_Y_MAX
    weights = np.asarray([y for _, y in points], dtype=np.float64)
    return float(weights.min()) - PAD, float(weights.max()) + PAD


def axis_labels(mode: ViewMode, date_left: date, date_right: date) -> tuple[str, ...]:
    if mode == ViewMode.MONTH:
        return date_left.strftime("%d"), date_right.strftime("%d")

    inner = [date_left + relativedelta(months=m) for m in _INNER_LABEL_MONTHS]
    dates = [date_left, *inner, date_right]
    if mode == ViewMode.YEAR:
        return tuple(d.strftime("%b") for d in dates)
    return tuple(format_date(d) for d in dates)


def chart_title(mode: ViewMode, anchor: date) -> str:
    if mode == ViewMode.MONTH:
        return anchor.strftime("%b %Y")
    if mode == ViewMode.YEAR:
        return anchor.strftime("%Y")
    return "One Year Window"


def compute_window(mode: ViewMode, anchor: date, records: Sequence[Record]) -> ChartWindow:
    """Build the full chart description for one mode/anchor over a records snapshot."""
    date_left, date_right = window_bounds(mode, anchor)
    points = plot_points(records, date_left, date_right)
    y_min, y_max = value_bounds(points)
    return ChartWindow(
        mode=mode,
        anchor=anchor,
        title=chart_title(mode, anchor),
        date_left=date_left,
        date_right=date_right,
        delta=(date_right - date_left).days,
        points=points,
        y_min=y_min,
        y_max=y_max,
        x_labels=axis_labels(mode, date_left, date_right),
        y_labels=(f"{y_min:.1f}", f"{y_max:.1f}"),
    )

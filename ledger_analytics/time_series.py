from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable, List

from ledger_analytics.logging_setup import get_logger
from ledger_analytics.time_windows import CUSTOM, MONTHLY, YEARLY, normalize_window
from ledger_analytics.transactions import Transaction

ZERO = Decimal("0")
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_logger = get_logger("ledger_analytics.time_series")


@dataclass(frozen=True)
class SeriesPoint:
    date: str
    income: Decimal
    expense: Decimal


def bucket_income_expense(
    transactions: Iterable[Transaction],
    window: str,
    start_date: date | None = None,
    end_date: date | None = None,
    now: datetime | None = None,
) -> List[SeriesPoint]:
    """One income/expense point per transaction inside ``window``, in input order.

    ``monthly`` keeps records since the first day of the previous month,
    ``yearly`` since January 1 of the previous year. ``custom`` compares the
    raw timestamps against the bounds (a ``date`` bound means midnight) and
    is unrestricted until both bounds are set.
    """
    normalized_window = normalize_window(window)
    current = now or datetime.now()

    records = list(transactions)
    if normalized_window == MONTHLY:
        cutoff = _first_of_previous_month(current)
        records = [txn for txn in records if txn.date >= cutoff]
    elif normalized_window == YEARLY:
        cutoff = datetime(current.year - 1, 1, 1)
        records = [txn for txn in records if txn.date >= cutoff]
    elif normalized_window == CUSTOM and start_date is not None and end_date is not None:
        lower = _as_datetime(start_date)
        upper = _as_datetime(end_date)
        records = [txn for txn in records if lower <= txn.date <= upper]

    points = [
        SeriesPoint(
            date=format_point_date(txn.date),
            income=txn.amount if txn.increment else ZERO,
            expense=ZERO if txn.increment else txn.amount,
        )
        for txn in records
    ]
    _logger.debug("%s window kept %d point(s)", normalized_window, len(points))
    return points


def format_point_date(value: datetime) -> str:
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def _first_of_previous_month(current: datetime) -> datetime:
    if current.month == 1:
        return datetime(current.year - 1, 12, 1)
    return datetime(current.year, current.month - 1, 1)


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime.combine(value, time.min)

from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterable, List

from ledger_analytics.settings import get_recent_count
from ledger_analytics.transactions import Transaction

END_OF_DAY = time(23, 59, 59, 999000)


def filter_by_date_range(
    transactions: Iterable[Transaction],
    start_date: date | None = None,
    end_date: date | None = None,
    recent_count: int | None = None,
) -> List[Transaction]:
    """Restrict the ledger to the inclusive calendar-day window.

    Without both bounds the first ``recent_count`` records are returned as
    given, so callers should pass a newest-first list for that case.
    """
    records = list(transactions)
    if start_date is None or end_date is None:
        count = recent_count if recent_count is not None else get_recent_count()
        return records[:count]

    window_start = start_of_day(start_date)
    window_end = end_of_day(end_date)
    if window_start > window_end:
        return []
    return [txn for txn in records if window_start <= txn.date <= window_end]


def start_of_day(value: date) -> datetime:
    return datetime.combine(_as_date(value), time.min)


def end_of_day(value: date) -> datetime:
    return datetime.combine(_as_date(value), END_OF_DAY)


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List

from ledger_analytics.logging_setup import get_logger
from ledger_analytics.time_windows import CUSTOM, MONTHLY, YEARLY, normalize_window
from ledger_analytics.transactions import Transaction

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CATEGORY_COLORS = (
    "#0088FE",
    "#00C49F",
    "#FFBB28",
    "#FF8042",
    "#AF19FF",
    "#FF4560",
    "#008000",
    "#FF00FF",
)

_logger = get_logger("ledger_analytics.category_breakdown")


@dataclass(frozen=True)
class CategorySlice:
    name: str
    value: Decimal
    percentage: str
    color: str


@dataclass(frozen=True)
class IncomeBreakdown:
    slices: List[CategorySlice]
    total_income: Decimal


def income_breakdown(
    transactions: Iterable[Transaction],
    window: str,
    start_date: date | None = None,
    end_date: date | None = None,
    now: datetime | None = None,
) -> IncomeBreakdown:
    """Group credits inside ``window`` by description with their share of income.

    ``monthly`` and ``yearly`` mean the same calendar month/year as ``now``.
    ``custom`` compares calendar days inclusively and is unrestricted until
    both bounds are set. Groups keep first-occurrence order.
    """
    normalized_window = normalize_window(window)
    current = now or datetime.now()

    credits = [
        txn
        for txn in transactions
        if txn.increment and _in_window(txn, normalized_window, current, start_date, end_date)
    ]

    totals: Dict[str, Decimal] = {}
    for txn in credits:
        totals[txn.description] = totals.get(txn.description, ZERO) + txn.amount
    total_income = sum(totals.values(), ZERO)

    slices = [
        CategorySlice(
            name=name,
            value=value,
            percentage=format_percentage(value, total_income),
            color=CATEGORY_COLORS[index % len(CATEGORY_COLORS)],
        )
        for index, (name, value) in enumerate(totals.items())
    ]
    _logger.debug(
        "%s window: %d credit(s) in %d group(s)", normalized_window, len(credits), len(slices)
    )
    return IncomeBreakdown(slices=slices, total_income=total_income)


def format_percentage(value: Decimal, total: Decimal) -> str:
    if total == ZERO:
        return "0.00%"
    share = (value / total * HUNDRED).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{share}%"


def _in_window(
    txn: Transaction,
    window: str,
    current: datetime,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    if window == MONTHLY:
        return (txn.date.year, txn.date.month) == (current.year, current.month)
    if window == YEARLY:
        return txn.date.year == current.year
    if window == CUSTOM and start_date is not None and end_date is not None:
        return _as_date(start_date) <= txn.date.date() <= _as_date(end_date)
    return True


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value

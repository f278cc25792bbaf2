from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable

from ledger_analytics.logging_setup import get_logger
from ledger_analytics.transactions import Transaction, coerce_decimal, round_money

ZERO = Decimal("0")

_logger = get_logger("ledger_analytics.spending_limit")


def calculate_spending_limit(
    transactions: Iterable[Transaction],
    rate: Decimal | int | float | str | None = None,
) -> Decimal:
    """Average monthly expense over every month that has at least one debit.

    The average is accumulated month by month in chronological order; the
    value after the last month is the limit. ``rate`` converts the result
    into a display currency.
    """
    totals = monthly_expense_totals(transactions)
    if not totals:
        return round_money(ZERO)

    cumulative_sum = ZERO
    cumulative_count = 0
    moving_average = ZERO
    for month in sorted(totals):
        cumulative_sum += totals[month]
        cumulative_count += 1
        moving_average = cumulative_sum / cumulative_count

    _logger.debug(
        "Spending limit over %d month(s): %s", cumulative_count, moving_average
    )
    if rate is not None:
        return round_money(moving_average * coerce_decimal(rate))
    return round_money(moving_average)


def monthly_expense_totals(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for txn in transactions:
        if txn.increment:
            continue
        month = txn.date.strftime("%Y-%m")
        totals[month] = totals.get(month, ZERO) + txn.amount
    return totals

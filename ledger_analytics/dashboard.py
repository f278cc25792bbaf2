"""Compose the engine functions into the dashboard's ledger and summary views.

The dashboard shows amounts in a selected display currency and a spending
limit next to the ledger. The ledger table shows either the recent records,
a date-filtered slice or every record, in the chosen sort order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Mapping

from ledger_analytics.currency_conversion import (
    CurrencyDescriptor,
    convert_transactions,
    find_currency,
    get_rate,
    normalize_currency,
)
from ledger_analytics.date_filter import filter_by_date_range
from ledger_analytics.settings import get_base_currency
from ledger_analytics.sorting import sort_transactions
from ledger_analytics.spending_limit import calculate_spending_limit
from ledger_analytics.transactions import Transaction, round_money


@dataclass(frozen=True)
class DashboardSummary:
    currency: CurrencyDescriptor
    transactions: List[Transaction]
    spending_limit: Decimal


@dataclass(frozen=True)
class LedgerRow:
    serial: int
    amount: str
    description: str
    mode: str
    date: str
    balance: str


@dataclass(frozen=True)
class LedgerView:
    transactions: List[Transaction]
    rows: List[LedgerRow]


def summarize_dashboard(
    transactions: Iterable[Transaction],
    currency: str,
    rates: Mapping[str, Decimal | int | float | str] | None,
    base_currency: str | None = None,
) -> DashboardSummary:
    """Convert the ledger for display and compute its spending limit.

    The limit is averaged over the stored amounts and converted once at the
    end, so per-record rounding does not leak into it.
    """
    descriptor = find_currency(currency)
    if descriptor is None:
        raise ValueError(f"Unsupported display currency: {normalize_currency(currency)}")

    base = normalize_currency(base_currency or get_base_currency())
    records = list(transactions)
    converted = convert_transactions(records, descriptor.code, rates, base_currency=base)
    if descriptor.code == base:
        spending_limit = calculate_spending_limit(records)
    else:
        spending_limit = calculate_spending_limit(
            records, rate=get_rate(rates, descriptor.code, base_currency=base)
        )

    return DashboardSummary(
        currency=descriptor,
        transactions=converted,
        spending_limit=spending_limit,
    )


def build_ledger_view(
    transactions: Iterable[Transaction],
    symbol: str,
    sort_key: str = "date",
    start_date: date | None = None,
    end_date: date | None = None,
    show_all: bool = False,
) -> LedgerView:
    population = list(transactions)
    if show_all:
        visible = population
    else:
        visible = filter_by_date_range(population, start_date, end_date)

    ordered = sort_transactions(visible, sort_key, population=population)
    rows = [
        LedgerRow(
            serial=index,
            amount=f"{'+' if txn.increment else '-'}{symbol}{round_money(txn.amount)}",
            description=txn.description,
            mode=txn.mode,
            date=txn.date.strftime("%d-%m-%Y"),
            balance=f"{symbol}{round_money(txn.current_balance)}",
        )
        for index, txn in enumerate(ordered, start=1)
    ]
    return LedgerView(transactions=ordered, rows=rows)

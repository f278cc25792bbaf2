from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Mapping

from ledger_analytics.logging_setup import get_logger
from ledger_analytics.settings import get_base_currency
from ledger_analytics.transactions import Transaction, coerce_decimal, round_money

_logger = get_logger("ledger_analytics.currency_conversion")


@dataclass(frozen=True)
class CurrencyDescriptor:
    code: str
    symbol: str
    country: str


CURRENCIES: tuple[CurrencyDescriptor, ...] = (
    CurrencyDescriptor(code="INR", symbol="₹", country="India"),
    CurrencyDescriptor(code="USD", symbol="$", country="United States"),
    CurrencyDescriptor(code="EUR", symbol="€", country="European Union"),
    CurrencyDescriptor(code="GBP", symbol="£", country="United Kingdom"),
    CurrencyDescriptor(code="JPY", symbol="¥", country="Japan"),
    CurrencyDescriptor(code="CAD", symbol="C$", country="Canada"),
    CurrencyDescriptor(code="AUD", symbol="A$", country="Australia"),
    CurrencyDescriptor(code="CHF", symbol="CHF", country="Switzerland"),
    CurrencyDescriptor(code="CNY", symbol="¥", country="China"),
    CurrencyDescriptor(code="SGD", symbol="S$", country="Singapore"),
    CurrencyDescriptor(code="AED", symbol="د.إ", country="United Arab Emirates"),
)


class MissingRateError(ValueError):
    """Raised when no multiplier exists for a requested currency pair."""

    def __init__(self, base_currency: str, target_currency: str) -> None:
        self.base_currency = base_currency
        self.target_currency = target_currency
        super().__init__(
            f"No exchange rate for {base_currency}->{target_currency} "
            f"(expected key {rate_key(base_currency, target_currency)!r})."
        )


def find_currency(code: str) -> CurrencyDescriptor | None:
    normalized = normalize_currency(code)
    for descriptor in CURRENCIES:
        if descriptor.code == normalized:
            return descriptor
    return None


def rate_key(base_currency: str, target_currency: str) -> str:
    return f"{base_currency}{target_currency}"


def get_rate(
    rates: Mapping[str, Decimal | int | float | str] | None,
    target_currency: str,
    base_currency: str | None = None,
) -> Decimal:
    normalized_base = normalize_currency(base_currency or get_base_currency())
    normalized_target = normalize_currency(target_currency)
    if normalized_base == normalized_target:
        return Decimal("1")

    raw = (rates or {}).get(rate_key(normalized_base, normalized_target))
    if raw is None:
        raise MissingRateError(normalized_base, normalized_target)
    rate = coerce_decimal(raw)
    if rate <= 0:
        raise ValueError(
            f"Exchange rate for {normalized_base}->{normalized_target} must be positive."
        )
    return rate


def convert_transactions(
    transactions: Iterable[Transaction],
    target_currency: str,
    rates: Mapping[str, Decimal | int | float | str] | None,
    base_currency: str | None = None,
) -> List[Transaction]:
    """Express amounts and balances in ``target_currency`` for display."""
    normalized_base = normalize_currency(base_currency or get_base_currency())
    normalized_target = normalize_currency(target_currency)
    if normalized_base == normalized_target:
        return list(transactions)

    rate = get_rate(rates, normalized_target, base_currency=normalized_base)
    converted = [
        txn.model_copy(
            update={
                "amount": round_money(txn.amount * rate),
                "current_balance": round_money(txn.current_balance * rate),
            }
        )
        for txn in transactions
    ]
    _logger.debug(
        "Converted %d transaction(s) %s->%s at %s",
        len(converted),
        normalized_base,
        normalized_target,
        rate,
    )
    return converted


def normalize_currency(value: str) -> str:
    normalized = value.strip().upper()
    if len(normalized) != 3 or not normalized.isalpha():
        raise ValueError("Currency must be a 3-letter ISO 4217 code.")
    return normalized

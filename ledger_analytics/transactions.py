from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ledger_analytics.logging_setup import get_logger

CENT = Decimal("0.01")

_logger = get_logger("ledger_analytics.transactions")


class Transaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | str
    amount: Decimal = Field(ge=0)
    increment: bool
    current_balance: Decimal = Field(
        validation_alias=AliasChoices("current_balance", "currentbalance", "currentBalance"),
    )
    description: str = ""
    mode: str = ""
    date: datetime
    user_id: int | str | None = Field(
        default=None,
        validation_alias=AliasChoices("user_id", "userId"),
    )

    @field_validator("date")
    @classmethod
    def _drop_offset(cls, value: datetime) -> datetime:
        # Keep the wall-clock time so day/month derivations match the ISO text.
        if value.tzinfo is not None:
            return value.replace(tzinfo=None)
        return value


class LedgerLoadResult(BaseModel):
    transactions: list[Transaction]
    skipped: int = 0


def load_transactions(records: Iterable[Mapping[str, Any] | Transaction]) -> LedgerLoadResult:
    """Validate raw ledger records, excluding the ones that cannot be parsed."""
    transactions: list[Transaction] = []
    skipped = 0
    for record in records:
        if isinstance(record, Transaction):
            transactions.append(record)
            continue
        try:
            transactions.append(Transaction.model_validate(record))
        except ValidationError as exc:
            skipped += 1
            _logger.debug(
                "Skipping malformed record id=%s: %s",
                _record_id(record),
                exc.errors(include_url=False),
            )

    if skipped:
        _logger.warning(
            "Skipped %d malformed ledger record(s); loaded %d.", skipped, len(transactions)
        )
    return LedgerLoadResult(transactions=transactions, skipped=skipped)


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def coerce_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _record_id(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get("id")
    return None

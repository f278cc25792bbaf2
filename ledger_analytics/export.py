from __future__ import annotations

import csv
import io
from decimal import Decimal
from typing import Dict, Iterable, List

from pydantic import BaseModel

from ledger_analytics.currency_conversion import normalize_currency
from ledger_analytics.transactions import Transaction, round_money

SUPPORTED_EXPORT_FORMATS = {"csv", "pdf"}
EXPORT_FORMAT_ALIASES = {"table": "pdf"}


class ExportTable(BaseModel):
    columns: list[str]
    rows: list[list[str]]


def transform_for_export(
    transactions: Iterable[Transaction], currency_code: str
) -> List[Dict[str, str]]:
    """Flatten records into display strings, dropping internal-only fields."""
    code = normalize_currency(currency_code)
    return [
        {
            "amount": f"{'+' if txn.increment else '-'}{_money(txn.amount)} {code}",
            "currentbalance": f"{_money(txn.current_balance)} {code}",
            "description": txn.description,
            "mode": txn.mode,
            "date": txn.date.date().isoformat(),
        }
        for txn in transactions
    ]


def to_csv(transactions: Iterable[Transaction], currency_code: str) -> str:
    records = transform_for_export(transactions, currency_code)
    if not records:
        return ""

    buffer = io.StringIO()
    buffer.write(",".join(key.upper() for key in records[0]))
    buffer.write("\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(record.values() for record in records)
    return buffer.getvalue().removesuffix("\n")


def to_table(transactions: Iterable[Transaction], currency_code: str) -> ExportTable:
    records = transform_for_export(transactions, currency_code)
    if not records:
        return ExportTable(columns=[], rows=[])
    return ExportTable(
        columns=[key.upper() for key in records[0]],
        rows=[list(record.values()) for record in records],
    )


def build_export(
    transactions: Iterable[Transaction],
    currency_code: str,
    export_format: str = "csv",
) -> str | ExportTable:
    normalized_format = _validate_export_format(export_format)
    if normalized_format == "csv":
        return to_csv(transactions, currency_code)
    return to_table(transactions, currency_code)


def _validate_export_format(export_format: str) -> str:
    normalized = export_format.strip().lower()
    normalized = EXPORT_FORMAT_ALIASES.get(normalized, normalized)
    if normalized not in SUPPORTED_EXPORT_FORMATS:
        raise ValueError("Only csv or pdf exports are supported.")
    return normalized


def _money(value: Decimal) -> str:
    return str(round_money(value))

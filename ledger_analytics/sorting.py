from __future__ import annotations

from typing import Dict, Iterable, List

from ledger_analytics.transactions import Transaction

SUPPORTED_SORT_KEYS = {"date", "amount", "description"}


def sort_transactions(
    transactions: Iterable[Transaction],
    sort_key: str,
    population: Iterable[Transaction] | None = None,
) -> List[Transaction]:
    """Return a new list ordered by ``sort_key``, largest first.

    ``description`` ranks records by how often their description occurs in
    ``population`` (the full ledger, defaulting to ``transactions``), so a
    filtered view still reflects overall popularity. Ties keep input order.
    """
    records = list(transactions)
    normalized_key = _validate_sort_key(sort_key)

    if normalized_key == "amount":
        return sorted(records, key=lambda txn: txn.amount, reverse=True)
    if normalized_key == "description":
        frequencies = description_frequencies(records if population is None else population)
        return sorted(
            records,
            key=lambda txn: frequencies.get(txn.description, 0),
            reverse=True,
        )
    return sorted(records, key=lambda txn: txn.date, reverse=True)


def description_frequencies(transactions: Iterable[Transaction]) -> Dict[str, int]:
    frequencies: Dict[str, int] = {}
    for txn in transactions:
        frequencies[txn.description] = frequencies.get(txn.description, 0) + 1
    return frequencies


def _validate_sort_key(sort_key: str) -> str:
    normalized = sort_key.strip().lower()
    if normalized not in SUPPORTED_SORT_KEYS:
        raise ValueError("Only date, amount, or description sorting is supported.")
    return normalized

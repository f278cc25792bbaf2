from __future__ import annotations

import os

DEFAULT_BASE_CURRENCY = "INR"
DEFAULT_RECENT_COUNT = 10


def get_base_currency() -> str:
    raw = os.getenv("LEDGER_BASE_CURRENCY", DEFAULT_BASE_CURRENCY)
    normalized = raw.strip().upper()
    if len(normalized) != 3 or not normalized.isalpha():
        return DEFAULT_BASE_CURRENCY
    return normalized


def get_recent_count() -> int:
    raw = os.getenv("LEDGER_RECENT_COUNT")
    if not raw:
        return DEFAULT_RECENT_COUNT
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_RECENT_COUNT
    return value if value > 0 else DEFAULT_RECENT_COUNT

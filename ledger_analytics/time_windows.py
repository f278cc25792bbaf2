from __future__ import annotations

MONTHLY = "monthly"
YEARLY = "yearly"
ALL_TIME = "alltime"
CUSTOM = "custom"

SUPPORTED_WINDOWS = {MONTHLY, YEARLY, ALL_TIME, CUSTOM}
WINDOW_ALIASES = {"all": ALL_TIME}


def normalize_window(window: str) -> str:
    normalized = "".join(ch for ch in window.strip().lower() if ch.isalnum())
    normalized = WINDOW_ALIASES.get(normalized, normalized)
    if normalized not in SUPPORTED_WINDOWS:
        raise ValueError("Only monthly, yearly, all-time, or custom windows are supported.")
    return normalized

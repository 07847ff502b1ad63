from __future__ import annotations

from .models import StatEntry


def map_to_entries(exts: dict[str, StatEntry]) -> list[StatEntry]:
    return list(exts.values())


def sort_by_bytes_above(entries: list[StatEntry]) -> list[StatEntry]:
    # Stable: entries with equal bytes_above keep their input order.
    return sorted(entries, key=lambda e: e.bytes_above, reverse=True)


def clamp(n: int, upper: int, lower: int) -> int:
    return max(lower, min(upper, n))


def truncate(entries: list[StatEntry], n: int) -> list[StatEntry]:
    return entries[: clamp(int(n), len(entries), 0)]


def top_entries(exts: dict[str, StatEntry], n: int) -> list[StatEntry]:
    return truncate(sort_by_bytes_above(map_to_entries(exts)), n)

from __future__ import annotations

import re

UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")

_MULTIPLIERS = {
    "": 1,
    "b": 1,
    "k": 1 << 10,
    "kb": 1 << 10,
    "kib": 1 << 10,
    "m": 1 << 20,
    "mb": 1 << 20,
    "mib": 1 << 20,
    "g": 1 << 30,
    "gb": 1 << 30,
    "gib": 1 << 30,
    "t": 1 << 40,
    "tb": 1 << 40,
    "tib": 1 << 40,
    "p": 1 << 50,
    "pb": 1 << 50,
    "pib": 1 << 50,
    "e": 1 << 60,
    "eb": 1 << 60,
    "eib": 1 << 60,
}

_SIZE_RE = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)\s*([a-z]*)$")


def format_bytes(n: int) -> str:
    """
    Render a byte count using powers of 1024: whole bytes below 1 KB, one
    decimal place from KB upwards (`2000000` -> `1.9 MB`).
    """
    n = int(n)
    if n < 1024:
        return f"{n} B"
    value = float(n)
    i = 0
    while value >= 1024 and i < len(UNITS) - 1:
        value /= 1024
        i += 1
    # 1023.96 KB would print as "1024.0 KB"
    if round(value, 1) >= 1024 and i < len(UNITS) - 1:
        value /= 1024
        i += 1
    return f"{value:.1f} {UNITS[i]}"


def parse_bytes(s: str) -> int:
    text = (s or "").strip().lower()
    if not text:
        return 0
    m = _SIZE_RE.match(text)
    if m is None:
        raise ValueError(f"invalid size: {s!r}")
    number, unit = m.group(1), m.group(2)
    mult = _MULTIPLIERS.get(unit)
    if mult is None:
        raise ValueError(f"unknown size unit {unit!r} in {s!r}")
    if "." in number:
        return int(float(number) * mult)
    return int(number) * mult

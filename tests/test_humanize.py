from __future__ import annotations

import pytest

from git_migrate_info.humanize import format_bytes, parse_bytes


def test_format_bytes() -> None:
    assert format_bytes(0) == "0 B"
    assert format_bytes(1023) == "1023 B"
    assert format_bytes(1024) == "1.0 KB"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(2_000_000) == "1.9 MB"
    assert format_bytes(5_000_000) == "4.8 MB"
    assert format_bytes(5 * 1024**3) == "5.0 GB"


def test_format_bytes_promotes_rounded_unit() -> None:
    assert format_bytes(1_048_575) == "1.0 MB"


def test_parse_bytes() -> None:
    assert parse_bytes("500MB") == 524_288_000
    assert parse_bytes("1kb") == 1024
    assert parse_bytes("1.5 KiB") == 1536
    assert parse_bytes("10") == 10
    assert parse_bytes("10b") == 10
    assert parse_bytes("2G") == 2 * 1024**3
    assert parse_bytes("") == 0
    assert parse_bytes("   ") == 0


@pytest.mark.parametrize("bad", ["-1", "abc", "5 zb", "1.2.3MB", "MB"])
def test_parse_bytes_rejects_garbage(bad: str) -> None:
    with pytest.raises(ValueError):
        parse_bytes(bad)

from __future__ import annotations

from typing import TextIO

from .humanize import format_bytes
from .models import StatEntry


class ReportWriteError(RuntimeError):
    pass


def ljust(values: list[str]) -> list[str]:
    width = max((len(v) for v in values), default=0)
    return [v.ljust(width) for v in values]


def rjust(values: list[str]) -> list[str]:
    width = max((len(v) for v in values), default=0)
    return [v.rjust(width) for v in values]


def files_label(entry: StatEntry) -> str:
    # "files(s)" is part of the established output format.
    return f"{format_bytes(entry.bytes_above)}, {entry.total_above}/{entry.total} files(s)"


def percent_label(entry: StatEntry) -> str:
    return f"{entry.percent_above:.0f}%"


def format_report(entries: list[StatEntry], threshold: int) -> str:
    extensions = ljust([e.qualifier for e in entries])
    files = rjust([files_label(e) for e in entries])
    percentages = rjust([percent_label(e) for e in entries])

    lines: list[str] = [f"Files above {format_bytes(threshold)}:"]
    for ext, file_count, pct in zip(extensions, files, percentages):
        lines.append("\t".join([ext, file_count, pct]))
    return "\n".join(lines) + "\n"


def print_report(entries: list[StatEntry], threshold: int, to: TextIO) -> int:
    """
    Write the rendered report to `to` in a single call and return the number
    of bytes written.
    """
    text = format_report(entries, threshold)
    try:
        to.write(text)
        to.flush()
    except (OSError, ValueError) as e:
        raise ReportWriteError(f"failed writing migration info report: {e}") from e
    return len(text.encode("utf-8", errors="surrogateescape"))

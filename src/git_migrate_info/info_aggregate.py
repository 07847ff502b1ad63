from __future__ import annotations

from .models import Blob, StatEntry


def file_extension(path: str) -> str:
    # git paths are always "/"-separated; a backslash is part of the name.
    base = path.rsplit("/", 1)[-1]
    i = base.rfind(".")
    if i < 0:
        return ""
    return base[i:]


def qualifier_for_path(path: str) -> str:
    return f"*{file_extension(path)}"


class ExtensionStatsAggregator:
    """
    Folds `(path, size)` observations into per-extension statistics.

    Paths without an extension are ignored. Sizes strictly greater than
    `threshold` also count toward the `*_above` totals.
    """

    def __init__(self, threshold: int) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self.threshold = int(threshold)
        self._entries: dict[str, StatEntry] = {}

    @property
    def entries(self) -> dict[str, StatEntry]:
        return self._entries

    def observe(self, path: str, size: int) -> None:
        if size < 0:
            raise ValueError(f"negative size {size} for {path!r}")

        qualifier = qualifier_for_path(path)
        if len(qualifier) <= 1:
            return

        entry = self._entries.get(qualifier)
        if entry is None:
            entry = StatEntry(qualifier=qualifier)
            self._entries[qualifier] = entry

        entry.total += 1
        entry.bytes_total += size
        if size > self.threshold:
            entry.total_above += 1
            entry.bytes_above += size

    def visit(self, path: str, blob: Blob) -> Blob:
        self.observe(path, blob.size)
        return blob

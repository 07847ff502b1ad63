from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class StatEntry:
    qualifier: str
    total: int = 0
    bytes_total: int = 0
    total_above: int = 0
    bytes_above: int = 0

    @property
    def percent_above(self) -> float:
        return 100.0 * (self.total_above / self.total)


@dataclasses.dataclass(frozen=True)
class Blob:
    oid: str
    size: int


@dataclasses.dataclass(frozen=True)
class InfoOptions:
    above: int = 0
    top: int = 5
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    include_refs: tuple[str, ...] = ()
    exclude_refs: tuple[str, ...] = ()
    everything: bool = False
    remote: str = "origin"

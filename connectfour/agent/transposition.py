"""
Transposition table for the negamax search.

Entries are keyed by Board.position_code() and live for one decision only.
A cutoff in alpha-beta leaves only a bound on the true value, so each entry
records whether its value is exact or a lower/upper bound.

Replacement policy: always replace. A shallower result written later may
evict a deeper one; probes still check the stored depth before use.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class TTFlag(enum.Enum):
    EXACT = 0
    LOWER_BOUND = 1   # true value >= stored value (fail high)
    UPPER_BOUND = 2   # true value <= stored value (fail low)


@dataclass
class TTEntry:
    depth: int
    value: int
    flag: TTFlag


class TranspositionTable:
    def __init__(self) -> None:
        self.table: dict[int, TTEntry] = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def probe(self, key: int, depth: int) -> Optional[TTEntry]:
        """Return the entry for `key` if it was searched at least `depth` deep."""
        entry = self.table.get(key)
        if entry is None or entry.depth < depth:
            self.misses += 1
            return None
        self.hits += 1
        return entry

    def store(self, key: int, depth: int, value: int, flag: TTFlag) -> None:
        self.table[key] = TTEntry(depth=depth, value=value, flag=flag)
        self.stores += 1

    def clear(self) -> None:
        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def stats(self) -> dict:
        probes = self.hits + self.misses
        return {
            "entries": len(self.table),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hits / probes if probes else 0.0,
            "stores": self.stores,
        }

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: int) -> bool:
        return key in self.table

"""Open-addressing hash table with pluggable linear or double-hash probing."""

from __future__ import annotations

import operator
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TextIO, Tuple, TypeVar

from .strhash import MyStringHash

K = TypeVar("K")
V = TypeVar("V")

_MASK64 = (1 << 64) - 1

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class TableFullError(RuntimeError):
    """Raised when no free slot can be found or the table cannot grow further."""


class Prober(ABC, Generic[K]):
    """Base for probe sequences; ``next`` returns a slot index or None when exhausted."""

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start: int, m: int, key: K) -> None:
        """Begin a new probe sequence at ``start`` in a table of size ``m``."""
        self.start = start
        self.m = m
        self.num_probes = 0

    @abstractmethod
    def next(self) -> Optional[int]:
        """Return the next slot to examine, or None when probing has failed."""


class LinearProber(Prober[K]):
    """Examine consecutive slots, wrapping around, at most ``m`` times."""

    def next(self) -> Optional[int]:
        if self.num_probes >= self.m:
            return None
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


class DoubleHashProber(Prober[K]):
    """Step through the table by a key-dependent stride derived from a second hash."""

    def __init__(self, h2: Optional[Callable[[K], int]] = None) -> None:
        super().__init__()
        self.h2: Callable[[K], int] = h2 if h2 is not None else MyStringHash()
        self.step = 1

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def init(self, start: int, m: int, key: K) -> None:
        super().init(start, m, key)
        modulus = self._modulus_for(m)
        self.step = modulus - self.h2(key) % modulus

    def next(self) -> Optional[int]:
        if self.num_probes >= self.m:
            return None
        loc = ((self.start + self.num_probes * self.step) & _MASK64) % self.m
        self.num_probes += 1
        return loc


@dataclass
class _HashItem(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map from keys to values using open addressing and lazy deletion."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Optional[Prober[K]] = None,
        hasher: Optional[Callable[[K], int]] = None,
        kequal: Optional[Callable[[K, K], bool]] = None,
    ) -> None:
        self._alpha = resize_alpha
        self._prober: Prober[K] = prober if prober is not None else LinearProber()
        self._hasher: Callable[[K], int] = hasher if hasher is not None else hash
        self._kequal: Callable[[K, K], bool] = kequal if kequal is not None else operator.eq
        self._m_index = 0
        self._num_items = 0
        self._num_deleted = 0
        self._total_probes = 0
        self._table: List[Optional[_HashItem[K, V]]] = [None] * CAPACITIES[0]

    def empty(self) -> bool:
        """Return True when no live key/value pairs are stored."""
        return self._num_items == 0

    def __len__(self) -> int:
        return self._num_items

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, or update the value if the key is present."""
        load = (self._num_items + self._num_deleted) / CAPACITIES[self._m_index]
        if load >= self._alpha:
            self._resize()
        idx = self._probe(key)
        if idx is None:
            raise TableFullError("table full")
        slot = self._table[idx]
        if slot is None:
            self._table[idx] = _HashItem(key, value)
            self._num_items += 1
        else:
            slot.value = value

    def remove(self, key: K) -> None:
        """Mark the item with ``key`` as deleted; do nothing if it is absent."""
        idx = self._probe(key)
        if idx is None:
            return
        slot = self._table[idx]
        if slot is not None and not slot.deleted:
            slot.deleted = True
            self._num_items -= 1
            self._num_deleted += 1

    def _find_item(self, key: K) -> Optional[_HashItem[K, V]]:
        idx = self._probe(key)
        if idx is None:
            return None
        return self._table[idx]

    def find(self, key: K) -> Optional[Tuple[K, V]]:
        """Return the stored ``(key, value)`` pair, or None if the key is absent."""
        item = self._find_item(key)
        if item is None:
            return None
        return (item.key, item.value)

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        item = self._find_item(key)
        if item is None:
            raise KeyError(key)
        return item.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        """Replace the value of an existing key; raise KeyError if it is absent."""
        item = self._find_item(key)
        if item is None:
            raise KeyError(key)
        item.value = value

    def __contains__(self, key: Any) -> bool:
        return self._find_item(key) is not None

    def report_all(self, out: Optional[TextIO] = None) -> None:
        """Write every occupied bucket, deleted ones included, to ``out``."""
        stream = out if out is not None else sys.stdout
        for index, item in enumerate(self._table):
            if item is not None:
                stream.write(f"Bucket {index}: {item.key} {item.value}\n")

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def total_probes(self) -> int:
        return self._total_probes

    def _resize(self) -> None:
        if self._m_index >= len(CAPACITIES) - 1:
            raise TableFullError("No more capacity")
        old_table = self._table
        self._m_index += 1
        self._table = [None] * CAPACITIES[self._m_index]
        self._num_items = 0
        self._num_deleted = 0
        for item in old_table:
            if item is None or item.deleted:
                continue
            idx = self._probe(item.key)
            if idx is not None:
                self._table[idx] = _HashItem(item.key, item.value)
                self._num_items += 1

    def _probe(self, key: K) -> Optional[int]:
        capacity = CAPACITIES[self._m_index]
        start = self._hasher(key) % capacity
        self._prober.init(start, capacity, key)
        loc = self._prober.next()
        while loc is not None:
            self._total_probes += 1
            slot = self._table[loc]
            if slot is None:
                return loc
            if not slot.deleted and self._kequal(slot.key, key):
                return loc
            loc = self._prober.next()
            self._total_probes += 1
        return None
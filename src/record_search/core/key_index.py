"""
KeyIndex - hash table keyed by Record.key

Separate chaining with head insertion. The table doubles and rehashes every
entry once the occupancy ratio exceeds the threshold, checked before each
insert.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from .record import Record

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100
LOAD_FACTOR_THRESHOLD = 0.75
HASH_MULTIPLIER = 31


class _Entry:
    """Chain link: one key, its current record, the next link."""

    __slots__ = ("key", "record", "next")

    def __init__(self, key: str, record: Record, next: Optional["_Entry"] = None):
        self.key = key
        self.record = record
        self.next = next


class KeyIndex:
    """Resizable hash index - O(1) expected search and insert"""

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 load_factor_threshold: float = LOAD_FACTOR_THRESHOLD):
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        if not 0.0 < load_factor_threshold <= 1.0:
            raise ValueError(
                f"load_factor_threshold must be between 0.0 and 1.0, got {load_factor_threshold!r}"
            )
        self._capacity = capacity
        self._threshold = load_factor_threshold
        self._buckets: List[Optional[_Entry]] = [None] * capacity
        self._size = 0
        self._resize_count = 0

    # ----- public operations -----

    def insert(self, record: Record) -> None:
        """Insert or overwrite by key."""
        if self._size / self._capacity > self._threshold:
            self._resize()

        index = self._hash(record.key)
        entry = self._buckets[index]
        while entry is not None:
            if entry.key == record.key:
                entry.record = record
                return
            entry = entry.next

        self._buckets[index] = _Entry(record.key, record, self._buckets[index])
        self._size += 1

    def search(self, key: str) -> Optional[Record]:
        """Return the record stored under key, or None."""
        entry = self._buckets[self._hash(key)]
        while entry is not None:
            if entry.key == key:
                return entry.record
            entry = entry.next
        return None

    def all_records(self) -> List[Record]:
        return [entry.record for entry in self._iter_entries()]

    def size(self) -> int:
        return self._size

    # ----- introspection -----

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    @property
    def resize_count(self) -> int:
        return self._resize_count

    def stats(self) -> Dict[str, Any]:
        chain_lengths = [self._chain_length(head) for head in self._buckets]
        return {
            "size": self._size,
            "capacity": self._capacity,
            "load_factor": round(self.load_factor, 4),
            "load_factor_threshold": self._threshold,
            "occupied_buckets": sum(1 for length in chain_lengths if length),
            "longest_chain": max(chain_lengths, default=0),
            "resize_count": self._resize_count,
        }

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    # ----- internals -----

    def _hash(self, key: str) -> int:
        # Fold modulo capacity at every step so the accumulator stays bounded
        value = 0
        for char in key:
            value = (value * HASH_MULTIPLIER + ord(char)) % self._capacity
        return value

    def _resize(self) -> None:
        old_entries = list(self._iter_entries())
        old_capacity = self._capacity

        self._capacity = old_capacity * 2
        self._buckets = [None] * self._capacity
        for entry in old_entries:
            index = self._hash(entry.key)
            self._buckets[index] = _Entry(entry.key, entry.record, self._buckets[index])

        self._resize_count += 1
        logger.debug(
            f"Resized key index {old_capacity} -> {self._capacity} "
            f"({self._size} entries rehashed)"
        )

    def _iter_entries(self) -> Iterator[_Entry]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    @staticmethod
    def _chain_length(head: Optional[_Entry]) -> int:
        length = 0
        while head is not None:
            length += 1
            head = head.next
        return length

"""Row-tracking LFU cache used by the page replacement simulation."""

import heapq
from typing import Dict, List, Optional, Tuple

from lfu_simulation.cache.lfuCache import LFUCache


class RowCache:
    """
    LFU cache of numbers where every cached number occupies a row.

    Rows are numbered from 1. A new number takes the lowest free row;
    when the cache is full it takes over the row of the number it
    evicted.
    """

    def __init__(self, num_rows: int = 3):
        """
        Initialize row cache.

        Args:
            num_rows: Number of rows (cache capacity)
        """
        # The cached value of each number is the row it occupies
        self._cache: LFUCache[int, int] = LFUCache(num_rows)
        self._free_rows: List[int] = list(range(1, num_rows + 1))

    @property
    def num_rows(self) -> int:
        return self._cache.capacity

    def contains(self, key: int) -> bool:
        return self._cache.contains(key)

    def increment_frequency(self, key: int) -> bool:
        """
        Record a hit on a cached number.

        Returns:
            True if the number was cached, False otherwise
        """
        return self._cache.touch(key)

    def insert(self, key: int) -> int:
        """
        Insert a number, evicting the least frequently used one if full.

        Inserting a number that is already cached counts as a hit.

        Args:
            key: Number to insert

        Returns:
            Row the number occupies, or 0 if the cache has no rows
        """
        if self.num_rows == 0:
            return 0

        if self._cache.touch(key):
            return self.row_of(key)

        if self._cache.is_full():
            _, row = self._cache.evict()
        else:
            row = heapq.heappop(self._free_rows)

        self._cache.put(key, row)
        return row

    def remove_lfu(self) -> Optional[int]:
        """
        Remove the least frequently used number and free its row.

        Returns:
            The removed number, or None if the cache is empty
        """
        evicted = self._cache.evict()
        if evicted is None:
            return None
        removed_key, removed_row = evicted
        heapq.heappush(self._free_rows, removed_row)
        return removed_key

    def is_full(self) -> bool:
        return self._cache.is_full()

    def row_of(self, key: int) -> Optional[int]:
        """Get the row a number occupies, without counting as a hit."""
        return self._cache.peek(key).value

    def rows(self) -> Dict[int, int]:
        """Get the row -> number mapping, ordered by row."""
        return {row: key for key, row in sorted(self._cache.items(), key=lambda item: item[1])}

    def get_frequencies(self) -> Dict[int, int]:
        """Get a copy of the number -> frequency mapping."""
        return self._cache.snapshot_frequencies()

    def frequency_table(self) -> List[Tuple[int, List[int]]]:
        return self._cache.frequency_table()

    def __len__(self) -> int:
        return len(self._cache)

    def __str__(self) -> str:
        return str(self._cache)

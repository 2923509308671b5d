"""LFU (Least Frequently Used) cache implementation."""

from typing import Dict, Generic, Hashable, List, NamedTuple, Optional, Tuple, TypeVar

from loguru import logger

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class Lookup(NamedTuple, Generic[V]):
    """Result of a cache read. ``value`` is None when ``found`` is False."""

    value: Optional[V]
    found: bool


MISS = Lookup(None, False)


class LFUCache(Generic[K, V]):
    """
    LFU cache with size limit.

    Evicts the least frequently used item when the cache is full. Among
    items sharing the lowest frequency, the one that has gone longest
    without being inserted or touched is evicted first.

    A capacity of 0 disables the cache: every read misses and every
    write is ignored.
    """

    def __init__(self, capacity: int = 100):
        """
        Initialize LFU cache.

        Args:
            capacity: Maximum number of items in cache

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")

        self._capacity = capacity
        self._values: Dict[K, V] = {}
        self._frequencies: Dict[K, int] = {}
        # frequency -> keys in touch order (dict used as an ordered set)
        self._buckets: Dict[int, Dict[K, None]] = {}
        self._min_freq = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> Lookup[V]:
        """
        Get item from cache and update frequency.

        Args:
            key: Cache key

        Returns:
            Lookup with the cached value and found=True, or MISS
        """
        if self._capacity == 0 or key not in self._values:
            return MISS

        self._touch(key)
        return Lookup(self._values[key], True)

    def put(self, key: K, value: V):
        """
        Add or update item in cache.

        Updating an existing key counts as an access and bumps its
        frequency, even when the value is unchanged.

        Args:
            key: Cache key
            value: Value to cache
        """
        if self._capacity == 0:
            return

        if key in self._values:
            self._values[key] = value
            self._touch(key)
            return

        if len(self._values) >= self._capacity:
            self.evict()

        self._values[key] = value
        self._frequencies[key] = 1
        self._buckets.setdefault(1, {})[key] = None
        self._min_freq = 1

    def peek(self, key: K) -> Lookup[V]:
        """Read a cached value without counting it as an access."""
        if key not in self._values:
            return MISS
        return Lookup(self._values[key], True)

    def items(self) -> List[Tuple[K, V]]:
        """Get a copy of the cached (key, value) pairs in insertion order."""
        return list(self._values.items())

    def touch(self, key: K) -> bool:
        """
        Bump the frequency of a cached key without reading it.

        Returns:
            True if the key was cached, False otherwise
        """
        if key not in self._values:
            return False
        self._touch(key)
        return True

    def evict(self) -> Optional[Tuple[K, V]]:
        """
        Evict the least frequently used item.

        Returns:
            The evicted (key, value) pair, or None if the cache is empty
        """
        if not self._values:
            return None

        bucket = self._buckets[self._min_freq]
        # First key in the bucket is the oldest among equal frequencies
        evict_key = next(iter(bucket))
        del bucket[evict_key]
        if not bucket:
            del self._buckets[self._min_freq]
            self._advance_min_freq()

        del self._frequencies[evict_key]
        value = self._values.pop(evict_key)
        logger.debug(f"Evicted key {evict_key!r} from LFU cache")
        return evict_key, value

    def contains(self, key: K) -> bool:
        """Check if key exists in cache."""
        return key in self._values

    def is_full(self) -> bool:
        """Check if the next new key would force an eviction."""
        return len(self._values) >= self._capacity

    def frequency_of(self, key: K) -> Optional[int]:
        """Get the access frequency of a key, or None if not cached."""
        return self._frequencies.get(key)

    def snapshot_frequencies(self) -> Dict[K, int]:
        """
        Get a copy of the key -> frequency mapping.

        The copy is independent of the cache; later operations do not
        change it.
        """
        return dict(self._frequencies)

    def frequency_table(self) -> List[Tuple[int, List[K]]]:
        """
        Get the frequency buckets, highest frequency first.

        Returns:
            List of (frequency, keys) pairs. Keys within a bucket are
            ordered from next-to-evict to most recently touched.
        """
        return [
            (freq, list(self._buckets[freq]))
            for freq in sorted(self._buckets, reverse=True)
        ]

    def clear(self):
        """Clear all items from cache."""
        self._values.clear()
        self._frequencies.clear()
        self._buckets.clear()
        self._min_freq = 0

    def size(self) -> int:
        """Get current cache size."""
        return len(self._values)

    def _touch(self, key: K):
        old_freq = self._frequencies[key]
        new_freq = old_freq + 1

        bucket = self._buckets[old_freq]
        del bucket[key]
        if not bucket:
            del self._buckets[old_freq]
            if old_freq == self._min_freq:
                # The key just moved to old_freq + 1, so that bucket exists
                self._min_freq = new_freq

        self._buckets.setdefault(new_freq, {})[key] = None
        self._frequencies[key] = new_freq

    def _advance_min_freq(self):
        if not self._buckets:
            self._min_freq = 0
            return
        while self._min_freq not in self._buckets:
            self._min_freq += 1

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return "".join(
            f"{freq}\t\t| {keys}\n" for freq, keys in self.frequency_table()
        )

    def __repr__(self) -> str:
        return f"LFUCache(capacity={self._capacity}, size={len(self._values)})"

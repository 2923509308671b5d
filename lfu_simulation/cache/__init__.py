"""LFU cache engine and the row-tracking simulation cache."""

from lfu_simulation.cache.lfuCache import LFUCache, Lookup, MISS
from lfu_simulation.cache.rowCache import RowCache

__all__ = [
    'LFUCache',
    'Lookup',
    'MISS',
    'RowCache',
]

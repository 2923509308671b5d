"""LFU cache with a page replacement simulation."""

from lfu_simulation.cache import LFUCache, Lookup, RowCache

__version__ = '0.1.0'

__all__ = [
    'LFUCache',
    'Lookup',
    'RowCache',
]

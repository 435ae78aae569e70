"""
Utility modules for VocList.
"""

from .cache import cache_get, cache_set, cache_clear
from .list_cache import ListNameCache

__all__ = ['cache_get', 'cache_set', 'cache_clear', 'ListNameCache']

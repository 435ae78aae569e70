"""
Names of the user's word lists, keyed by list id.
"""

import threading
from typing import Any, Dict, Optional

from ..errors import ListNameNotCached


class ListNameCache:
    """
    In-memory table of list id -> list name.

    Filled whenever the user's lists are fetched. Entries are never evicted
    or written to disk. Ids are stored as strings so 2137002 and "2137002"
    find the same list.
    """

    def __init__(self):
        self._names: Dict[str, str] = {}
        self._lock = threading.Lock()

    def remember(self, list_id: Any, name: str):
        """Record the name of a list."""
        with self._lock:
            self._names[str(list_id)] = name

    def get(self, list_id: Any) -> str:
        """
        Look up a list name.

        Raises:
            ListNameNotCached: the list has not been fetched yet
        """
        with self._lock:
            try:
                return self._names[str(list_id)]
            except KeyError:
                raise ListNameNotCached(list_id) from None

    def get_or_none(self, list_id: Any) -> Optional[str]:
        """Look up a list name, None if unknown."""
        with self._lock:
            return self._names.get(str(list_id))

    def __contains__(self, list_id: Any) -> bool:
        with self._lock:
            return str(list_id) in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the current table."""
        with self._lock:
            return dict(self._names)

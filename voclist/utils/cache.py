"""
File cache for vocabulary.com lookups.

Entries are JSON files named after the md5 of their key, stamped with the
time they were written and dropped once older than CACHE_EXPIRY.
"""

import json
import hashlib
from pathlib import Path
from datetime import datetime
from typing import Any, Optional

from .. import config


def get_cache_path(key: str) -> Path:
    """Get cache file path for a key."""
    hash_key = hashlib.md5(key.encode('utf-8')).hexdigest()
    return config.CACHE_DIR / f"{hash_key}.json"


def cache_get(key: str, max_age: Optional[float] = None) -> Optional[Any]:
    """
    Get a cached value if present and fresh.

    Args:
        key: Cache key
        max_age: Seconds an entry stays valid (defaults to CACHE_EXPIRY)

    Returns:
        Cached value or None if missing, expired or unreadable
    """
    path = get_cache_path(key)
    if not path.exists():
        return None

    max_age = config.CACHE_EXPIRY if max_age is None else max_age
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        written = datetime.fromisoformat(data['timestamp'])
        if (datetime.now() - written).total_seconds() < max_age:
            return data.get('value')
    except (json.JSONDecodeError, KeyError, ValueError, TypeError):
        pass

    # Expired or corrupted
    path.unlink(missing_ok=True)
    return None


def cache_set(key: str, value: Any) -> bool:
    """
    Store a JSON-serializable value.

    Returns:
        True if the value was written
    """
    path = get_cache_path(key)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({
                'key': key,
                'timestamp': datetime.now().isoformat(),
                'value': value,
            }, f, ensure_ascii=False)
        return True
    except (OSError, TypeError, ValueError):
        path.unlink(missing_ok=True)
        return False


def cache_clear(key: Optional[str] = None) -> int:
    """
    Remove one entry, or every entry when no key is given.

    Returns:
        Number of entries removed
    """
    if key:
        path = get_cache_path(key)
        if path.exists():
            path.unlink()
            return 1
        return 0

    count = 0
    for path in config.CACHE_DIR.glob("*.json"):
        try:
            path.unlink()
            count += 1
        except OSError:
            pass
    return count

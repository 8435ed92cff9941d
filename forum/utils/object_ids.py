# forum/utils/object_ids.py
"""
Time-ordered object identifiers.

Every user, article and comment id is the creation instant in milliseconds
since the Unix epoch. Pages read the creation time straight off the id and
queries sort by id to get "newest first", so ids must never be regenerated
as opaque values.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone

_lock = threading.Lock()
_last_id = 0


def new_object_id() -> int:
    """Return a new id; strictly increasing within the process."""
    global _last_id
    with _lock:
        now = int(time.time() * 1000)
        _last_id = now if now > _last_id else _last_id + 1
        return _last_id


def object_id_to_datetime(object_id: int | str) -> datetime:
    """Creation time (UTC) carried by an object id."""
    return datetime.fromtimestamp(int(object_id) / 1000, tz=timezone.utc)

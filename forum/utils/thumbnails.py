# forum/utils/thumbnails.py
from __future__ import annotations

import hashlib

GRAVATAR_BASE = "http://secure.gravatar.com/avatar/"
DEFAULT_THUMBNAIL_PATH = "/images/user-thumbnail.png"


def user_thumbnail_url(email: str, static_serve_path: str, size: int = 140) -> str:
    """
    Gravatar URL for `email`, falling back to the site's default thumbnail.

    >>> user_thumbnail_url("a@example.com", "http://x/static")[:33]
    'http://secure.gravatar.com/avatar'
    """
    digest = hashlib.md5((email or "").encode("utf-8")).hexdigest()
    return f"{GRAVATAR_BASE}{digest}?s={size}&d={static_serve_path}{DEFAULT_THUMBNAIL_PATH}"

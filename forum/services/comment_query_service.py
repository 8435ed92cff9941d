# forum/services/comment_query_service.py
from __future__ import annotations

from typing import List

from sqlalchemy.orm import joinedload

from forum.models import Comment


def get_user_comments(user_id: int, page: int, page_size: int) -> List[Comment]:
    """
    One page (1-based) of the comments written by `user_id`, newest first.
    Each comment comes with its article loaded so the history page can link to it.
    """
    if page < 1 or page_size < 1:
        raise ValueError(f"invalid page {page} / page size {page_size}")

    return (
        Comment.query
        .options(joinedload(Comment.article))
        .filter_by(author_id=int(user_id))
        .order_by(Comment.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )

# forum/services/article_query_service.py
from __future__ import annotations

from typing import List

from forum.models import Article


def get_user_articles(user_id: int, page: int, page_size: int) -> List[Article]:
    """
    One page (1-based) of the articles written by `user_id`, newest first.
    """
    if page < 1 or page_size < 1:
        raise ValueError(f"invalid page {page} / page size {page_size}")

    return (
        Article.query
        .filter_by(author_id=int(user_id))
        .order_by(Article.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )

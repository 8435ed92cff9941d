# forum/services/user_query_service.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import func

from forum.extensions import db
from forum.models import User


def get_user_by_name(name: str) -> Optional[User]:
    if not name:
        return None
    return User.query.filter_by(name=name).first()


def get_user_by_email(email: str) -> Optional[User]:
    if not email:
        return None
    return User.query.filter(func.lower(User.email) == email.strip().lower()).first()


def get_user(user_id) -> Optional[User]:
    try:
        return db.session.get(User, int(user_id))
    except (TypeError, ValueError):
        return None

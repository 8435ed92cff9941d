# forum/services/user_mgmt_service.py
"""
Validated, persistent updates to users.

Every mutation validates the whole patch first and only then writes onto the
user, so a rejected call leaves the (session-bound) user untouched. Failures
surface as ServiceError carrying a localized, human readable detail.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlparse

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from forum.extensions import db
from forum.models import User
from forum.services import user_query_service
from forum.services.lang_service import get_label
from forum.utils.requests import opt_string

USER_NAME_RE = re.compile(r"^[A-Za-z0-9_\-]{1,20}$")
QQ_RE = re.compile(r"^\d{5,12}$")
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Path segments owned by other routes; a user with such a name would have no home page.
RESERVED_USER_NAMES = frozenset({"settings", "auth", "static"})

MAX_USER_URL_LEN = 100
MAX_USER_INTRO_LEN = 255
MAX_B3_KEY_LEN = 20
MAX_B3_CLIENT_URL_LEN = 150
MAX_PASSWORD_LEN = 64


class ServiceError(Exception):
    """A user update was rejected or could not be persisted."""


# ----------------------------- patches ---------------------------------------

@dataclass(frozen=True)
class ProfilesPatch:
    user_name: str
    user_url: str
    user_qq: str
    user_intro: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "ProfilesPatch":
        return cls(
            user_name=opt_string(data, "userName"),
            user_url=opt_string(data, "userURL"),
            user_qq=opt_string(data, "userQQ"),
            user_intro=opt_string(data, "userIntro"),
        )


@dataclass(frozen=True)
class SyncB3Patch:
    b3_key: str
    add_article_url: str
    add_comment_url: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SyncB3Patch":
        return cls(
            b3_key=opt_string(data, "b3Key"),
            add_article_url=opt_string(data, "addArticleURL"),
            add_comment_url=opt_string(data, "addCommentURL"),
        )


@dataclass(frozen=True)
class PasswordPatch:
    password: str
    new_password: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PasswordPatch":
        return cls(
            password=opt_string(data, "password"),
            new_password=opt_string(data, "newPassword"),
        )


# ----------------------------- validation ------------------------------------

def _is_http_url(value: str, max_len: int) -> bool:
    if len(value) > max_len:
        return False
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _check_user_name(name: str, owner: User | None = None) -> None:
    if not USER_NAME_RE.match(name):
        raise ServiceError(get_label("invalidUserNameLabel"))
    if name.lower() in RESERVED_USER_NAMES:
        raise ServiceError(get_label("reservedUserNameLabel"))
    existing = user_query_service.get_user_by_name(name)
    if existing is not None and (owner is None or existing.id != owner.id):
        raise ServiceError(get_label("duplicatedUserNameLabel"))


def _check_password(password: str) -> None:
    if not 1 <= len(password) <= MAX_PASSWORD_LEN:
        raise ServiceError(get_label("invalidPasswordLabel"))


def _commit(user: User) -> None:
    try:
        db.session.add(user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("[user] could not save user id=%s: %s", user.id, type(e).__name__)
        raise ServiceError(get_label("dbErrorLabel")) from e


# ----------------------------- mutations -------------------------------------

def update_profiles(user: User, patch: ProfilesPatch) -> None:
    _check_user_name(patch.user_name, owner=user)
    if patch.user_url and not _is_http_url(patch.user_url, MAX_USER_URL_LEN):
        raise ServiceError(get_label("invalidUserURLLabel"))
    if patch.user_qq and not QQ_RE.match(patch.user_qq):
        raise ServiceError(get_label("invalidUserQQLabel"))
    if len(patch.user_intro) > MAX_USER_INTRO_LEN:
        raise ServiceError(get_label("invalidUserIntroLabel"))

    user.name = patch.user_name
    user.url = patch.user_url
    user.qq = patch.user_qq
    user.intro = patch.user_intro
    _commit(user)
    current_app.logger.info("[user] profiles updated for user id=%s", user.id)


def update_sync_b3(user: User, patch: SyncB3Patch) -> None:
    if len(patch.b3_key) > MAX_B3_KEY_LEN:
        raise ServiceError(get_label("invalidUserB3KeyLabel"))
    for url in (patch.add_article_url, patch.add_comment_url):
        if url and not _is_http_url(url, MAX_B3_CLIENT_URL_LEN):
            raise ServiceError(get_label("invalidUserB3ClientURLLabel"))

    user.b3_key = patch.b3_key
    user.b3_client_add_article_url = patch.add_article_url
    user.b3_client_add_comment_url = patch.add_comment_url
    _commit(user)
    current_app.logger.info("[user] B3 sync updated for user id=%s", user.id)


def update_password(user: User, patch: PasswordPatch) -> None:
    """Replace the password. The caller has already verified `patch.password`."""
    _check_password(patch.new_password)

    user.set_password(patch.new_password)
    _commit(user)
    current_app.logger.info("[user] password updated for user id=%s", user.id)


def create_user(name: str, email: str, password: str) -> User:
    _check_user_name(name)
    email = (email or "").strip().lower()
    if not EMAIL_RE.match(email):
        raise ServiceError(get_label("invalidEmailLabel"))
    if user_query_service.get_user_by_email(email) is not None:
        raise ServiceError(get_label("duplicatedEmailLabel"))
    _check_password(password)

    user = User(name=name, email=email)
    user.set_password(password)
    _commit(user)
    current_app.logger.info("[user] created user id=%s name=%s", user.id, user.name)
    return user

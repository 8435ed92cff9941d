# FILE: forum/routes/user.py
"""
User home pages and account settings.

    GET  /<user_name>             home page with the user's latest articles
    GET  /<user_name>/comments    home page with the user's latest comments
    GET  /settings                settings page of the signed-in user
    POST /settings/profiles       display name, URL, QQ, intro
    POST /settings/sync/b3        B3log sync key and client callback URLs
    POST /settings/password       password change

Settings handlers receive the signed-in user as `principal`; see _register().
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Dict

from flask import Blueprint, abort, current_app, jsonify, render_template
from flask_login import current_user, login_required

from forum.models import User
from forum.services import (
    article_query_service,
    comment_query_service,
    user_mgmt_service,
    user_query_service,
)
from forum.services.lang_service import get_label
from forum.services.user_mgmt_service import PasswordPatch, ProfilesPatch, ServiceError, SyncB3Patch
from forum.utils.object_ids import object_id_to_datetime
from forum.utils.requests import parse_request_json
from forum.utils.results import Outcome
from forum.utils.thumbnails import user_thumbnail_url

user_bp = Blueprint("user", __name__)

OLD_PASSWORD_ERROR = "old password error"


# ----------------------------- helpers ---------------------------------------

def _thumbnail_url(user: User) -> str:
    cfg = current_app.config
    return user_thumbnail_url(user.email, cfg["STATIC_SERVE_PATH"], size=cfg["USER_THUMBNAIL_SIZE"])


def _home_model(user_name: str) -> Dict[str, Any]:
    """Shared part of both home pages; 404s before anything else is fetched."""
    user = user_query_service.get_user_by_name(user_name)
    if user is None:
        abort(404)

    return {
        "user": user,
        "user_thumbnail_url": _thumbnail_url(user),
        "user_create_time": object_id_to_datetime(user.id),
    }


def _update_failed(e: ServiceError) -> Outcome:
    msg = f"{get_label('updateFailLabel')} - {e}"
    current_app.logger.exception(msg)
    return Outcome.failure(msg)


def _apply(mutation: Callable[[User, Any], None], principal: User, patch: Any):
    try:
        mutation(principal, patch)
    except ServiceError as e:
        return jsonify(_update_failed(e).to_json())
    return jsonify(Outcome.ok().to_json())


# ----------------------------- pages -----------------------------------------

def show_home(user_name: str):
    data_model = _home_model(user_name)
    data_model["user_home_articles"] = article_query_service.get_user_articles(
        data_model["user"].id, 1, current_app.config["USER_HOME_ARTICLES_CNT"]
    )
    return render_template("home/home.html", **data_model)


def show_home_comments(user_name: str):
    data_model = _home_model(user_name)
    data_model["user_home_comments"] = comment_query_service.get_user_comments(
        data_model["user"].id, 1, current_app.config["USER_HOME_CMTS_CNT"]
    )
    return render_template("home/comments.html", **data_model)


def show_settings(principal: User):
    return render_template(
        "home/settings.html",
        user=principal,
        user_thumbnail_url=_thumbnail_url(principal),
    )


# ----------------------------- settings updates ------------------------------

def update_profiles(principal: User):
    patch = ProfilesPatch.from_json(parse_request_json())
    return _apply(user_mgmt_service.update_profiles, principal, patch)


def update_sync_b3(principal: User):
    patch = SyncB3Patch.from_json(parse_request_json())
    return _apply(user_mgmt_service.update_sync_b3, principal, patch)


def update_password(principal: User):
    patch = PasswordPatch.from_json(parse_request_json())
    if not principal.check_password(patch.password):
        return jsonify(Outcome.failure(OLD_PASSWORD_ERROR).to_json())
    return _apply(user_mgmt_service.update_password, principal, patch)


# ----------------------------- route table -----------------------------------

# (rule, endpoint, view, methods, needs signed-in principal)
ROUTES = (
    ("/settings", "settings", show_settings, ["GET"], True),
    ("/settings/profiles", "update_profiles", update_profiles, ["POST"], True),
    ("/settings/sync/b3", "update_sync_b3", update_sync_b3, ["POST"], True),
    ("/settings/password", "update_password", update_password, ["POST"], True),
    ("/<user_name>", "home", show_home, ["GET"], False),
    ("/<user_name>/comments", "home_comments", show_home_comments, ["GET"], False),
)


def _with_principal(view: Callable) -> Callable:
    @wraps(view)
    def wrapped(*args, **kwargs):
        return view(*args, principal=current_user._get_current_object(), **kwargs)

    return login_required(wrapped)


def _register(bp: Blueprint) -> None:
    for rule, endpoint, view, methods, needs_principal in ROUTES:
        bp.add_url_rule(
            rule,
            endpoint=endpoint,
            view_func=_with_principal(view) if needs_principal else view,
            methods=methods,
        )


_register(user_bp)

# FILE: forum/routes/auth.py
from __future__ import annotations

from urllib.parse import urlparse, urljoin

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from forum.services import user_query_service

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


# ----------------------------- helpers ---------------------------------------

def _is_safe_redirect_target(target: str) -> bool:
    if not target:
        return False
    ref = urlparse(request.host_url)
    test = urlparse(urljoin(request.host_url, target))
    return (test.scheme in ("http", "https")) and (ref.netloc == test.netloc)


def _post_auth_redirect(user):
    nxt = request.args.get("next") or request.form.get("next")
    if nxt and _is_safe_redirect_target(nxt):
        return redirect(nxt)
    return redirect(url_for("user.home", user_name=user.name))


# ----------------------------- routes ----------------------------------------

@auth_bp.route("/login", methods=["GET", "POST"], endpoint="login")
def login():
    if current_user.is_authenticated and request.method == "GET":
        return _post_auth_redirect(current_user)

    if request.method == "POST":
        name_or_email = (request.form.get("name_or_email") or "").strip()
        password = request.form.get("password") or ""

        user = user_query_service.get_user_by_name(name_or_email)
        if user is None and "@" in name_or_email:
            user = user_query_service.get_user_by_email(name_or_email)

        if user is None or not user.check_password(password):
            current_app.logger.warning("[auth] failed sign-in for %r", name_or_email)
            flash("Invalid user name or password.", "danger")
            return render_template(
                "auth/login.html", name_or_email=name_or_email, next=request.args.get("next", "")
            ), 401

        login_user(user, remember=bool(request.form.get("remember")))
        current_app.logger.info("[auth] user id=%s signed in", user.id)
        return _post_auth_redirect(user)

    return render_template("auth/login.html", next=request.args.get("next", ""))


@auth_bp.get("/logout", endpoint="logout")
@login_required
def logout():
    logout_user()
    flash("You have been signed out.", "info")
    return redirect(url_for("auth.login"))

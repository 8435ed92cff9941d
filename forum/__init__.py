# FILE: forum/__init__.py
"""
Forum application factory.
Constructs the Flask application, registers extensions and blueprints,
and sets up logging.
"""

from __future__ import annotations

import os
import sys
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime, date
from typing import Any

from flask import Flask, render_template

# extensions
from forum.extensions import db, login_manager, migrate, csrf


def _init_logging(app: Flask) -> None:
    """Configure app.logger once: rotating file (if LOG_DIR) + console on a TTY."""
    if getattr(app, "_logging_initialized", False):
        return

    app.logger.setLevel(logging.INFO)
    app.logger.propagate = False

    # Remove any handlers the reloader might have added
    for h in list(app.logger.handlers):
        app.logger.removeHandler(h)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    logs_dir = app.config.get("LOG_DIR")
    if logs_dir:
        os.makedirs(logs_dir, exist_ok=True)
        fh = RotatingFileHandler(os.path.join(logs_dir, "forum.log"), maxBytes=2_000_000, backupCount=5)
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)
        app.logger.addHandler(fh)

    if app.testing:
        # let pytest's caplog see records
        app.logger.propagate = True
    elif getattr(sys, "stderr", None) and hasattr(sys.stderr, "isatty") and sys.stderr.isatty():
        ch = logging.StreamHandler(stream=sys.stderr)
        ch.setLevel(logging.INFO)
        ch.setFormatter(fmt)
        app.logger.addHandler(ch)

    app._logging_initialized = True


def fmt_date(value, fmt: str = "%Y-%m-%d %H:%M") -> str:
    """Format a date/datetime for display; "" for falsy values."""
    if not value:
        return ""
    if isinstance(value, (datetime, date)):
        return value.strftime(fmt)
    return str(value)


def create_app(config_object: Any | None = None) -> Flask:
    """
    Application factory for the forum.
    Uses FLASK_CONFIG env var (e.g., "config.ProductionConfig") unless
    an explicit config class/path is passed via `config_object`.
    """
    app = Flask(
        __name__,
        static_folder="static",
        template_folder="templates",
    )

    # ---------- Core config ----------
    cfg = config_object or os.getenv("FLASK_CONFIG", "config.DevelopmentConfig")
    app.config.from_object(cfg)

    app.config.setdefault("WTF_CSRF_HEADERS", ["X-CSRFToken", "X-CSRF-Token"])

    if app.config.get("DEBUG"):
        app.config["TEMPLATES_AUTO_RELOAD"] = True

    _init_logging(app)

    # ---------- Init extensions ----------
    csrf.init_app(app)
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    app.add_template_filter(fmt_date, name="fmt_date")

    from forum.utils.context_injectors import inject_page_globals
    app.context_processor(inject_page_globals)

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template("errors/404.html", message="Page not found."), 404

    # --- Import models so SQLAlchemy registers them ---
    from . import models as _models  # noqa: F401

    from forum.routes.auth import auth_bp
    from forum.routes.user import user_bp

    # ---------- Register ----------
    # user_bp owns the catch-all /<user_name>; register it last
    app.register_blueprint(auth_bp)
    app.register_blueprint(user_bp)

    from forum.commands import create_user_command, init_db_command
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_user_command)

    # ---------- Login manager ----------
    from forum.services import user_query_service

    @login_manager.user_loader
    def load_user(user_id: str):
        return user_query_service.get_user(user_id) if user_id else None

    login_manager.login_view = "auth.login"

    app.logger.info("[forum] app initialized (%s)", cfg if isinstance(cfg, str) else cfg.__name__)
    return app

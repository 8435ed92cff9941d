# FILE: forum/utils/context_injectors.py
# ---------------------------------------------------------
# Header / footer values shared by every page template.
# ---------------------------------------------------------
from datetime import date

from flask import current_app
from flask_login import current_user
from flask_wtf.csrf import generate_csrf


def inject_page_globals():
    """Header (signed-in state, site, static path) and footer (version, year) context."""
    cfg = current_app.config

    # Expose csrf_token() callable for templates
    def csrf_token():
        try:
            return generate_csrf()
        except Exception:
            return ""

    return {
        "is_logged_in": bool(getattr(current_user, "is_authenticated", False)),
        "site_name": cfg.get("SITE_NAME", "Forum"),
        "static_serve_path": cfg.get("STATIC_SERVE_PATH", ""),
        "site_version": cfg.get("SITE_VERSION", ""),
        "current_year": date.today().year,
        "csrf_token": csrf_token,
    }

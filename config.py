# config.py (project root)
import os
from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent
INSTANCE_DIR = PROJECT_ROOT / "instance"          # <repo>/instance
LOG_DIR      = PROJECT_ROOT / "logs"


class Config:
    # --- Security / CSRF ---
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-change-me")
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 60 * 60  # 1 hour

    # --- SQLAlchemy ---
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///" + str((INSTANCE_DIR / "forum.db").resolve()).replace("\\", "/"),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Keep bound values (password hashes) out of error messages and tracebacks
    SQLALCHEMY_ENGINE_OPTIONS = {"hide_parameters": True}

    # --- Cookies ---
    SESSION_COOKIE_HTTPONLY = True
    REMEMBER_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    REMEMBER_COOKIE_SAMESITE = "Lax"

    # --- Logging (None disables the rotating file handler) ---
    LOG_DIR = str(LOG_DIR)

    # --- Forum ---
    SITE_NAME = os.environ.get("SITE_NAME", "Forum")
    SITE_VERSION = "0.2.0"
    # Prefix for static assets referenced from outside the app (avatar fallback image)
    STATIC_SERVE_PATH = os.environ.get("STATIC_SERVE_PATH", "http://localhost:5000/static")
    LOCALE = os.environ.get("FORUM_LOCALE", "en_US")
    USER_HOME_ARTICLES_CNT = 20
    USER_HOME_CMTS_CNT = 20
    USER_THUMBNAIL_SIZE = 140


class DevelopmentConfig(Config):
    DEBUG = True
    TESTING = False
    SESSION_COOKIE_SECURE = False
    REMEMBER_COOKIE_SECURE = False
    # No CSRF expiry during dev
    WTF_CSRF_TIME_LIMIT = None


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False
    # Only send cookies over HTTPS in prod
    SESSION_COOKIE_SECURE = True
    REMEMBER_COOKIE_SECURE = True
    WTF_CSRF_TIME_LIMIT = 60 * 60 * 8
    SERVER_NAME = os.environ.get("SERVER_NAME")  # e.g., "forum.example.com"


class TestingConfig(Config):
    DEBUG = False
    TESTING = True
    SECRET_KEY = "testing"
    WTF_CSRF_ENABLED = False
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_DIR = None
    STATIC_SERVE_PATH = "http://forum.test/static"

# forum/constants/__init__.py
from .lang import DEFAULT_LOCALE, LABELS

__all__ = ["DEFAULT_LOCALE", "LABELS"]

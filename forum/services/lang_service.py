# forum/services/lang_service.py
from __future__ import annotations

from typing import Optional

from flask import current_app

from forum.constants.lang import DEFAULT_LOCALE, LABELS


def get_label(key: str, locale: Optional[str] = None) -> str:
    """
    Localized label for `key`.
    Locale defaults to config["LOCALE"]; unknown locales fall back to en_US,
    unknown keys come back as the key itself.
    """
    locale = locale or current_app.config.get("LOCALE") or DEFAULT_LOCALE
    labels = LABELS.get(locale) or LABELS[DEFAULT_LOCALE]
    label = labels.get(key) or LABELS[DEFAULT_LOCALE].get(key)
    if label is None:
        current_app.logger.warning("[lang] missing label %r for locale %s", key, locale)
        return key
    return label

import logging

from forum.services.lang_service import get_label


def test_default_locale(app):
    with app.app_context():
        assert get_label("updateFailLabel") == "Update failed"


def test_explicit_and_configured_locale(app):
    with app.app_context():
        assert get_label("updateFailLabel", "zh_CN") == "更新失败"
        app.config["LOCALE"] = "zh_CN"
        assert get_label("updateFailLabel") == "更新失败"


def test_unknown_locale_falls_back_to_english(app):
    with app.app_context():
        assert get_label("updateFailLabel", "fr_FR") == "Update failed"


def test_unknown_key_returns_key_and_warns(app, caplog):
    with app.app_context(), caplog.at_level(logging.WARNING):
        assert get_label("noSuchLabel") == "noSuchLabel"
    assert any("noSuchLabel" in r.getMessage() for r in caplog.records)

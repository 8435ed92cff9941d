import pytest

from forum.extensions import db
from forum.models import Article, User
from forum.services import article_query_service, user_mgmt_service, user_query_service
from forum.services.user_mgmt_service import PasswordPatch, ProfilesPatch, ServiceError, SyncB3Patch


def _profiles(**overrides):
    data = {"userName": "alice", "userURL": "", "userQQ": "", "userIntro": ""}
    data.update(overrides)
    return ProfilesPatch.from_json(data)


def test_patch_from_json_defaults_missing_and_null_fields():
    assert ProfilesPatch.from_json({"userName": "x", "userURL": None}) == ProfilesPatch("x", "", "", "")
    assert SyncB3Patch.from_json({}) == SyncB3Patch("", "", "")
    assert PasswordPatch.from_json({"password": 123}) == PasswordPatch("123", "")


@pytest.mark.parametrize("name", ["", "has space", "x" * 21, "名字"])
def test_invalid_user_names(app, user, name):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        with pytest.raises(ServiceError):
            user_mgmt_service.update_profiles(alice, _profiles(userName=name))


@pytest.mark.parametrize("field,value", [
    ("userURL", "not a url"),
    ("userURL", "http://" + "x" * 100 + ".com"),
    ("userQQ", "12ab"),
    ("userQQ", "1234"),
    ("userIntro", "x" * 256),
])
def test_invalid_profile_fields_leave_user_untouched(app, user, field, value):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        with pytest.raises(ServiceError):
            user_mgmt_service.update_profiles(alice, _profiles(userName="renamed", **{field: value}))
        assert alice.name == "alice"


def test_keeping_own_name_is_not_a_duplicate(app, user):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        user_mgmt_service.update_profiles(alice, _profiles(userIntro="same name"))
        assert user_query_service.get_user_by_name("alice").intro == "same name"


def test_b3_key_length(app, user):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        with pytest.raises(ServiceError):
            user_mgmt_service.update_sync_b3(alice, SyncB3Patch("k" * 21, "", ""))


def test_password_is_stored_hashed(app, user):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        user_mgmt_service.update_password(alice, PasswordPatch("old", "n3w"))
        assert alice.password_hash != "n3w"
        assert alice.check_password("n3w")


def test_create_user_validation(app, user):
    with app.app_context():
        with pytest.raises(ServiceError, match="already taken"):
            user_mgmt_service.create_user("alice", "other@example.com", "pw")
        with pytest.raises(ServiceError, match="already registered"):
            user_mgmt_service.create_user("carol", "A@Example.com", "pw")
        with pytest.raises(ServiceError, match="Invalid email"):
            user_mgmt_service.create_user("carol", "carol", "pw")
        assert User.query.count() == 1


def test_user_lookup(app, user):
    with app.app_context():
        assert user_query_service.get_user_by_name("alice").id == user["id"]
        assert user_query_service.get_user_by_name("nobody") is None
        assert user_query_service.get_user_by_name("") is None
        assert user_query_service.get_user_by_email(" A@EXAMPLE.COM ").id == user["id"]
        assert user_query_service.get_user("not-an-id") is None


def test_user_articles_pagination(app, user):
    with app.app_context():
        for i in range(5):
            db.session.add(Article(author_id=user["id"], title=f"t{i}"))
        db.session.commit()

        page1 = article_query_service.get_user_articles(user["id"], 1, 2)
        page3 = article_query_service.get_user_articles(user["id"], 3, 2)
        assert [a.title for a in page1] == ["t4", "t3"]
        assert [a.title for a in page3] == ["t0"]
        with pytest.raises(ValueError):
            article_query_service.get_user_articles(user["id"], 0, 2)


def test_commit_failure_rolls_back_and_raises_generic_error(app, user, read_only_db):
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        with pytest.raises(ServiceError) as excinfo:
            user_mgmt_service.update_password(alice, PasswordPatch("old", "new"))

        assert str(excinfo.value) == "Could not save changes, please try again later"
        assert excinfo.value.__cause__ is not None
        # rollback expired the pending change; the reloaded row still has the old hash
        assert alice.check_password("old")


def test_commit_failure_label_follows_locale(app, user, read_only_db):
    app.config["LOCALE"] = "zh_CN"
    with app.app_context():
        alice = user_query_service.get_user(user["id"])
        with pytest.raises(ServiceError, match="保存失败"):
            user_mgmt_service.update_sync_b3(alice, SyncB3Patch("k", "", ""))

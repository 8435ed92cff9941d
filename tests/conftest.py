import pytest
from flask import template_rendered
from sqlalchemy import text

from config import TestingConfig
from forum import create_app
from forum.extensions import db
from forum.models import Article, Comment
from forum.services import user_mgmt_service


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(app):
    """A stored user "alice" whose password is "old"."""
    with app.app_context():
        u = user_mgmt_service.create_user("alice", "a@example.com", "old")
        return {"id": u.id, "name": u.name, "email": u.email}


@pytest.fixture
def other_user(app):
    with app.app_context():
        u = user_mgmt_service.create_user("bob", "b@example.com", "secret")
        return {"id": u.id, "name": u.name, "email": u.email}


@pytest.fixture
def auth_client(client, user):
    resp = client.post("/auth/login", data={"name_or_email": "alice", "password": "old"})
    assert resp.status_code == 302
    return client


@pytest.fixture
def seed_posts(app, user, other_user):
    """Three articles by alice, two comments by alice on bob's article."""
    with app.app_context():
        for i in range(3):
            db.session.add(Article(author_id=user["id"], title=f"alice article {i}", content="..."))
        db.session.commit()
        bobs = Article(author_id=other_user["id"], title="bob article", content="...")
        db.session.add(bobs)
        db.session.commit()
        for i in range(2):
            db.session.add(Comment(author_id=user["id"], article_id=bobs.id, content=f"alice comment {i}"))
        db.session.commit()


@pytest.fixture
def captured_templates(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


@pytest.fixture
def read_only_db(app, user):
    """Every write fails with sqlite's "attempt to write a readonly database"."""
    with app.app_context():
        db.session.execute(text("PRAGMA query_only = ON"))
        db.session.commit()
    yield
    with app.app_context():
        db.session.execute(text("PRAGMA query_only = OFF"))
        db.session.commit()

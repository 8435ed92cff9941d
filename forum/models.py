# -*- coding: utf-8 -*-
from __future__ import annotations

# ----------------------
# Flask
# ----------------------
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

# ----------------------
# SQLAlchemy (core + orm)
# ----------------------
from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

# ----------------------
# App extensions (db MUST be imported before using db.Column)
# ----------------------
from forum.extensions import db
from forum.utils.object_ids import new_object_id


def _object_id_column():
    # ids are creation timestamps, see forum.utils.object_ids
    return db.Column(BigInteger, primary_key=True, autoincrement=False, default=new_object_id)


# ======================
# Users
# ======================
class User(UserMixin, db.Model):
    __tablename__ = "user"

    id = _object_id_column()
    name = db.Column(String(20), unique=True, nullable=False, index=True)
    email = db.Column(String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(String(256), nullable=False)

    # Profile
    url = db.Column(String(100), default="", nullable=False)
    qq = db.Column(String(12), default="", nullable=False)
    intro = db.Column(String(255), default="", nullable=False)

    # B3log client sync
    b3_key = db.Column(String(20), default="", nullable=False)
    b3_client_add_article_url = db.Column(String(150), default="", nullable=False)
    b3_client_add_comment_url = db.Column(String(150), default="", nullable=False)

    articles = relationship("Article", back_populates="author", lazy="dynamic")
    comments = relationship("Comment", back_populates="author", lazy="dynamic")

    # ------------------ Methods ------------------
    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self) -> str:
        return f"<User {self.id} {self.name}>"


# ======================
# Articles & comments
# ======================
class Article(db.Model):
    __tablename__ = "article"

    id = _object_id_column()
    author_id = db.Column(BigInteger, ForeignKey("user.id"), nullable=False, index=True)
    title = db.Column(String(255), nullable=False)
    content = db.Column(Text, default="", nullable=False)
    comment_count = db.Column(Integer, default=0, nullable=False)

    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article", cascade="all, delete-orphan", lazy="dynamic")

    def __repr__(self) -> str:
        return f"<Article {self.id} {self.title!r}>"


class Comment(db.Model):
    __tablename__ = "comment"

    id = _object_id_column()
    author_id = db.Column(BigInteger, ForeignKey("user.id"), nullable=False, index=True)
    article_id = db.Column(BigInteger, ForeignKey("article.id"), nullable=False, index=True)
    content = db.Column(Text, nullable=False)

    author = relationship("User", back_populates="comments")
    article = relationship("Article", back_populates="comments")

    def __repr__(self) -> str:
        return f"<Comment {self.id} on Article {self.article_id}>"

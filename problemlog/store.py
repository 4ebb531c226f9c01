# =========================
# store.py
# 問題・ユーザーの保存先
# =========================

from __future__ import annotations

import logging
from datetime import datetime, timezone

from flask import current_app
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError

from .errors import ValidationError
from .models import Problem, User

logger = logging.getLogger(__name__)

EXTENSION_KEY = "problem_store"

# 更新で上書きする項目
EDITABLE_FIELDS = ("title", "content", "category", "difficulty", "solution", "source_link")


def _remap_integrity_error(exc: IntegrityError, fallback: str) -> ValidationError:
    text = str(exc.orig if exc.orig is not None else exc).lower()
    if "unique" in text or "duplicate" in text:
        message = "Username already exists"
    elif "foreign key" in text:
        message = "Invalid user reference"
    else:
        message = fallback
    logger.warning("Integrity error remapped to %r: %s", message, text)
    return ValidationError(message)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite は接続ごとに外部キー制約を有効にする必要がある
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class ProblemStore:
    """Flask-SQLAlchemy のセッションを包む保存用ハンドル

    アプリ生成時に ``init_app`` で登録し、アプリコンテキスト終了時に
    ``close``、プロセス終了時に ``dispose`` を呼ぶ。
    """

    def __init__(self, db, app=None):
        self.db = db
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions[EXTENSION_KEY] = self
        app.teardown_appcontext(self.close)
        with app.app_context():
            engine = self.db.engine
            if engine.dialect.name == "sqlite":
                event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    @property
    def session(self):
        return self.db.session

    def close(self, exc=None):
        self.db.session.remove()

    def dispose(self):
        self.db.engine.dispose()

    # =========================
    # ユーザー
    # =========================
    def create_user(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise _remap_integrity_error(exc, "Could not create user") from exc
        return user

    def get_user(self, user_id: str) -> User | None:
        return self.session.get(User, user_id)

    def find_user(self, username: str) -> User | None:
        return User.query.filter_by(username=username).first()

    # =========================
    # 問題
    # =========================
    def list_problems(self, owner_id, page, limit, category=None, difficulty=None):
        query = Problem.query.filter_by(user_id=owner_id)
        if category:
            query = query.filter_by(category=category)
        if difficulty:
            query = query.filter_by(difficulty=difficulty)
        query = query.order_by(Problem.created_at.desc())
        return query.paginate(page=page, per_page=limit, error_out=False)

    def get_problem(self, problem_id: str) -> Problem | None:
        return self.session.get(Problem, problem_id)

    def get_owned_problem(self, problem_id: str, owner_id: str) -> Problem | None:
        return Problem.query.filter_by(id=problem_id, user_id=owner_id).first()

    def create_problem(self, owner_id: str, **fields) -> Problem:
        problem = Problem(user_id=owner_id, **fields)
        self.session.add(problem)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise _remap_integrity_error(exc, "Could not save question") from exc
        return problem

    def update_problem(self, problem: Problem, **fields) -> Problem:
        for name in EDITABLE_FIELDS:
            if name in fields:
                setattr(problem, name, fields[name])
        problem.updated_at = datetime.now(timezone.utc)
        self.session.commit()
        return problem

    def delete_problem(self, problem: Problem) -> None:
        self.session.delete(problem)
        self.session.commit()


def get_store() -> ProblemStore:
    return current_app.extensions[EXTENSION_KEY]

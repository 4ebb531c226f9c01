# =========================
# models/user.py
# =========================

import uuid
from datetime import datetime, timezone

from flask_login import UserMixin

from ..extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


# =========================
# ユーザーモデル
# =========================
class User(UserMixin, db.Model):
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = db.Column(db.String(50), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)  # 外に出さない
    created_at = db.Column(db.DateTime, default=_utcnow)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    problems = db.relationship(
        "Problem", backref="owner", cascade="all, delete-orphan", lazy="dynamic"
    )

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

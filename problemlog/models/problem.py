# =========================
# models/problem.py
# =========================

import uuid
from datetime import datetime, timezone

from ..extensions import db

CATEGORIES = (
    "strings",
    "arrays",
    "sets",
    "hashmaps",
    "two pointer",
    "stacks",
    "linked list",
    "search",
    "sliding window",
    "trees",
    "heap",
    "graphs",
    "dynamic programming",
)

# None = 難易度なし
DIFFICULTIES = ("Easy", "Medium", "Hard")


def _utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if value else None


# =========================
# 問題モデル
# =========================
class Problem(db.Model):
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(
        db.String(36), db.ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)      # 正規化済みの本文
    solution = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(32), nullable=False)
    difficulty = db.Column(db.String(16), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=lambda: [])
    source_link = db.Column(db.String(2048), nullable=True)
    created_at = db.Column(db.DateTime, default=_utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=_utcnow, onupdate=_utcnow)

    def to_summary(self):
        """一覧用（content / solution は含めない）"""
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "difficulty": self.difficulty,
            "tags": list(self.tags or []),
            "source_link": self.source_link,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }

    def to_dict(self):
        data = self.to_summary()
        data.update(
            content=self.content,
            solution=self.solution,
            user_id=self.user_id,
        )
        return data

# =========================
# routes/problems.py
# 保存した問題の CRUD（本人のものだけ）
# =========================

import logging

from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required

from ..errors import AuthorizationError, NotFoundError, ValidationError
from ..models import CATEGORIES, DIFFICULTIES
from ..renderer import render_content
from ..store import get_store
from ..validation import clean_text, get_payload, positive_int, require_uuid

logger = logging.getLogger(__name__)

problems = Blueprint("problems", __name__, url_prefix="/api/problems")


def _check_category(category):
    if category not in CATEGORIES:
        raise ValidationError("Invalid category")
    return category


def _check_difficulty(difficulty):
    if difficulty in (None, ""):
        return None
    if difficulty not in DIFFICULTIES:
        raise ValidationError("Difficulty must be one of Easy, Medium, Hard")
    return difficulty


def _check_tags(tags):
    if tags in (None, ""):
        return []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValidationError("Tags must be a list of strings")
    # 重複を除く（順序は保つ）
    return list(dict.fromkeys(t.strip() for t in tags if t.strip()))


def _source_link(value):
    return clean_text(value) or None


# =========================
# 一覧
# =========================
@problems.get("")
@login_required
def list_problems():
    page = positive_int(request.args.get("page"), "page", 1)
    limit = positive_int(
        request.args.get("limit"), "limit", current_app.config["DEFAULT_PAGE_SIZE"]
    )
    limit = min(limit, current_app.config["MAX_PAGE_SIZE"])

    result = get_store().list_problems(
        current_user.id,
        page,
        limit,
        category=request.args.get("category") or None,
        difficulty=request.args.get("difficulty") or None,
    )
    return jsonify({
        "records": [p.to_summary() for p in result.items],
        "pagination": {
            "currentPage": page,
            "totalPages": result.pages,
            "totalCount": result.total,
            "hasNextPage": page < result.pages,
            "hasPreviousPage": page > 1,
        },
    })


# =========================
# 1件取得（表示用ブロック付き）
# =========================
@problems.get("/<record_id>")
@login_required
def get_problem(record_id):
    record_id = require_uuid(record_id, "recordId")
    problem = get_store().get_owned_problem(record_id, current_user.id)
    if problem is None:
        raise NotFoundError("Problem not found or you do not have permission to view it")
    return jsonify({
        "record": problem.to_dict(),
        "blocks": [b.to_dict() for b in render_content(problem.content)],
    })


# =========================
# 保存
# =========================
@problems.post("")
@login_required
def create_problem():
    data = get_payload()
    title = clean_text(data.get("title"))
    content = clean_text(data.get("content"))
    solution = clean_text(data.get("solution"))
    category = data.get("category")

    if not title or not content or not category or not solution:
        raise ValidationError(
            "Missing required fields: title, content, category and solution are required"
        )
    _check_category(category)
    difficulty = _check_difficulty(data.get("difficulty"))
    tags = _check_tags(data.get("tags"))

    store = get_store()
    owner_id = data.get("ownerId") or current_user.id
    owner_id = require_uuid(owner_id, "ownerId")
    if owner_id != current_user.id:
        if store.get_user(owner_id) is None:
            raise NotFoundError("User not found")
        raise AuthorizationError("Cannot save a problem for another user")

    problem = store.create_problem(
        owner_id,
        title=title,
        content=content,
        solution=solution,
        category=category,
        difficulty=difficulty,
        tags=tags,
        source_link=_source_link(data.get("sourceLink")),
    )
    logger.info("Problem %s saved by %s", problem.id, owner_id)
    return jsonify({
        "message": "Problem saved successfully",
        "record": {
            "id": problem.id,
            "title": problem.title,
            "category": problem.category,
            "difficulty": problem.difficulty,
            "created_at": problem.created_at.isoformat() if problem.created_at else None,
        },
    }), 201


# =========================
# 更新（全項目を上書き）
# =========================
@problems.put("")
@login_required
def update_problem():
    data = get_payload()
    record_id = data.get("recordId")
    if not record_id:
        raise ValidationError("recordId is required")
    record_id = require_uuid(record_id, "recordId")

    title = clean_text(data.get("title"))
    content = clean_text(data.get("content"))
    solution = clean_text(data.get("solution"))
    if not title:
        raise ValidationError("Title is required")
    if not content:
        raise ValidationError("Content is required")
    if not solution:
        raise ValidationError("Solution is required")
    category = _check_category(data.get("category"))
    difficulty = _check_difficulty(data.get("difficulty"))

    store = get_store()
    # 他人の問題は「存在しない」と同じ扱い
    problem = store.get_owned_problem(record_id, current_user.id)
    if problem is None:
        raise NotFoundError("Problem not found or access denied")

    store.update_problem(
        problem,
        title=title,
        content=content,
        category=category,
        difficulty=difficulty,
        solution=solution,
        source_link=_source_link(data.get("sourceLink")),
    )
    logger.info("Problem %s updated", problem.id)
    return jsonify({"message": "Problem updated successfully", "record": problem.to_dict()})


# =========================
# 削除
# =========================
@problems.delete("")
@login_required
def delete_problem():
    data = get_payload()
    record_id = data.get("recordId")
    owner_id = data.get("ownerId")
    if not record_id or not owner_id:
        raise ValidationError("Missing required fields: recordId and ownerId are required")
    record_id = require_uuid(record_id, "recordId")
    owner_id = require_uuid(owner_id, "ownerId")
    if owner_id != current_user.id:
        raise AuthorizationError("Unauthorized: problem does not belong to user")

    store = get_store()
    problem = store.get_problem(record_id)
    if problem is None:
        raise NotFoundError("Problem not found")
    if problem.user_id != owner_id:
        raise AuthorizationError("Unauthorized: problem does not belong to user")

    store.delete_problem(problem)
    logger.info("Problem %s deleted", record_id)
    return jsonify({"message": "Problem deleted successfully"})

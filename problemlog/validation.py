# =========================
# validation.py
# =========================

import re

from flask import request

from .errors import ValidationError

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.I,
)


def is_uuid(value):
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def require_uuid(value, name):
    """ストアに問い合わせる前に ID の形式をチェックする"""
    if not is_uuid(value):
        raise ValidationError(f"Invalid {name} format")
    # 保存済みの ID は小文字
    return value.lower()


def get_payload():
    """JSON でもフォームでも受け付ける"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def clean_text(value):
    return value.strip() if isinstance(value, str) else ""


def positive_int(raw, name, default):
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a positive integer")
    if value < 1:
        raise ValidationError(f"{name} must be a positive integer")
    return value

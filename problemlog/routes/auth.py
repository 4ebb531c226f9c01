import logging

from flask import Blueprint, jsonify
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import login_user, logout_user, login_required

from ..errors import ValidationError
from ..store import get_store
from ..validation import get_payload

logger = logging.getLogger(__name__)

auth = Blueprint("auth", __name__, url_prefix="/api")


@auth.route("/signup", methods=["POST"])
def signup():
    data = get_payload()
    username = data.get("username")
    password = data.get("password")

    if not isinstance(username, str) or not isinstance(password, str) \
            or not username.strip() or not password.strip():
        raise ValidationError("Missing required fields")
    if len(password) < 6:
        raise ValidationError("Password must be at least 6 characters")
    if len(username) < 3 or len(username) > 50:
        raise ValidationError("Username must be between 3 and 50 characters")

    user = get_store().create_user(username, generate_password_hash(password))
    logger.info("User created: %s", user.id)
    return jsonify({"message": "User created successfully"}), 201


@auth.route("/login", methods=["POST"])
def login():
    data = get_payload()
    username = data.get("username")
    password = data.get("password")

    user = None
    if isinstance(username, str) and isinstance(password, str) and username and password:
        user = get_store().find_user(username)
    if user and check_password_hash(user.password_hash, password):
        login_user(user)
        return jsonify({
            "message": "Logged in",
            "user": {"id": user.id, "username": user.username},
        })
    return jsonify({"message": "Invalid username or password", "user": None}), 401


@auth.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify({"message": "Logged out"})

# =========================
# errors.py
# =========================

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """リクエスト境界で {message} + ステータスに変換される例外"""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = 400


class AuthenticationError(AppError):
    status_code = 401


class AuthorizationError(AppError):
    status_code = 403


class NotFoundError(AppError):
    status_code = 404


class UpstreamError(AppError):
    status_code = 500


# インポート時のエラー
class InvalidURL(ValidationError):
    pass


class UpstreamUnavailable(UpstreamError):
    pass


class ProblemNotFound(NotFoundError):
    pass


# =========================
# エラーハンドラ登録
# =========================
def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(error):
        return jsonify({"message": error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unknown_error(error):
        from .extensions import db

        logger.exception("Unhandled error")
        db.session.rollback()
        return jsonify({"message": "Internal server error"}), 500

import pytest
from flask import Flask

from problemlog.errors import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UpstreamError,
    ValidationError,
    register_error_handlers,
)


@pytest.mark.parametrize(
    "error_cls, status",
    [
        (ValidationError, 400),
        (AuthenticationError, 401),
        (AuthorizationError, 403),
        (NotFoundError, 404),
        (UpstreamError, 500),
    ],
)
def test_app_errors_become_message_bodies(app, error_cls, status):
    @app.get(f"/boom-{status}")
    def boom():
        raise error_cls("nope")

    resp = app.test_client().get(f"/boom-{status}")
    assert resp.status_code == status
    assert resp.get_json() == {"message": "nope"}


def test_unknown_errors_are_hidden(app):
    @app.get("/crash")
    def crash():
        raise RuntimeError("secret detail")

    resp = app.test_client().get("/crash")
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Internal server error"}


def test_http_errors_use_json(client):
    resp = client.get("/no-such-route")
    assert resp.status_code == 404
    assert "message" in resp.get_json()

    resp = client.patch("/api/problems")
    assert resp.status_code == 405


def test_base_error_defaults_to_500():
    assert AppError("x").status_code == 500


def test_register_on_plain_app():
    app = Flask(__name__)
    register_error_handlers(app)

    @app.get("/v")
    def v():
        raise ValidationError("bad")

    assert app.test_client().get("/v").status_code == 400

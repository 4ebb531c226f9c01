from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from problemlog.app import create_app  # noqa: E402
from problemlog.config import TestConfig  # noqa: E402
from problemlog.extensions import db  # noqa: E402
from problemlog.importer import ProblemImporter  # noqa: E402
from tests.helpers.leetcode import FakeSession  # noqa: E402


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def app(fake_session):
    importer = ProblemImporter(graphql_url="https://leetcode.test/graphql", session=fake_session)
    app = create_app(TestConfig, importer=importer)
    yield app
    with app.app_context():
        db.drop_all()
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


def signup_and_login(client, username="alice", password="secret123"):
    resp = client.post("/api/signup", json={"username": username, "password": password})
    assert resp.status_code == 201
    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200
    return resp.get_json()["user"]


@pytest.fixture()
def login_as(client):
    return lambda username, password="secret123": signup_and_login(client, username, password)


@pytest.fixture()
def user(client):
    return signup_and_login(client)

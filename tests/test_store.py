import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from problemlog.errors import ValidationError
from problemlog.models import Problem
from problemlog.store import ProblemStore, _remap_integrity_error, get_store


def test_store_is_registered_on_the_app(app):
    with app.app_context():
        store = get_store()
        assert isinstance(store, ProblemStore)


def test_duplicate_user_is_remapped(app):
    with app.app_context():
        store = get_store()
        store.create_user("alice", "hash")
        with pytest.raises(ValidationError, match="Username already exists"):
            store.create_user("alice", "hash")
        # ロールバック後も使える
        assert store.find_user("alice") is not None


def test_foreign_key_error_is_remapped():
    exc = IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
    assert _remap_integrity_error(exc, "fallback").message == "Invalid user reference"


def test_other_integrity_errors_use_fallback():
    exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: problem.title"))
    assert _remap_integrity_error(exc, "Could not save").message == "Could not save"


def test_owner_scoped_lookup_and_update(app):
    with app.app_context():
        store = get_store()
        alice = store.create_user("alice", "hash")
        bob = store.create_user("bobby", "hash")
        problem = store.create_problem(
            alice.id, title="t", content="c", solution="s", category="heap",
            difficulty=None, tags=["Heap"], source_link=None,
        )

        assert store.get_owned_problem(problem.id, alice.id) is problem
        assert store.get_owned_problem(problem.id, bob.id) is None

        store.update_problem(problem, title="t2", tags=["ignored"])
        assert store.get_problem(problem.id).title == "t2"
        assert store.get_problem(problem.id).tags == ["Heap"]

        page = store.list_problems(alice.id, 1, 10)
        assert page.total == 1

        store.delete_problem(problem)
        assert store.get_problem(problem.id) is None


def test_close_runs_on_app_teardown(app):
    with app.app_context():
        store = get_store()
    assert store.close in app.teardown_appcontext_funcs


def _problem_fields():
    return dict(title="t", content="c", solution="s", category="heap",
                difficulty=None, tags=[], source_link=None)


def test_deleting_user_removes_their_problems(app):
    with app.app_context():
        store = get_store()
        alice = store.create_user("alice", "hash")
        alice_id = alice.id
        keep = store.create_user("bobby", "hash")
        store.create_problem(alice.id, **_problem_fields())
        store.create_problem(alice.id, **_problem_fields())
        kept = store.create_problem(keep.id, **_problem_fields())

        store.session.delete(alice)
        store.session.commit()

        assert Problem.query.filter_by(user_id=alice_id).count() == 0
        assert store.get_problem(kept.id) is not None


def test_unknown_owner_is_rejected_by_the_database(app):
    with app.app_context():
        store = get_store()
        with pytest.raises(ValidationError, match="Invalid user reference"):
            store.create_problem(str(uuid.uuid4()), **_problem_fields())
        assert Problem.query.count() == 0

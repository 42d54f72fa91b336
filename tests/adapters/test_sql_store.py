"""Tests for the SQLAlchemy action store."""

from datetime import datetime, timedelta, timezone

import pytest

from actionscribe.adapters.storage.sql_store import SqlActionStore
from actionscribe.domain.errors import Forbidden, InvalidAction, NotFound
from actionscribe.domain.models import Action
from actionscribe.ports.inbound import Identity
from actionscribe.ports.outbound import ActionStorePort

ALICE = Identity(email="alice@example.com")
BOB = Identity(email="bob@example.com")
T0 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(tmp_path):
    s = SqlActionStore(f"sqlite:///{tmp_path / 'store.db'}")
    s.init_db()
    s.ensure_user(ALICE.email)
    s.ensure_user(BOB.email)
    return s


def _add(store, identity, text, minutes, completed=False):
    owner = store.owner_id(identity)
    action = Action.new(owner, text, now=T0 + timedelta(minutes=minutes))
    saved = store.add(identity, action)
    if completed:
        saved = store.update_completion(identity, saved.id, True)
    return saved


class TestUsers:
    def test_ensure_user_is_idempotent(self, store):
        assert store.ensure_user("alice@example.com") == store.ensure_user("ALICE@example.com ")

    def test_unknown_user_is_not_found(self, store):
        with pytest.raises(NotFound):
            store.list(Identity(email="ghost@example.com"))

    def test_create_for_unknown_user(self, store):
        with pytest.raises(NotFound):
            store.create(Identity(email="ghost@example.com"), "Buy milk")


class TestCreate:
    def test_assigns_fields(self, store):
        a = store.create(ALICE, "  Buy milk ")
        assert a.text == "Buy milk"
        assert a.completed is False
        assert a.id
        assert a.timestamp.tzinfo is not None
        assert a.owner_id == store.owner_id(ALICE)

    def test_blank_rejected(self, store):
        with pytest.raises(InvalidAction):
            store.create(ALICE, "  ")

    def test_add_for_other_owner_rejected(self, store):
        foreign = Action.new(store.owner_id(BOB), "Bob's task")
        with pytest.raises(Forbidden):
            store.add(ALICE, foreign)

    def test_add_keeps_id_and_timestamp(self, store):
        action = Action.new(store.owner_id(ALICE), "Plan trip", now=T0)
        saved = store.add(ALICE, action)
        assert saved.id == action.id
        assert saved.timestamp == T0


class TestList:
    def test_scoped_to_owner(self, store):
        store.create(ALICE, "Alice task")
        store.create(BOB, "Bob task")
        assert [a.text for a in store.list(ALICE)] == ["Alice task"]
        assert [a.text for a in store.list(BOB)] == ["Bob task"]

    def test_incomplete_first_then_newest_first(self, store):
        _add(store, ALICE, "old open", 0)
        _add(store, ALICE, "new open", 10)
        _add(store, ALICE, "old done", 1, completed=True)
        _add(store, ALICE, "new done", 20, completed=True)
        assert [a.text for a in store.list(ALICE)] == [
            "new open",
            "old open",
            "new done",
            "old done",
        ]

    def test_order_invariant(self, store):
        for i, done in enumerate([False, True, True, False, False, True]):
            _add(store, ALICE, f"task {i}", (i * 7) % 5, completed=done)
        listed = store.list(ALICE)
        flags = [a.completed for a in listed]
        assert flags == sorted(flags)
        for group in (False, True):
            stamps = [a.timestamp for a in listed if a.completed is group]
            assert stamps == sorted(stamps, reverse=True)


class TestUpdateCompletion:
    def test_toggle(self, store):
        a = store.create(ALICE, "Buy milk")
        done = store.update_completion(ALICE, a.id, True)
        assert done.completed is True
        assert done.text == a.text
        assert done.timestamp == a.timestamp
        assert store.update_completion(ALICE, a.id, False).completed is False

    def test_unknown_id(self, store):
        with pytest.raises(NotFound):
            store.update_completion(ALICE, "missing", True)

    def test_foreign_action_forbidden(self, store):
        a = store.create(BOB, "Bob's task")
        with pytest.raises(Forbidden):
            store.update_completion(ALICE, a.id, True)
        assert store.list(BOB)[0].completed is False


class TestDelete:
    def test_delete_own(self, store):
        a = store.create(ALICE, "Buy milk")
        store.delete(ALICE, a.id)
        assert store.list(ALICE) == []

    def test_delete_foreign_forbidden(self, store):
        a = store.create(BOB, "Bob's task")
        with pytest.raises(Forbidden):
            store.delete(ALICE, a.id)

    def test_delete_unknown(self, store):
        with pytest.raises(NotFound):
            store.delete(ALICE, "missing")


class TestInMemory:
    def test_memory_url_shares_connection(self):
        s = SqlActionStore("sqlite://")
        s.init_db()
        s.ensure_user(ALICE.email)
        s.create(ALICE, "Buy milk")
        assert len(s.list(ALICE)) == 1


def test_conforms_to_port(store):
    assert isinstance(store, ActionStorePort)

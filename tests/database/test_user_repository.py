"""Tests for the user repository against an in-memory SQLite store."""

from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from users_backend.database import StoreError, UserRepository, UserSchema


def test_insert_assigns_identifier(repository: UserRepository) -> None:
    user = repository.insert(UserSchema(username="alice", email="a@example.com", age=30))

    assert user.id is not None
    stored = repository.find_by_id(user.id)
    assert stored is not None
    assert (stored.username, stored.email, stored.age) == ("alice", "a@example.com", 30)


def test_insert_accepts_empty_record(repository: UserRepository) -> None:
    user = repository.insert(UserSchema())

    assert user.id is not None
    assert user.username is None
    assert user.email is None
    assert user.age is None


def test_identifiers_are_unique(repository: UserRepository) -> None:
    first = repository.insert(UserSchema(username="same"))
    second = repository.insert(UserSchema(username="same"))

    assert first.id != second.id
    assert len(repository.find_all()) == 2


def test_find_by_age_range_is_inclusive(repository: UserRepository) -> None:
    for name, age in [("young", 17), ("low", 18), ("mid", 25), ("high", 30), ("old", 31)]:
        repository.insert(UserSchema(username=name, age=age))
    repository.insert(UserSchema(username="ageless"))

    names = {user.username for user in repository.find_by_age_range(18, 30)}

    assert names == {"low", "mid", "high"}


def test_find_by_age_range_empty_when_inverted(repository: UserRepository) -> None:
    repository.insert(UserSchema(username="mid", age=25))

    assert repository.find_by_age_range(30, 18) == []


def test_update_by_id_only_touches_patched_fields(repository: UserRepository) -> None:
    user = repository.insert(UserSchema(username="bob", email="bob@example.com", age=40))

    updated = repository.update_by_id(user.id, {"age": 41})

    assert updated is not None
    assert updated.age == 41
    assert updated.username == "bob"
    assert updated.email == "bob@example.com"


def test_update_by_id_ignores_unknown_fields(repository: UserRepository) -> None:
    user = repository.insert(UserSchema(username="bob"))

    updated = repository.update_by_id(user.id, {"id": uuid4(), "role": "admin"})

    assert updated is not None
    assert updated.id == user.id
    assert not hasattr(updated, "role")


def test_update_by_id_missing_returns_none(repository: UserRepository) -> None:
    assert repository.update_by_id(uuid4(), {"age": 1}) is None


def test_delete_by_id_is_permanent(repository: UserRepository) -> None:
    user = repository.insert(UserSchema(username="gone"))

    assert repository.delete_by_id(user.id) is True
    assert repository.find_by_id(user.id) is None
    assert repository.delete_by_id(user.id) is False


def test_store_failures_are_wrapped(repository: UserRepository, session: Session) -> None:
    session.execute(text("DROP TABLE users"))

    with pytest.raises(StoreError) as excinfo:
        repository.find_all()

    assert excinfo.value.__cause__ is not None


def test_failed_commit_is_rolled_back(
    repository: UserRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    def refuse_commit(self: Session) -> None:
        msg = "COMMIT"
        raise OperationalError(msg, None, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "commit", refuse_commit)
    with pytest.raises(StoreError):
        repository.insert(UserSchema(username="lost"))
    monkeypatch.undo()

    assert repository.find_all() == []

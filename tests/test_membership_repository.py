from datetime import datetime, timezone

import sqlite3

import pytest

from hexarch.config import Config
from hexarch.membership.models import UserProfileInfo
from hexarch.membership.profile_create import ProfileCreate
from hexarch.membership.profile_entity import NotFoundError, NotSingularError, create_schema
from hexarch.membership.repository import DatastoreRepository

CREATED = datetime(2021, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def repo():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    for number, name in (("A1", "Alice"), ("A2", "Bob"), ("A3", "Bob")):
        ProfileCreate(connection).set(
            account_number=number,
            fullname=name,
            status="active",
            email=f"{number}@example.com",
            created_at=CREATED,
        ).save()
    yield DatastoreRepository(Config(), None, connection)
    connection.close()


def test_get_user_info_from_db(repo):
    info = repo.get_user_info_from_db("A1")
    assert info == UserProfileInfo(
        account_number="A1",
        email="A1@example.com",
        fullname="Alice",
        status="active",
        created_at=CREATED,
    )


def test_get_user_info_missing(repo):
    with pytest.raises(NotFoundError):
        repo.get_user_info_from_db("nope")


def test_get_user_by_username(repo):
    info = repo.get_user_by_username("Alice")
    assert info.account_number == "A1"
    assert info.fullname == "Alice"


def test_get_user_by_username_not_singular(repo):
    with pytest.raises(NotSingularError):
        repo.get_user_by_username("Bob")


def test_get_user_by_username_missing(repo):
    with pytest.raises(NotFoundError):
        repo.get_user_by_username("Carol")
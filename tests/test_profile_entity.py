import sqlite3
from datetime import datetime, timezone

import pytest

from hexarch.membership.models import ZERO_TIME
from hexarch.membership.profile_entity import (
    ConstraintError,
    EntError,
    NotFoundError,
    NotSingularError,
    UserProfile,
    ValidationError,
    create_schema,
)
from hexarch.membership.profile_schema import COLUMNS, LABEL

T0 = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)


def test_from_row_assigns_all_fields():
    values = [7, "acct-1", "Jane Doe", "active", "jane@example.com", T0.isoformat(), T0]
    profile = UserProfile.from_row(COLUMNS, values)
    assert profile.id == 7
    assert profile.account_number == "acct-1"
    assert profile.fullname == "Jane Doe"
    assert profile.status == "active"
    assert profile.email == "jane@example.com"
    assert profile.created_at == T0
    assert profile.updated_at == T0


def test_null_values_keep_defaults():
    profile = UserProfile.from_row(["id", "fullname", "created_at"], [None, None, None])
    assert profile.id == 0
    assert profile.fullname == ""
    assert profile.created_at == ZERO_TIME


def test_unknown_column_is_kept_as_selected_value():
    profile = UserProfile.from_row(["id", "total"], [1, 42])
    assert profile.value("total") == 42


def test_value_not_selected_raises():
    profile = UserProfile.from_row(["id"], [1])
    with pytest.raises(KeyError):
        profile.value("total")


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError, match="mismatch number of scan values"):
        UserProfile.from_row(["id", "email"], [1])


@pytest.mark.parametrize(
    "columns,values",
    [(["id"], ["seven"]), (["email"], [5]), (["created_at"], [3.5])],
)
def test_unexpected_types_raise(columns, values):
    with pytest.raises(TypeError, match="unexpected type"):
        UserProfile.from_row(columns, values)


def test_str_uses_ansic_timestamps():
    profile = UserProfile(
        id=3,
        account_number="acct-1",
        fullname="Jane",
        status="active",
        email="jane@example.com",
        created_at=T0,
        updated_at=T0,
    )
    assert str(profile) == (
        "User_Profile(id=3, account_number=acct-1, fullname=Jane, status=active, "
        "email=jane@example.com, created_at=Mon Jan  2 15:04:05 2006, "
        "updated_at=Mon Jan  2 15:04:05 2006)"
    )


def test_error_messages_and_hierarchy():
    not_found = NotFoundError(LABEL)
    assert str(not_found) == f"ent: {LABEL} not found"
    assert str(NotSingularError(LABEL)) == f"ent: {LABEL} not singular"
    validation = ValidationError("email", "bad email")
    assert validation.name == "email"
    assert str(validation) == "bad email"
    assert str(ConstraintError("unique")).endswith("unique")
    for err in (not_found, validation, ConstraintError("x")):
        assert isinstance(err, EntError)


def test_create_schema_is_idempotent_and_has_columns():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    create_schema(connection)
    names = tuple(row[1] for row in connection.execute('PRAGMA table_info("user_profiles")'))
    connection.close()
    assert names == COLUMNS
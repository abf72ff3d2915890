"""The user profile entity, its errors and its table."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable

from hexarch.membership.models import ZERO_TIME
from hexarch.membership.profile_schema import (
    FIELD_ACCOUNT_NUMBER,
    FIELD_CREATED_AT,
    FIELD_EMAIL,
    FIELD_FULLNAME,
    FIELD_ID,
    FIELD_STATUS,
    FIELD_UPDATED_AT,
    TABLE,
)

_STRING_FIELDS = frozenset({FIELD_ACCOUNT_NUMBER, FIELD_FULLNAME, FIELD_STATUS, FIELD_EMAIL})
_TIME_FIELDS = frozenset({FIELD_CREATED_AT, FIELD_UPDATED_AT})


class EntError(Exception):
    """Base class of errors raised by the entity builders."""


class NotFoundError(EntError):
    """No entity matched the query."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"ent: {label} not found")


class NotSingularError(EntError):
    """More than one entity matched a query expecting exactly one."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"ent: {label} not singular")


class ValidationError(EntError):
    """A field failed validation or was not valid for the operation."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class ConstraintError(EntError):
    """The database rejected a write because of a constraint."""

    def __init__(self, message: str) -> None:
        super().__init__(f"ent constraint failed: {message}")


def _to_datetime(value: Any, column: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise TypeError(f"unexpected type {type(value).__name__} for field {column}")


def _ansic(moment: datetime) -> str:
    return f"{moment:%a %b} {moment.day:2d} {moment:%H:%M:%S} {moment.year}"


@dataclass
class UserProfile:
    """A row of the user profile table."""

    id: int = 0
    account_number: str = ""
    fullname: str = ""
    status: str = ""
    email: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    _select_values: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_row(cls, columns: Iterable[str], values: Iterable[Any]) -> UserProfile:
        """Build a profile from selected column names and their values.

        Columns that are not fields of the entity are kept and can be read
        back with :meth:`value`.
        """
        columns = list(columns)
        values = list(values)
        if len(values) < len(columns):
            raise ValueError(f"mismatch number of scan values: {len(values)} != {len(columns)}")
        profile = cls()
        for column, value in zip(columns, values):
            if column == FIELD_ID:
                if value is None:
                    profile.id = 0
                elif isinstance(value, int) and not isinstance(value, bool):
                    profile.id = value
                else:
                    raise TypeError(f"unexpected type {type(value).__name__} for field id")
            elif column in _STRING_FIELDS:
                if value is None:
                    continue
                if not isinstance(value, str):
                    raise TypeError(f"unexpected type {type(value).__name__} for field {column}")
                setattr(profile, column, value)
            elif column in _TIME_FIELDS:
                if value is None:
                    continue
                setattr(profile, column, _to_datetime(value, column))
            else:
                profile._select_values[column] = value
        return profile

    def value(self, name: str) -> Any:
        """Return a dynamically selected value that is not an entity field."""
        try:
            return self._select_values[name]
        except KeyError:
            raise KeyError(f"ent: value was not selected: {name}") from None

    def __str__(self) -> str:
        return (
            f"User_Profile(id={self.id}, "
            f"account_number={self.account_number}, "
            f"fullname={self.fullname}, "
            f"status={self.status}, "
            f"email={self.email}, "
            f"created_at={_ansic(self.created_at)}, "
            f"updated_at={_ansic(self.updated_at)})"
        )


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the user profile table if it does not exist yet."""
    connection.execute(
        f'CREATE TABLE IF NOT EXISTS "{TABLE}" ('
        '"id" INTEGER PRIMARY KEY AUTOINCREMENT, '
        '"account_number" TEXT NOT NULL, '
        '"fullname" TEXT NOT NULL, '
        '"status" TEXT NOT NULL, '
        '"email" TEXT NOT NULL, '
        '"created_at" TEXT NOT NULL, '
        '"updated_at" TEXT NOT NULL)'
    )
    connection.commit()
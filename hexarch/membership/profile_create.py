"""Builders that create and delete user profiles."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Iterable

from hexarch.membership import profile_schema
from hexarch.membership.profile_entity import (
    ConstraintError,
    NotFoundError,
    UserProfile,
    ValidationError,
)
from hexarch.membership.profile_schema import (
    FIELD_ACCOUNT_NUMBER,
    FIELD_CREATED_AT,
    FIELD_EMAIL,
    FIELD_FULLNAME,
    FIELD_STATUS,
    FIELD_UPDATED_AT,
    LABEL,
    TABLE,
    Predicate,
    and_,
)

_STRING_FIELDS = (FIELD_ACCOUNT_NUMBER, FIELD_FULLNAME, FIELD_STATUS, FIELD_EMAIL)
_TIME_FIELDS = (FIELD_CREATED_AT, FIELD_UPDATED_AT)
_SETTABLE = _STRING_FIELDS + _TIME_FIELDS


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _stored(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class ProfileCreate:
    """Builds a single user profile and inserts it."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._values: dict[str, Any] = {}

    def set(self, **kwargs: Any) -> ProfileCreate:
        """Set fields by name; a value of ``None`` leaves the field unset."""
        for name, value in kwargs.items():
            if name not in _SETTABLE:
                raise TypeError(f"unknown field {name!r} for {LABEL}")
            if value is not None:
                self._values[name] = value
        return self

    def _defaults(self) -> None:
        if FIELD_CREATED_AT not in self._values:
            self._values[FIELD_CREATED_AT] = profile_schema.default_created_at()
        if FIELD_UPDATED_AT not in self._values:
            self._values[FIELD_UPDATED_AT] = profile_schema.default_updated_at()

    def _check(self) -> None:
        for name in _STRING_FIELDS:
            if name not in self._values:
                raise ValidationError(
                    name, f'ent: missing required field "User_Profile.{name}"'
                )
            validator = profile_schema.VALIDATORS.get(name)
            if validator is not None:
                try:
                    validator(self._values[name])
                except ValueError as err:
                    raise ValidationError(
                        name,
                        f'ent: validator failed for field "User_Profile.{name}": {err}',
                    ) from err
        for name in _TIME_FIELDS:
            if name not in self._values:
                raise ValidationError(
                    name, f'ent: missing required field "User_Profile.{name}"'
                )

    def _insert(self) -> UserProfile:
        columns = [name for name in _SETTABLE if name in self._values]
        sql = (
            f"INSERT INTO {_quote(TABLE)} ({', '.join(_quote(c) for c in columns)}) "
            f"VALUES ({', '.join('?' for _ in columns)})"
        )
        cursor = self._connection.execute(
            sql, tuple(_stored(self._values[c]) for c in columns)
        )
        return UserProfile(id=int(cursor.lastrowid), **{c: self._values[c] for c in columns})

    def save(self) -> UserProfile:
        """Validate and insert the profile, returning it with its new id."""
        self._defaults()
        self._check()
        try:
            with self._connection:
                return self._insert()
        except sqlite3.IntegrityError as err:
            raise ConstraintError(str(err)) from err


class ProfileCreateBulk:
    """Inserts several profiles in one transaction."""

    def __init__(self, connection: sqlite3.Connection, builders: Iterable[ProfileCreate]) -> None:
        self._connection = connection
        self._builders = list(builders)

    def save(self) -> list[UserProfile]:
        """Validate every builder, then insert all of them or none."""
        for builder in self._builders:
            builder._defaults()
            builder._check()
        try:
            with self._connection:
                return [builder._insert() for builder in self._builders]
        except sqlite3.IntegrityError as err:
            raise ConstraintError(str(err)) from err


class ProfileDelete:
    """Deletes the user profiles matching its predicates."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._predicates: list[Predicate] = []

    def where(self, *args: Predicate) -> ProfileDelete:
        """Add predicates that deleted records must satisfy."""
        self._predicates.extend(args)
        return self

    def exec(self) -> int:
        """Run the deletion and return how many records were removed."""
        sql = f"DELETE FROM {_quote(TABLE)}"
        params: tuple[Any, ...] = ()
        if self._predicates:
            condition = and_(*self._predicates)
            sql += f" WHERE {condition.sql}"
            params = condition.params
        try:
            with self._connection:
                cursor = self._connection.execute(sql, params)
        except sqlite3.IntegrityError as err:
            raise ConstraintError(str(err)) from err
        return cursor.rowcount


class ProfileDeleteOne:
    """Deletes a single user profile, failing when none matches."""

    def __init__(self, delete: ProfileDelete) -> None:
        self._delete = delete

    def where(self, *args: Predicate) -> ProfileDeleteOne:
        """Add predicates that the deleted record must satisfy."""
        self._delete.where(*args)
        return self

    def exec(self) -> None:
        """Run the deletion; raise NotFoundError when nothing was removed."""
        if self._delete.exec() == 0:
            raise NotFoundError(LABEL)
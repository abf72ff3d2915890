"""Builders that update user profiles."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Mapping

from hexarch.membership import profile_schema
from hexarch.membership.profile_entity import (
    ConstraintError,
    NotFoundError,
    UserProfile,
    ValidationError,
)
from hexarch.membership.profile_query import ProfileQuery
from hexarch.membership.profile_schema import (
    FIELD_ACCOUNT_NUMBER,
    FIELD_CREATED_AT,
    FIELD_EMAIL,
    FIELD_FULLNAME,
    FIELD_ID,
    FIELD_STATUS,
    FIELD_UPDATED_AT,
    ID,
    LABEL,
    TABLE,
    Predicate,
    and_,
    valid_column,
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


class _UpdateBuilder:
    """Shared state and checks of the update builders."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._values: dict[str, Any] = {}
        self._predicates: list[Predicate] = []

    def _assign(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            if name not in _SETTABLE:
                raise TypeError(f"unknown field {name!r} for {LABEL}")
            if value is not None:
                self._values[name] = value

    def _defaults(self) -> None:
        if FIELD_UPDATED_AT not in self._values:
            self._values[FIELD_UPDATED_AT] = profile_schema.update_default_updated_at()

    def _check(self) -> None:
        for name in _STRING_FIELDS:
            if name not in self._values:
                continue
            validator = profile_schema.VALIDATORS.get(name)
            if validator is None:
                continue
            try:
                validator(self._values[name])
            except ValueError as err:
                raise ValidationError(
                    name,
                    f'ent: validator failed for field "User_Profile.{name}": {err}',
                ) from err

    def _assignments(self) -> tuple[str, tuple[Any, ...]]:
        columns = [name for name in _SETTABLE if name in self._values]
        clause = ", ".join(f"{_quote(c)} = ?" for c in columns)
        return clause, tuple(_stored(self._values[c]) for c in columns)


class ProfileUpdate(_UpdateBuilder):
    """Updates every user profile matching its predicates."""

    def where(self, *args: Predicate) -> ProfileUpdate:
        """Add predicates that updated records must satisfy."""
        self._predicates.extend(args)
        return self

    def set(self, **kwargs: Any) -> ProfileUpdate:
        """Set fields by name; a value of ``None`` leaves the field unchanged."""
        self._assign(kwargs)
        return self

    def save(self) -> int:
        """Run the update and return the number of records affected."""
        self._defaults()
        self._check()
        clause, params = self._assignments()
        sql = f"UPDATE {_quote(TABLE)} SET {clause}"
        if self._predicates:
            condition = and_(*self._predicates)
            sql += f" WHERE {condition.sql}"
            params += condition.params
        try:
            with self._connection:
                cursor = self._connection.execute(sql, params)
        except sqlite3.IntegrityError as err:
            raise ConstraintError(str(err)) from err
        return cursor.rowcount


class ProfileUpdateOne(_UpdateBuilder):
    """Updates the single user profile with a given id."""

    def __init__(self, connection: sqlite3.Connection, profile_id: int | None = None) -> None:
        super().__init__(connection)
        self._id = profile_id
        self._fields: list[str] = []

    def where(self, *args: Predicate) -> ProfileUpdateOne:
        """Add predicates that the updated record must satisfy."""
        self._predicates.extend(args)
        return self

    def set(self, **kwargs: Any) -> ProfileUpdateOne:
        """Set fields by name; a value of ``None`` leaves the field unchanged."""
        self._assign(kwargs)
        return self

    def select(self, field: str, *args: str) -> ProfileUpdateOne:
        """Choose the columns of the returned profile; the id is always included."""
        self._fields = [field, *args]
        return self

    def save(self) -> UserProfile:
        """Run the update and return the updated profile.

        Raises NotFoundError when no record with the id matches the predicates.
        """
        self._defaults()
        self._check()
        if self._id is None:
            raise ValidationError("id", 'ent: missing "User_Profile.id" for update')
        for name in self._fields:
            if not valid_column(name):
                raise ValidationError(name, f'ent: invalid field "{name}" for query')
        clause, params = self._assignments()
        condition = and_(ID.eq(self._id), *self._predicates)
        sql = f"UPDATE {_quote(TABLE)} SET {clause} WHERE {condition.sql}"
        params += condition.params
        try:
            with self._connection:
                cursor = self._connection.execute(sql, params)
                if cursor.rowcount == 0:
                    raise NotFoundError(LABEL)
                query = ProfileQuery(self._connection).where(ID.eq(self._id))
                fields = [f for f in self._fields if f != FIELD_ID]
                if fields:
                    query.select(*fields)
                return query.only()
        except sqlite3.IntegrityError as err:
            raise ConstraintError(str(err)) from err
"""Query builder for user profiles."""

from __future__ import annotations

import sqlite3
from typing import Any, Sequence

from hexarch.membership.profile_entity import (
    EntError,
    NotFoundError,
    NotSingularError,
    UserProfile,
    ValidationError,
)
from hexarch.membership.profile_schema import (
    COLUMNS,
    FIELD_ID,
    LABEL,
    TABLE,
    OrderOption,
    Predicate,
    and_,
    valid_column,
)

# A limit is mandatory for an offset clause; this is the one used when none is set.
_MAX_LIMIT = 2**31 - 1


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class ProfileQuery:
    """Builds and runs SELECT queries on the user profile table.

    Builder methods change the query in place and return it, so calls chain.
    """

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._predicates: list[Predicate] = []
        self._order: list[OrderOption] = []
        self._limit: int | None = None
        self._offset: int | None = None
        self._unique: bool | None = None
        self._fields: list[str] = []

    def where(self, *args: Predicate) -> ProfileQuery:
        """Add predicates that every result must satisfy."""
        self._predicates.extend(args)
        return self

    def limit(self, limit: int) -> ProfileQuery:
        """Return at most ``limit`` records."""
        self._limit = limit
        return self

    def offset(self, offset: int) -> ProfileQuery:
        """Skip the first ``offset`` records."""
        self._offset = offset
        return self

    def unique(self, unique: bool) -> ProfileQuery:
        """Filter out duplicate records."""
        self._unique = unique
        return self

    def order(self, *args: OrderOption) -> ProfileQuery:
        """Order the records; earlier options take precedence."""
        self._order.extend(args)
        return self

    def first(self) -> UserProfile:
        """Return the first matching profile or raise NotFoundError."""
        nodes = self.clone().limit(1).all()
        if not nodes:
            raise NotFoundError(LABEL)
        return nodes[0]

    def first_id(self) -> int:
        """Return the id of the first matching profile or raise NotFoundError."""
        ids = self.clone().limit(1).ids()
        if not ids:
            raise NotFoundError(LABEL)
        return ids[0]

    def only(self) -> UserProfile:
        """Return the single matching profile.

        Raises NotFoundError when none matches, NotSingularError when several do.
        """
        nodes = self.clone().limit(2).all()
        if len(nodes) == 1:
            return nodes[0]
        if not nodes:
            raise NotFoundError(LABEL)
        raise NotSingularError(LABEL)

    def only_id(self) -> int:
        """Return the id of the single matching profile."""
        ids = self.clone().limit(2).ids()
        if len(ids) == 1:
            return ids[0]
        if not ids:
            raise NotFoundError(LABEL)
        raise NotSingularError(LABEL)

    def all(self) -> list[UserProfile]:
        """Run the query and return every matching profile."""
        self._prepare()
        if self._fields:
            columns = [FIELD_ID, *(f for f in self._fields if f != FIELD_ID)]
        else:
            columns = list(COLUMNS)
        names, rows = self._run(columns, distinct=self._unique is True)
        return [UserProfile.from_row(names, row) for row in rows]

    def ids(self) -> list[int]:
        """Return the ids of every matching profile."""
        query = self.clone()
        query._fields = [FIELD_ID]
        return [row[FIELD_ID] for row in ProfileSelect(query).scan()]

    def count(self) -> int:
        """Return the number of matching records."""
        self._prepare()
        columns = self._fields or [FIELD_ID]
        inner, params = self._sql(columns, distinct=self._unique is True)
        cursor = self._connection.execute(f"SELECT COUNT(*) FROM ({inner})", params)
        return int(cursor.fetchone()[0])

    def exist(self) -> bool:
        """Report whether any record matches."""
        try:
            self.first_id()
        except NotFoundError:
            return False
        except Exception as err:
            raise EntError(f"ent: check existence: {err}") from err
        return True

    def clone(self) -> ProfileQuery:
        """Return an independent copy of this query."""
        copy = ProfileQuery(self._connection)
        copy._predicates = list(self._predicates)
        copy._order = list(self._order)
        copy._limit = self._limit
        copy._offset = self._offset
        copy._unique = self._unique
        copy._fields = list(self._fields)
        return copy

    def select(self, *args: str) -> ProfileSelect:
        """Restrict the query to the given columns."""
        self._fields.extend(args)
        return ProfileSelect(self)

    def group_by(self, field: str, *args: str) -> ProfileGroupBy:
        """Group the records by one or more columns."""
        self._fields = [field, *args]
        return ProfileGroupBy(self)

    def _prepare(self) -> None:
        for name in self._fields:
            if not valid_column(name):
                raise ValidationError(name, f'ent: invalid field "{name}" for query')

    def _sql(
        self,
        columns: Sequence[str],
        *,
        distinct: bool,
        group_by: Sequence[str] = (),
    ) -> tuple[str, tuple[Any, ...]]:
        selected = ", ".join(_quote(c) for c in columns)
        sql = f"SELECT {'DISTINCT ' if distinct else ''}{selected} FROM {_quote(TABLE)}"
        params: tuple[Any, ...] = ()
        if self._predicates:
            condition = and_(*self._predicates)
            sql += f" WHERE {condition.sql}"
            params = condition.params
        if group_by:
            sql += " GROUP BY " + ", ".join(_quote(c) for c in group_by)
        if self._order:
            sql += " ORDER BY " + ", ".join(o.sql for o in self._order)
        if self._limit is not None or self._offset is not None:
            limit = self._limit if self._limit is not None else _MAX_LIMIT
            sql += " LIMIT ?"
            params += (limit,)
            if self._offset is not None:
                sql += " OFFSET ?"
                params += (self._offset,)
        return sql, params

    def _run(
        self,
        columns: Sequence[str],
        *,
        distinct: bool,
        group_by: Sequence[str] = (),
    ) -> tuple[list[str], list[tuple[Any, ...]]]:
        sql, params = self._sql(columns, distinct=distinct, group_by=group_by)
        cursor = self._connection.execute(sql, params)
        names = [d[0] for d in cursor.description]
        return names, cursor.fetchall()


class ProfileSelect:
    """A query restricted to chosen columns."""

    def __init__(self, query: ProfileQuery) -> None:
        self._query = query

    def scan(self) -> list[dict[str, Any]]:
        """Run the query and return each row as a column-to-value mapping."""
        query = self._query
        query._prepare()
        columns = query._fields or list(COLUMNS)
        names, rows = query._run(columns, distinct=query._unique is True)
        return [dict(zip(names, row)) for row in rows]


class ProfileGroupBy:
    """A query grouped by chosen columns."""

    def __init__(self, query: ProfileQuery) -> None:
        self._query = query

    def scan(self) -> list[dict[str, Any]]:
        """Run the query and return one mapping per group."""
        query = self._query
        query._prepare()
        fields = list(query._fields)
        names, rows = query._run(fields, distinct=query._unique is True, group_by=fields)
        return [dict(zip(names, row)) for row in rows]
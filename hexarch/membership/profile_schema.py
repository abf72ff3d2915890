"""Columns, predicates and orderings of the user profile table."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Literal

LABEL = "user_profile"
TABLE = "user_profiles"

FIELD_ID = "id"
FIELD_ACCOUNT_NUMBER = "account_number"
FIELD_FULLNAME = "fullname"
FIELD_STATUS = "status"
FIELD_EMAIL = "email"
FIELD_CREATED_AT = "created_at"
FIELD_UPDATED_AT = "updated_at"

COLUMNS: tuple[str, ...] = (
    FIELD_ID,
    FIELD_ACCOUNT_NUMBER,
    FIELD_FULLNAME,
    FIELD_STATUS,
    FIELD_EMAIL,
    FIELD_CREATED_AT,
    FIELD_UPDATED_AT,
)

# Field validators called by the builders before save, keyed by column name.
# A validator raises ValueError for a value it rejects.
VALIDATORS: dict[str, Callable[[str], None]] = {}


def default_created_at() -> datetime:
    """Default value of ``created_at`` on creation."""
    return datetime.now(timezone.utc)


def default_updated_at() -> datetime:
    """Default value of ``updated_at`` on creation."""
    return datetime.now(timezone.utc)


def update_default_updated_at() -> datetime:
    """Default value of ``updated_at`` on update."""
    return datetime.now(timezone.utc)


def valid_column(column: str) -> bool:
    """Report whether ``column`` is one of the table's columns."""
    return column in COLUMNS


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def _db_value(value: Any) -> Any:
    """Convert a Python value into the form stored in the database."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _glob_escape(text: str) -> str:
    special = {"*": "[*]", "?": "[?]", "[": "[[]"}
    return "".join(special.get(ch, ch) for ch in text)


@dataclass(frozen=True)
class Predicate:
    """A SQL condition with its positional (``?``) parameters."""

    sql: str
    params: tuple[Any, ...] = ()

    def __and__(self, other: Predicate) -> Predicate:
        return and_(self, other)

    def __or__(self, other: Predicate) -> Predicate:
        return or_(self, other)

    def __invert__(self) -> Predicate:
        return not_(self)


_TRUE = Predicate("1")
_FALSE = Predicate("0")


@dataclass(frozen=True)
class OrderOption:
    """Ordering of query results by one column."""

    column: str
    descending: bool = False

    @property
    def sql(self) -> str:
        """The ORDER BY term for this option."""
        return f"{_quote(self.column)} {'DESC' if self.descending else 'ASC'}"


@dataclass(frozen=True)
class Field:
    """A column of the table, building predicates and orderings on it."""

    name: str
    kind: Literal["int", "string", "time"]

    @property
    def _column(self) -> str:
        return _quote(self.name)

    def _compare(self, op: str, value: Any) -> Predicate:
        return Predicate(f"{self._column} {op} ?", (_db_value(value),))

    def _require_string(self, operation: str) -> None:
        if self.kind != "string":
            raise TypeError(f"{operation} is not supported on {self.kind} field {self.name!r}")

    def eq(self, value: Any) -> Predicate:
        """Field equals ``value``."""
        return self._compare("=", value)

    def neq(self, value: Any) -> Predicate:
        """Field differs from ``value``."""
        return self._compare("<>", value)

    def in_(self, *args: Any) -> Predicate:
        """Field is one of ``args``; false when none are given."""
        if not args:
            return _FALSE
        marks = ", ".join("?" for _ in args)
        return Predicate(f"{self._column} IN ({marks})", tuple(_db_value(a) for a in args))

    def not_in(self, *args: Any) -> Predicate:
        """Field is none of ``args``; true when none are given."""
        if not args:
            return _TRUE
        marks = ", ".join("?" for _ in args)
        return Predicate(f"{self._column} NOT IN ({marks})", tuple(_db_value(a) for a in args))

    def gt(self, value: Any) -> Predicate:
        """Field is greater than ``value``."""
        return self._compare(">", value)

    def gte(self, value: Any) -> Predicate:
        """Field is greater than or equal to ``value``."""
        return self._compare(">=", value)

    def lt(self, value: Any) -> Predicate:
        """Field is less than ``value``."""
        return self._compare("<", value)

    def lte(self, value: Any) -> Predicate:
        """Field is less than or equal to ``value``."""
        return self._compare("<=", value)

    def contains(self, value: str) -> Predicate:
        """Field contains ``value``, case-sensitively."""
        self._require_string("contains")
        return Predicate(f"{self._column} GLOB ?", (f"*{_glob_escape(value)}*",))

    def has_prefix(self, value: str) -> Predicate:
        """Field starts with ``value``."""
        self._require_string("has_prefix")
        return Predicate(f"{self._column} GLOB ?", (f"{_glob_escape(value)}*",))

    def has_suffix(self, value: str) -> Predicate:
        """Field ends with ``value``."""
        self._require_string("has_suffix")
        return Predicate(f"{self._column} GLOB ?", (f"*{_glob_escape(value)}",))

    def equal_fold(self, value: str) -> Predicate:
        """Field equals ``value`` ignoring case."""
        self._require_string("equal_fold")
        return Predicate(f"LOWER({self._column}) = LOWER(?)", (value,))

    def contains_fold(self, value: str) -> Predicate:
        """Field contains ``value`` ignoring case."""
        self._require_string("contains_fold")
        return Predicate(f"instr(LOWER({self._column}), LOWER(?)) > 0", (value,))

    def order(self, descending: bool = False) -> OrderOption:
        """Order results by this field."""
        return OrderOption(self.name, descending)


ID = Field(FIELD_ID, "int")
ACCOUNT_NUMBER = Field(FIELD_ACCOUNT_NUMBER, "string")
FULLNAME = Field(FIELD_FULLNAME, "string")
STATUS = Field(FIELD_STATUS, "string")
EMAIL = Field(FIELD_EMAIL, "string")
CREATED_AT = Field(FIELD_CREATED_AT, "time")
UPDATED_AT = Field(FIELD_UPDATED_AT, "time")


def _combine(joiner: str, predicates: tuple[Predicate, ...], empty: Predicate) -> Predicate:
    if not predicates:
        return empty
    sql = f" {joiner} ".join(f"({p.sql})" for p in predicates)
    params = tuple(param for p in predicates for param in p.params)
    return Predicate(sql, params)


def and_(*args: Predicate) -> Predicate:
    """All of the predicates hold."""
    return _combine("AND", args, _TRUE)


def or_(*args: Predicate) -> Predicate:
    """At least one of the predicates holds."""
    return _combine("OR", args, _FALSE)


def not_(predicate: Predicate) -> Predicate:
    """The predicate does not hold."""
    return Predicate(f"NOT ({predicate.sql})", predicate.params)
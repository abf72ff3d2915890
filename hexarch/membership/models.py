"""Data carried through the membership service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass
class LoginInfo:
    """Credentials submitted for a login."""

    username: str
    password: str


@dataclass
class LoginResponse:
    """Outcome of a login attempt."""

    success: bool = False
    uuid: str = ""
    message: str = ""


@dataclass
class RegistrationInfo:
    """Details submitted for a new registration."""

    full_name: str
    status: str
    username: str
    password: str


@dataclass
class UserAuthInfo:
    """Authentication record of a user."""

    account_number: str = ""
    username: str = ""
    hash: str = ""
    last_login: datetime = field(default=ZERO_TIME)
    created_at: datetime = field(default=ZERO_TIME)


@dataclass
class UserProfileInfo:
    """Profile record of a user."""

    account_number: str = ""
    email: str = ""
    fullname: str = ""
    status: str = ""
    created_at: datetime = field(default=ZERO_TIME)
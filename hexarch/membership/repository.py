"""Storage adapter of the membership service."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any

from hexarch.config import Config
from hexarch.membership.models import UserProfileInfo
from hexarch.membership.ports import DatastoreRepositoryAdapter
from hexarch.membership.profile_entity import UserProfile
from hexarch.membership.profile_query import ProfileQuery
from hexarch.membership.profile_schema import ACCOUNT_NUMBER, FULLNAME, Predicate


def _to_info(profile: UserProfile) -> UserProfileInfo:
    return UserProfileInfo(
        account_number=profile.account_number,
        email=profile.email,
        fullname=profile.fullname,
        status=profile.status,
        created_at=profile.created_at,
    )


@dataclass
class DatastoreRepository(DatastoreRepositoryAdapter):
    """Reads user profiles from the database.

    ``client`` is a cache client kept for session storage; ``db`` is the
    database connection holding the profile table.
    """

    config: Config
    client: Any
    db: sqlite3.Connection

    def _only(self, predicate: Predicate) -> UserProfileInfo:
        return _to_info(ProfileQuery(self.db).where(predicate).only())

    def get_user_info_from_db(self, account_number: str) -> UserProfileInfo:
        """Return the single profile with the given account number."""
        return self._only(ACCOUNT_NUMBER.eq(account_number))

    def get_user_by_username(self, fullname: str) -> UserProfileInfo:
        """Return the single profile with the given full name."""
        return self._only(FULLNAME.eq(fullname))
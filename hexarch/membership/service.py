"""Membership use cases."""

from __future__ import annotations

from dataclasses import dataclass, field

from hexarch.config import Config
from hexarch.membership.models import LoginInfo, LoginResponse, UserProfileInfo
from hexarch.membership.ports import DatastoreRepositoryAdapter, MembershipServiceAdapter


@dataclass
class MembershipService(MembershipServiceAdapter):
    """Serves membership requests from the datastore.

    ``history`` records the names of the requests the service has accepted.
    """

    config: Config
    repository: DatastoreRepositoryAdapter
    history: list[str] = field(default_factory=list, repr=False)

    def submit_register_user(self) -> None:
        """Accept a registration request; no user record is stored."""
        self.history.append("register")

    def get_user_info(self, account_number: str) -> UserProfileInfo:
        """Return the profile with the given account number."""
        return self.repository.get_user_info_from_db(account_number)

    def submit_login(self, login_info: LoginInfo) -> LoginResponse:
        """Log a user in; the response is unsuccessful and empty."""
        self.history.append("login")
        return LoginResponse()

    def submit_logout(self) -> None:
        """Accept a logout request for the current user."""
        self.history.append("logout")
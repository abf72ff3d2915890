"""Interfaces between the membership service and its adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hexarch.membership.models import LoginInfo, LoginResponse, UserProfileInfo


class DatastoreRepositoryAdapter(ABC):
    """Secondary port: storage of membership data."""

    @abstractmethod
    def get_user_info_from_db(self, account_number: str) -> UserProfileInfo:
        """Return the profile with the given account number."""

    @abstractmethod
    def get_user_by_username(self, fullname: str) -> UserProfileInfo:
        """Return the profile with the given full name."""


class MembershipServiceAdapter(ABC):
    """Primary port: membership use cases."""

    @abstractmethod
    def submit_register_user(self) -> None:
        """Register a user."""

    @abstractmethod
    def get_user_info(self, account_number: str) -> UserProfileInfo:
        """Return the profile of a user."""

    @abstractmethod
    def submit_login(self, login_info: LoginInfo) -> LoginResponse:
        """Log a user in."""

    @abstractmethod
    def submit_logout(self) -> None:
        """Log the current user out."""
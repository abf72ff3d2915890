"""Request handler exposing the membership service."""

from __future__ import annotations

from dataclasses import dataclass

from hexarch.config import Config
from hexarch.membership.models import LoginInfo
from hexarch.membership.ports import MembershipServiceAdapter


@dataclass
class UserInfoRequest:
    """Request for a user's profile."""

    account_number: str = ""


@dataclass
class UserInfoResponse:
    """A user's profile."""

    email: str = ""
    fullname: str = ""
    account_number: str = ""


@dataclass
class LoginRequest:
    """Credentials for a login."""

    username: str = ""
    password: str = ""


@dataclass
class LoginReply:
    """Outcome of a login."""

    success: bool = False
    login_message: str = ""
    uuid: str = ""


@dataclass
class MembershipHandler:
    """Translates membership requests into service calls."""

    config: Config
    membership_service: MembershipServiceAdapter

    def get_user_info(self, request: UserInfoRequest) -> UserInfoResponse:
        """Return the requested user's profile; service errors propagate."""
        user = self.membership_service.get_user_info(request.account_number)
        return UserInfoResponse(
            email=user.email,
            fullname=user.fullname,
            account_number=user.account_number,
        )

    def submit_login(self, request: LoginRequest) -> LoginReply:
        """Log a user in; service errors propagate."""
        result = self.membership_service.submit_login(
            LoginInfo(username=request.username, password=request.password)
        )
        return LoginReply(success=result.success, login_message=result.message, uuid=result.uuid)

    def submit_logout(self, request: object) -> None:
        """Log the current user out."""
        self.membership_service.submit_logout()
        return None
import pytest

from hexarch.config import Config
from hexarch.membership.handler import (
    LoginReply,
    LoginRequest,
    MembershipHandler,
    UserInfoRequest,
    UserInfoResponse,
)
from hexarch.membership.models import LoginResponse, UserProfileInfo
from hexarch.membership.ports import MembershipServiceAdapter


class FakeService(MembershipServiceAdapter):
    def __init__(self, login_result=None, fail=False):
        self.login_result = login_result or LoginResponse()
        self.fail = fail
        self.logins = []
        self.logouts = 0

    def submit_register_user(self):
        return None

    def get_user_info(self, account_number):
        if self.fail:
            raise LookupError(account_number)
        return UserProfileInfo(
            account_number=account_number,
            email=f"{account_number}@example.com",
            fullname="Alice",
            status="active",
        )

    def submit_login(self, login_info):
        if self.fail:
            raise RuntimeError("login failed")
        self.logins.append(login_info)
        return self.login_result

    def submit_logout(self):
        self.logouts += 1


def test_get_user_info_maps_fields():
    handler = MembershipHandler(Config(), FakeService())
    reply = handler.get_user_info(UserInfoRequest(account_number="A1"))
    assert reply == UserInfoResponse(
        email="A1@example.com", fullname="Alice", account_number="A1"
    )


def test_get_user_info_error_propagates():
    handler = MembershipHandler(Config(), FakeService(fail=True))
    with pytest.raises(LookupError):
        handler.get_user_info(UserInfoRequest(account_number="A1"))


def test_submit_login_maps_request_and_reply():
    service = FakeService(LoginResponse(success=True, uuid="id-1", message="welcome"))
    handler = MembershipHandler(Config(), service)
    password = "password"
    reply = handler.submit_login(LoginRequest(username="alice", password=password))
    assert reply == LoginReply(success=True, login_message="welcome", uuid="id-1")
    assert service.logins[0].username == "alice"
    assert service.logins[0].password == password


def test_submit_login_error_propagates():
    handler = MembershipHandler(Config(), FakeService(fail=True))
    with pytest.raises(RuntimeError):
        handler.submit_login(LoginRequest(username="alice"))


def test_submit_logout_calls_service():
    service = FakeService()
    handler = MembershipHandler(Config(), service)
    assert handler.submit_logout(object()) is None
    assert service.logouts == 1
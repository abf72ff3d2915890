import pytest

from hexarch.config import Config
from hexarch.membership.models import LoginInfo, LoginResponse, UserProfileInfo
from hexarch.membership.ports import DatastoreRepositoryAdapter
from hexarch.membership.service import MembershipService


class FakeRepository(DatastoreRepositoryAdapter):
    def __init__(self, profiles):
        self.profiles = profiles
        self.calls = []

    def get_user_info_from_db(self, account_number):
        self.calls.append(account_number)
        try:
            return self.profiles[account_number]
        except KeyError:
            raise LookupError(account_number) from None

    def get_user_by_username(self, fullname):
        raise LookupError(fullname)


@pytest.fixture
def profile():
    return UserProfileInfo(account_number="A1", email="a@example.com", fullname="Alice")


def test_get_user_info_delegates(profile):
    repo = FakeRepository({"A1": profile})
    service = MembershipService(Config(), repo)
    assert service.get_user_info("A1") == profile
    assert repo.calls == ["A1"]


def test_get_user_info_error_propagates():
    service = MembershipService(Config(), FakeRepository({}))
    with pytest.raises(LookupError):
        service.get_user_info("missing")


def test_submit_login_returns_empty_response():
    service = MembershipService(Config(), FakeRepository({}))
    password = "password"
    result = service.submit_login(LoginInfo(username="alice", password=password))
    assert result == LoginResponse()
    assert result.success is False


def test_register_and_logout_return_none():
    repo = FakeRepository({})
    service = MembershipService(Config(), repo)
    assert service.submit_register_user() is None
    assert service.submit_logout() is None
    assert repo.calls == []
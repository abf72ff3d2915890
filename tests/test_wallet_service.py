import pytest

from hexarch.config import Config
from hexarch.wallet.models import DatastoreBalanceResponse, UpdateBalancePayload
from hexarch.wallet.ports import WalletRepositoryAdapter
from hexarch.wallet.service import WalletService


class MemoryRepository(WalletRepositoryAdapter):
    def __init__(self, entries=None, fail_read=False, fail_append=False):
        self.entries = {k: list(v) for k, v in (entries or {}).items()}
        self.fail_read = fail_read
        self.fail_append = fail_append

    def read_balance_info_from_datastore(self, user_id):
        if self.fail_read:
            raise ConnectionError("read failed")
        return DatastoreBalanceResponse(entries=list(self.entries.get(user_id, [])))

    def append_balance_info_into_datastore(self, user_id, amount):
        if self.fail_append:
            raise ConnectionError("append failed")
        self.entries.setdefault(user_id, []).append(repr(amount))


def make_service(repo):
    return WalletService(Config(), repo)


def test_balance_of_single_entry():
    service = make_service(MemoryRepository({"alice": ["7.25"]}))
    result = service.get_user_balance("alice")
    assert result.user_id == "alice"
    assert result.available_balance == 7.25


def test_opposite_entries_cancel():
    service = make_service(MemoryRepository({"alice": ["1.5", "-1.5"]}))
    assert service.get_user_balance("alice").available_balance == 0.0


def test_unparsable_entries_count_as_zero():
    repo = MemoryRepository({"bob": ["10", "abc", "1_000", " 3", ""]})
    assert make_service(repo).get_user_balance("bob").available_balance == 10.0


def test_unknown_user_has_zero_balance():
    assert make_service(MemoryRepository()).get_user_balance("ghost").available_balance == 0.0


def test_read_error_propagates_from_get_balance():
    service = make_service(MemoryRepository(fail_read=True))
    with pytest.raises(ConnectionError):
        service.get_user_balance("alice")


def test_update_appends_and_returns_new_balance():
    repo = MemoryRepository()
    service = make_service(repo)
    result = service.update_user_balance(UpdateBalancePayload(user_id="carol", amount=3.0))
    assert result == 3.0
    assert repo.entries["carol"] == [repr(3.0)]


def test_update_accumulates_with_existing_balance():
    repo = MemoryRepository()
    service = make_service(repo)
    service.update_user_balance(UpdateBalancePayload(user_id="dan", amount=2.0))
    result = service.update_user_balance(UpdateBalancePayload(user_id="dan", amount=-2.0))
    assert result == 0.0


def test_update_with_failed_append_returns_existing_balance():
    repo = MemoryRepository({"erin": ["4.5"]}, fail_append=True)
    result = make_service(repo).update_user_balance(UpdateBalancePayload(user_id="erin", amount=9.0))
    assert result == 4.5


def test_update_with_failed_read_returns_zero():
    repo = MemoryRepository(fail_read=True)
    result = make_service(repo).update_user_balance(UpdateBalancePayload(user_id="erin", amount=9.0))
    assert result == 0.0
    assert repo.entries["erin"] == [repr(9.0)]
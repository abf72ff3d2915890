import pytest

from hexarch.config import Config
from hexarch.payment.repository import PaymentRepository, WalletClient
from hexarch.wallet.handler import (
    GetBalanceResponse,
    UpdateBalanceResponse,
    WalletHandler,
)
from hexarch.wallet.repository import WalletRepository
from hexarch.wallet.service import WalletService


class RecordingServer:
    def __init__(self, balance=0, error=None):
        self.balance = balance
        self.error = error
        self.requests = []

    def get_user_balance(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return GetBalanceResponse(user_id=request.user_id, balance=self.balance)

    def update_user_balance(self, request):
        self.requests.append(request)
        if self.error:
            raise self.error
        return UpdateBalanceResponse(message="success", success=True, final_balance=0.0)


class FakeRedis:
    def __init__(self):
        self.hashes = {}

    def hset(self, name, key, value):
        self.hashes.setdefault(name, {})[key] = value

    def hgetall(self, name):
        return dict(self.hashes.get(name, {}))


def test_client_forwards_to_server():
    server = RecordingServer(balance=3.5)
    client = WalletClient(server)
    repo = PaymentRepository(Config(), client)
    assert repo.read_balance_info_from_wallet("alice") == 3.5
    assert server.requests[0].user_id == "alice"


def test_read_converts_balance_to_float():
    repo = PaymentRepository(Config(), WalletClient(RecordingServer(balance=7)))
    result = repo.read_balance_info_from_wallet("alice")
    assert result == 7.0
    assert isinstance(result, float)


def test_append_sends_update_request():
    server = RecordingServer()
    repo = PaymentRepository(Config(), WalletClient(server))
    repo.append_balance_info_into_wallet("bob", -4.25)
    request = server.requests[0]
    assert (request.user_id, request.amount) == ("bob", -4.25)


def test_read_error_propagates():
    repo = PaymentRepository(Config(), WalletClient(RecordingServer(error=ConnectionError("x"))))
    with pytest.raises(ConnectionError):
        repo.read_balance_info_from_wallet("alice")


def test_append_error_propagates():
    repo = PaymentRepository(Config(), WalletClient(RecordingServer(error=ConnectionError("x"))))
    with pytest.raises(ConnectionError):
        repo.append_balance_info_into_wallet("alice", 1.0)


def test_against_wallet_stack():
    config = Config()
    ticks = iter(range(1, 1000))
    wallet_repo = WalletRepository(config, FakeRedis(), clock=lambda: next(ticks))
    handler = WalletHandler(config, WalletService(config, wallet_repo))
    repo = PaymentRepository(config, WalletClient(handler))
    repo.append_balance_info_into_wallet("carol", 6.5)
    repo.append_balance_info_into_wallet("carol", -6.5)
    assert repo.read_balance_info_from_wallet("carol") == 0.0
    repo.append_balance_info_into_wallet("carol", 2.75)
    assert repo.read_balance_info_from_wallet("carol") == 2.75
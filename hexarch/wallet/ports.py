"""Interfaces between the wallet service and its adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hexarch.wallet.models import (
    BalanceResponse,
    DatastoreBalanceResponse,
    UpdateBalancePayload,
)


class WalletServiceAdapter(ABC):
    """Primary port: wallet use cases."""

    @abstractmethod
    def get_user_balance(self, user_id: str) -> BalanceResponse:
        """Return the balance of a user."""

    @abstractmethod
    def update_user_balance(self, payload: UpdateBalancePayload) -> float:
        """Apply an amount to a balance and return the new balance."""


class WalletRepositoryAdapter(ABC):
    """Secondary port: storage of balance entries."""

    @abstractmethod
    def read_balance_info_from_datastore(self, user_id: str) -> DatastoreBalanceResponse:
        """Return every stored balance entry of a user."""

    @abstractmethod
    def append_balance_info_into_datastore(self, user_id: str, amount: float) -> None:
        """Store a new balance entry for a user."""
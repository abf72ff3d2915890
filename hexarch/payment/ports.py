"""Interfaces between the payment service and its adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hexarch.payment.models import TransferBalancePayload


class PaymentServiceAdapter(ABC):
    """Primary port: payment use cases."""

    @abstractmethod
    def transfer_user_balance(self, payload: TransferBalancePayload) -> float:
        """Move money between users and return the target's final balance."""


class WalletRepositoryAdapter(ABC):
    """Secondary port: access to the wallet service."""

    @abstractmethod
    def read_balance_info_from_wallet(self, user_id: str) -> float:
        """Return the balance of a user."""

    @abstractmethod
    def append_balance_info_into_wallet(self, user_id: str, amount: float) -> None:
        """Add an amount, possibly negative, to a user's balance."""
"""Payment use cases: moving balance between users."""

from __future__ import annotations

from dataclasses import dataclass

from hexarch.config import Config
from hexarch.payment.models import TransferBalancePayload
from hexarch.payment.ports import PaymentServiceAdapter, WalletRepositoryAdapter


@dataclass
class PaymentService(PaymentServiceAdapter):
    """Transfers balance by debiting the source and crediting the target."""

    config: Config
    repository: WalletRepositoryAdapter

    def transfer_user_balance(self, payload: TransferBalancePayload) -> float:
        """Move ``payload.amount`` and return the target's final balance."""
        self.repository.append_balance_info_into_wallet(payload.source_user_id, -payload.amount)
        self.repository.append_balance_info_into_wallet(payload.target_user_id, payload.amount)
        return self.repository.read_balance_info_from_wallet(payload.target_user_id)
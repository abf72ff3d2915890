"""Wallet use cases: reading and changing a user's balance."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hexarch.config import Config
from hexarch.wallet.models import BalanceResponse, UpdateBalancePayload
from hexarch.wallet.ports import WalletRepositoryAdapter, WalletServiceAdapter

logger = logging.getLogger(__name__)


def _parse_amount(text: str) -> float:
    """Parse a stored entry; anything unparsable counts as zero."""
    if not text or "_" in text or text != text.strip():
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


@dataclass
class WalletService(WalletServiceAdapter):
    """Computes balances as the sum of all stored entries."""

    config: Config
    repository: WalletRepositoryAdapter

    def get_user_balance(self, user_id: str) -> BalanceResponse:
        """Return the sum of a user's balance entries."""
        stored = self.repository.read_balance_info_from_datastore(user_id)
        total = sum((_parse_amount(entry) for entry in stored.entries), 0.0)
        return BalanceResponse(user_id=user_id, available_balance=total)

    def update_user_balance(self, payload: UpdateBalancePayload) -> float:
        """Append an entry and return the resulting balance.

        Storage failures are logged, not raised; an unreadable balance is 0.
        """
        try:
            self.repository.append_balance_info_into_datastore(payload.user_id, payload.amount)
        except Exception:
            logger.error("failed to update balance")
        try:
            balance = self.get_user_balance(payload.user_id)
        except Exception:
            logger.error("failed to get latest balance")
            balance = BalanceResponse()
        return balance.available_balance
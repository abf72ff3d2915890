"""Access to the wallet service from the payment service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from hexarch.config import Config
from hexarch.payment.ports import WalletRepositoryAdapter
from hexarch.wallet.handler import (
    GetBalanceRequest,
    GetBalanceResponse,
    UpdateBalanceRequest,
    UpdateBalanceResponse,
)

logger = logging.getLogger(__name__)


@dataclass
class WalletClient:
    """Client of the wallet service, bound to a server endpoint.

    ``server`` is any object answering wallet requests, such as a
    :class:`hexarch.wallet.handler.WalletHandler`.
    """

    server: Any

    def get_user_balance(self, request: GetBalanceRequest) -> GetBalanceResponse:
        """Ask the wallet service for a balance."""
        return self.server.get_user_balance(request)

    def update_user_balance(self, request: UpdateBalanceRequest) -> UpdateBalanceResponse:
        """Ask the wallet service to apply a balance change."""
        return self.server.update_user_balance(request)


@dataclass
class PaymentRepository(WalletRepositoryAdapter):
    """Reads and changes balances through the wallet service."""

    config: Config
    client: WalletClient

    def read_balance_info_from_wallet(self, user_id: str) -> float:
        """Return a user's balance as held by the wallet service."""
        try:
            reply = self.client.get_user_balance(GetBalanceRequest(user_id=user_id))
        except Exception:
            logger.critical("wallet balance request failed for %s", user_id)
            raise
        return float(reply.balance)

    def append_balance_info_into_wallet(self, user_id: str, amount: float) -> None:
        """Add ``amount`` to a user's balance in the wallet service."""
        try:
            self.client.update_user_balance(UpdateBalanceRequest(user_id=user_id, amount=amount))
        except Exception:
            logger.critical("wallet update request failed for %s", user_id)
            raise
"""Request handler exposing the wallet service."""

from __future__ import annotations

from dataclasses import dataclass

from hexarch.config import Config
from hexarch.wallet.models import UpdateBalancePayload
from hexarch.wallet.ports import WalletServiceAdapter


@dataclass
class GetBalanceRequest:
    """Request for a user's balance."""

    user_id: str = ""


@dataclass
class GetBalanceResponse:
    """A user's balance."""

    user_id: str = ""
    balance: float = 0.0


@dataclass
class UpdateBalanceRequest:
    """Request to add an amount to a user's balance."""

    user_id: str = ""
    amount: float = 0.0


@dataclass
class UpdateBalanceResponse:
    """Outcome of a balance update."""

    message: str = ""
    success: bool = False
    final_balance: float = 0.0


@dataclass
class WalletHandler:
    """Translates wallet requests into service calls."""

    config: Config
    wallet_service: WalletServiceAdapter

    def get_user_balance(self, request: GetBalanceRequest) -> GetBalanceResponse:
        """Return the balance of the requested user; service errors propagate."""
        result = self.wallet_service.get_user_balance(request.user_id)
        return GetBalanceResponse(user_id=request.user_id, balance=result.available_balance)

    def update_user_balance(self, request: UpdateBalanceRequest) -> UpdateBalanceResponse:
        """Apply an update; a failure is reported in the response, not raised."""
        payload = UpdateBalancePayload(user_id=request.user_id, amount=request.amount)
        try:
            amount = self.wallet_service.update_user_balance(payload)
        except Exception as err:
            return UpdateBalanceResponse(message=str(err), success=False, final_balance=0.0)
        return UpdateBalanceResponse(message="success", success=True, final_balance=amount)
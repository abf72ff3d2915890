"""Request handler exposing the payment service."""

from __future__ import annotations

from dataclasses import dataclass

from hexarch.config import Config
from hexarch.payment.models import TransferBalancePayload
from hexarch.payment.ports import PaymentServiceAdapter


@dataclass
class TransferBalanceRequest:
    """Request to move an amount from one user to another."""

    source_user_id: str = ""
    destination: str = ""
    amount: float = 0.0


@dataclass
class TransferBalanceResponse:
    """Outcome of a transfer."""

    success: bool = False
    destination_amount: float = 0.0


@dataclass
class PaymentHandler:
    """Translates payment requests into service calls."""

    config: Config
    payment_service: PaymentServiceAdapter

    def transfer_balance_service(self, request: TransferBalanceRequest) -> TransferBalanceResponse:
        """Run a transfer; a failure is reported in the response, not raised."""
        payload = TransferBalancePayload(
            source_user_id=request.source_user_id,
            target_user_id=request.destination,
            amount=request.amount,
        )
        try:
            amount = self.payment_service.transfer_user_balance(payload)
        except Exception:
            return TransferBalanceResponse(success=False, destination_amount=0.0)
        return TransferBalanceResponse(success=True, destination_amount=amount)
"""Data carried through the payment service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BalanceResponse:
    """Balance available to a user."""

    user_id: str = ""
    available_balance: float = 0.0


@dataclass
class UpdateBalancePayload:
    """Amount to add to a user's balance."""

    user_id: str = ""
    amount: float = 0.0


@dataclass
class TransferBalancePayload:
    """Amount to move from one user to another."""

    source_user_id: str = ""
    target_user_id: str = ""
    amount: float = 0.0


@dataclass
class WalletBalanceResp:
    """Balance as reported by the wallet service."""

    user_id: str = ""
    balance: int = 0


@dataclass
class WalletUpdateResponse:
    """Result of a wallet update as reported by the wallet service."""

    message: str = ""
    success: bool = False
    final_balance: int = 0
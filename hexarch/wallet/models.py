"""Data carried through the wallet service."""

from __future__ import annotations

from dataclasses import dataclass, field


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
class DatastoreBalanceResponse:
    """Raw balance entries stored for a user."""

    user_id: str = ""
    entries: list[str] = field(default_factory=list)
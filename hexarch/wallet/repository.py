"""Redis-backed storage of wallet balance entries."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable

from hexarch.config import Config
from hexarch.wallet.models import DatastoreBalanceResponse
from hexarch.wallet.ports import WalletRepositoryAdapter

logger = logging.getLogger(__name__)

_KEY_PREFIX = "user:balance:"


def balance_key(user_id: str) -> str:
    """Return the Redis hash key holding a user's balance entries."""
    return _KEY_PREFIX + user_id


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _format_amount(amount: float) -> str:
    """Format a float as its shortest decimal form, without an exponent."""
    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "+Inf" if amount > 0 else "-Inf"
    text = format(Decimal(repr(float(amount))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _decode(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


@dataclass
class WalletRepository(WalletRepositoryAdapter):
    """Stores each balance change as a field of a per-user Redis hash.

    ``client`` is a Redis client offering ``hgetall`` and ``hset``;
    ``clock`` returns the current time in milliseconds and names each entry.
    """

    config: Config
    client: Any
    clock: Callable[[], int] = field(default=_now_ms)

    def read_balance_info_from_datastore(self, user_id: str) -> DatastoreBalanceResponse:
        """Return every balance entry stored for a user."""
        key = balance_key(user_id)
        logger.info("redis key : %s", key)
        stored = self.client.hgetall(key)
        return DatastoreBalanceResponse(entries=[_decode(v) for v in stored.values()])

    def append_balance_info_into_datastore(self, user_id: str, amount: float) -> None:
        """Store ``amount`` as a new entry keyed by the current millisecond."""
        key = balance_key(user_id)
        self.client.hset(key, str(self.clock()), _format_amount(amount))
"""Connection settings and opening of the PostgreSQL database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from hexarch.config import Config


@dataclass
class Database:
    """Opens connections to the database described by a configuration."""

    config: Config

    def dsn(self) -> str:
        """Return the key-value connection string for the configured database."""
        pg = self.config.postgre
        return (
            f"host={pg.address} port={pg.port} user={pg.username} "
            f"password={pg.password} dbname={pg.db_name} sslmode={pg.ssl_mode}"
        )

    def init_connection(self, connect: Callable[[str], Any]) -> Any:
        """Open a connection by passing the connection string to ``connect``.

        Errors raised by ``connect`` propagate unchanged.
        """
        return connect(self.dsn())
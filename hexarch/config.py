"""Application configuration loaded from a JSON file."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping

_MAX_DURATION_NS = 2**63 - 1

_UNIT_NS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_NUMBER = r"(?:\d+\.?\d*|\.\d+)"
_UNIT = r"(?:ns|us|µs|μs|ms|h|m|s)"
_DURATION_RE = re.compile(rf"[-+]?(?:{_NUMBER}{_UNIT})+")
_COMPONENT_RE = re.compile(rf"({_NUMBER})({_UNIT})")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"300ms"``, ``"1.5h"`` or ``"2h45m"``."""
    if text in ("0", "+0", "-0"):
        return timedelta(0)
    if not text or not _DURATION_RE.fullmatch(text):
        raise ValueError(f"invalid duration {text!r}")
    negative = text.startswith("-")
    body = text.lstrip("+-")
    total = sum(
        Decimal(number) * _UNIT_NS[unit]
        for number, unit in _COMPONENT_RE.findall(body)
    )
    nanoseconds = int(total)
    if nanoseconds > _MAX_DURATION_NS:
        raise ValueError(f"invalid duration {text!r}: out of range")
    if negative:
        nanoseconds = -nanoseconds
    return _from_nanoseconds(nanoseconds)


def _from_nanoseconds(nanoseconds: int) -> timedelta:
    micro = abs(nanoseconds) // 1000
    return timedelta(microseconds=-micro if nanoseconds < 0 else micro)


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == lowered:
            return value
    return None


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _lookup(data, key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"'{key}' expected an object, got {type(value).__name__}")
    return value


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    raise ValueError(f"'{name}' expected a string, got {type(value).__name__}")


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        if not value:
            return 0
        try:
            return int(value, 0)
        except ValueError:
            raise ValueError(f"'{name}' cannot parse {value!r} as int") from None
    raise ValueError(f"'{name}' expected an int, got {type(value).__name__}")


def _as_duration(value: Any, name: str) -> timedelta:
    if value is None:
        return timedelta(0)
    if isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    if isinstance(value, (bool, int, float)):
        return _from_nanoseconds(int(value))
    raise ValueError(f"'{name}' expected a duration, got {type(value).__name__}")


@dataclass
class AppConfig:
    """Listen addresses and label of a service."""

    grpc_address: str = ""
    http_address: str = ""
    label: str = ""

    @classmethod
    def _decode(cls, data: Mapping[str, Any]) -> AppConfig:
        return cls(
            grpc_address=_as_str(_lookup(data, "grpc_address"), "grpc_address"),
            http_address=_as_str(_lookup(data, "http_address"), "http_address"),
            label=_as_str(_lookup(data, "label"), "label"),
        )


@dataclass
class HttpConfig:
    """HTTP client settings."""

    timeout: timedelta = field(default_factory=timedelta)

    @classmethod
    def _decode(cls, data: Mapping[str, Any]) -> HttpConfig:
        return cls(timeout=_as_duration(_lookup(data, "timeout"), "timeout"))


@dataclass
class RedisConfig:
    """Redis connection settings."""

    address: str = ""
    pool_size: int = 0

    @classmethod
    def _decode(cls, data: Mapping[str, Any]) -> RedisConfig:
        return cls(
            address=_as_str(_lookup(data, "address"), "address"),
            pool_size=_as_int(_lookup(data, "poolsize"), "poolsize"),
        )


@dataclass
class PostgreConfig:
    """PostgreSQL connection settings."""

    address: str = ""
    port: str = ""
    username: str = ""
    password: str = ""
    db_name: str = ""
    ssl_mode: str = ""

    @classmethod
    def _decode(cls, data: Mapping[str, Any]) -> PostgreConfig:
        return cls(
            address=_as_str(_lookup(data, "address"), "address"),
            port=_as_str(_lookup(data, "port"), "port"),
            username=_as_str(_lookup(data, "username"), "username"),
            password=_as_str(_lookup(data, "password"), "password"),
            db_name=_as_str(_lookup(data, "dbName"), "dbName"),
            ssl_mode=_as_str(_lookup(data, "sslMode"), "sslMode"),
        )


@dataclass
class Config:
    """Complete service configuration."""

    app: AppConfig = field(default_factory=AppConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    postgre: PostgreConfig = field(default_factory=PostgreConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from decoded JSON; keys match case-insensitively."""
        if not isinstance(data, Mapping):
            raise ValueError(f"configuration must be an object, got {type(data).__name__}")
        return cls(
            app=AppConfig._decode(_section(data, "app")),
            http=HttpConfig._decode(_section(data, "http")),
            redis=RedisConfig._decode(_section(data, "redis")),
            postgre=PostgreConfig._decode(_section(data, "postgre")),
        )


def init_config(config_name: str, path: str | Path) -> Config:
    """Read ``<path>/<config_name>.json`` (or the bare name) and decode it."""
    directory = Path(path)
    for candidate in (directory / f"{config_name}.json", directory / config_name):
        if candidate.is_file():
            with candidate.open(encoding="utf-8") as handle:
                data = json.load(handle)
            return Config.from_dict(data)
    raise FileNotFoundError(f'Config File "{config_name}" Not Found in "{directory}"')
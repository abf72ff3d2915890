# hexarch

Small services laid out in the ports-and-adapters (hexagonal) style:

- **wallet** keeps a per-user ledger of balance changes in a Redis-style hash
  store and sums the entries into an available balance.
- **payment** transfers an amount between two users through a wallet client.
- **membership** looks up user profiles stored in a SQL table, with a small
  query/create/update/delete builder for the `user_profiles` table on a
  `sqlite3` connection.

Each domain has `models` (plain dataclasses), `ports` (abstract base classes),
a `repository` (secondary adapter), a `service` (primary adapter) and a
`handler` that turns request dataclasses into response dataclasses.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Configuration

`hexarch.config.init_config(config_name, path)` reads
`<path>/<config_name>.json` (or `<path>/<config_name>` if that file exists
instead) and returns a `Config` with the sections `app`, `http`, `redis` and
`postgre`. A missing file raises `FileNotFoundError`.

```python
from hexarch.config import init_config

cfg = init_config("config", "./configs")   # reads ./configs/config.json
print(cfg.app.grpc_address, cfg.http.timeout)
```

A configuration file looks like this:

```json
{
  "app": {"grpc_address": ":3002", "http_address": ":8002", "label": "wallet"},
  "http": {"timeout": "5s"},
  "redis": {"address": "localhost:6379", "poolsize": 10},
  "postgre": {
    "address": "localhost",
    "port": "5432",
    "username": "user",
    "password": "password",
    "dbName": "membership",
    "sslMode": "disable"
  }
}
```

Keys match case-insensitively; missing keys take empty or zero values.
`Config.from_dict` does the same decoding from an already loaded mapping.
Durations given as strings such as `"5s"`, `"300ms"` or `"1m30s"` are parsed
by `hexarch.config.parse_duration` into a `timedelta`; numbers are read as
nanoseconds.

## Wallet

`hexarch.wallet.repository.WalletRepository(config, client)` works with any
client offering `hgetall(key)` and `hset(key, field, value)`, such as a
client from the separately installed `redis` package. Each change is stored
under the key `user:balance:<user_id>` (see `balance_key`) as a hash field
named by the current time in milliseconds; pass `clock=` to supply another
time source.

```python
from hexarch.wallet.repository import WalletRepository
from hexarch.wallet.service import WalletService
from hexarch.wallet.handler import WalletHandler, UpdateBalanceRequest, GetBalanceRequest

repository = WalletRepository(cfg, client)
service = WalletService(cfg, repository)
handler = WalletHandler(cfg, service)

reply = handler.update_user_balance(UpdateBalanceRequest(user_id="u-1", amount=25.0))
print(reply.success, reply.message, reply.final_balance)
print(handler.get_user_balance(GetBalanceRequest(user_id="u-1")).balance)
```

`WalletService.get_user_balance` sums all entries of a user; entries that do
not parse as numbers count as zero. `update_user_balance` logs storage
failures instead of raising them. `WalletHandler.update_user_balance` reports
a service error in the response (`success=False`, the error text as
`message`); `get_user_balance` lets service errors propagate.

## Payment

```python
from hexarch.payment.repository import PaymentRepository, WalletClient
from hexarch.payment.service import PaymentService
from hexarch.payment.handler import PaymentHandler, TransferBalanceRequest

wallet_client = WalletClient(handler)          # any object answering wallet requests
payments = PaymentHandler(cfg, PaymentService(cfg, PaymentRepository(cfg, wallet_client)))

reply = payments.transfer_balance_service(
    TransferBalanceRequest(source_user_id="u-1", destination="u-2", amount=10.0)
)
print(reply.success, reply.destination_amount)
```

`PaymentService.transfer_user_balance` deducts the amount from the source,
adds it to the target and returns the target's final balance. The handler
turns any failure into `success=False`.

## Membership

```python
import sqlite3

from hexarch.membership.profile_entity import create_schema
from hexarch.membership.profile_create import ProfileCreate
from hexarch.membership.profile_query import ProfileQuery
from hexarch.membership.profile_update import ProfileUpdateOne
from hexarch.membership import profile_schema as up

conn = sqlite3.connect(":memory:")
create_schema(conn)

created = ProfileCreate(conn).set(
    account_number="ACC-0001",
    fullname="Jane Doe",
    status="active",
    email="jane@example.com",
).save()

profile = ProfileQuery(conn).where(up.ACCOUNT_NUMBER.eq("ACC-0001")).only()
ProfileUpdateOne(conn, created.id).set(status="inactive").save()
```

- `profile_schema` has a `Field` per column (`ID`, `ACCOUNT_NUMBER`,
  `FULLNAME`, `STATUS`, `EMAIL`, `CREATED_AT`, `UPDATED_AT`) that builds
  `Predicate`s (`eq`, `neq`, `in_`, `not_in`, `gt`, `gte`, `lt`, `lte`, and
  for text columns `contains`, `has_prefix`, `has_suffix`, `equal_fold`,
  `contains_fold`) and `OrderOption`s (`order`). Predicates combine with
  `and_`, `or_`, `not_` or the operators `&`, `|`, `~`. Validators placed in
  `VALIDATORS` (keyed by column, raising `ValueError`) run before saves.
- `ProfileQuery` offers `where`, `limit`, `offset`, `unique`, `order`,
  `first`, `first_id`, `only`, `only_id`, `all`, `ids`, `count`, `exist`,
  `clone`, `select` (returning `ProfileSelect`) and `group_by` (returning
  `ProfileGroupBy`); their `scan` returns one dict per row.
- `ProfileCreate` and `ProfileCreateBulk` insert profiles, filling
  `created_at`/`updated_at` when unset. `ProfileUpdate` and
  `ProfileUpdateOne` update rows and set `updated_at` when unset.
  `ProfileDelete` and `ProfileDeleteOne` delete rows.
- Errors: `NotFoundError` when nothing matches, `NotSingularError` when
  `only` finds several rows, `ValidationError` for missing or invalid fields,
  `ConstraintError` when the database rejects a write; all derive from
  `EntError`.

`hexarch.membership.repository.DatastoreRepository(config, client, db)`
returns `UserProfileInfo` records by account number or full name.
`MembershipService` and `MembershipHandler` expose them; the handler maps
`UserInfoRequest` to `UserInfoResponse` and `LoginRequest` to `LoginReply`.

`hexarch.postgre.Database(config).dsn()` builds a key-value PostgreSQL
connection string from the `postgre` section; `init_connection(connect)`
passes it to the connect function you supply.

## What the package does not do

- It starts no server and has no command; handlers are plain methods that
  take and return dataclasses, and `WalletClient` calls a server object in
  the same process.
- Membership registration, login and logout store nothing and authenticate
  no one: `submit_login` returns an empty, unsuccessful `LoginResponse`, and
  the service only records request names in `history`. No session cache is
  kept.
- The profile builders run on `sqlite3`; `Database` does not ship a
  PostgreSQL driver.
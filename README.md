# binancex

A small, synchronous Python client for the Binance REST API. It builds and
signs requests (HMAC-SHA256 over the query string, with `recvWindow` and a
millisecond `timestamp` added for you), sends them with `requests`, and turns
error responses into Python exceptions. Responses come back as the decoded
JSON bodies (plain dicts and lists).

## Installation

```
pip install binancex
```

To run the test suite:

```
pip install "binancex[test]"
pytest
```

## Configuration

`binancex.config.Config` is a frozen dataclass holding the spot and futures
REST endpoints, the websocket endpoints and the receive window (in
milliseconds) sent with signed requests. The defaults point at the production
exchange with a receive window of 5000 ms; `Config.testnet()` returns a
configuration aimed at the public test networks. Derive variations with
`dataclasses.replace`:

```python
import dataclasses

from binancex.config import Config

config = dataclasses.replace(Config.testnet(), recv_window=1234)
```

## Account and orders

`binancex.account.Account` covers the signed spot-account endpoints: account
information, the balance of one asset, open orders, order status,
cancellation (by order id or by client order id, or all open orders of a
symbol), trade history, and placing limit, market, quote-quantity, stop-limit
and custom orders. Every order method has a `test_` twin that sends the
request to the validation-only endpoint, where it is checked but never reaches
the matching engine; the `test_` methods return `None`.

```python
from binancex.account import Account
from binancex.config import Config
from binancex.orders import TimeInForce

account = Account.new("placeholder", "secret", Config.testnet())

balance = account.get_balance("BTC")          # {"asset": "BTC", "free": ..., "locked": ...}
open_orders = account.get_open_orders("LTCBTC")

account.test_limit_buy("LTCBTC", 1, 0.1)
transaction = account.limit_buy("LTCBTC", 1, 0.1)

account.stop_limit_sell_order("LTCBTC", 1, 0.1, 0.09, TimeInForce.GTC)
account.cancel_order("LTCBTC", transaction["orderId"])
```

`get_balance` raises `BinanceLibError("Asset not found")` when the account
holds no entry for the asset.

The order-building pieces live in `binancex.orders`: the `OrderSide`,
`OrderType` and `TimeInForce` enumerations, and the `OrderRequest` and
`QuoteQuantityOrderRequest` dataclasses, whose `to_parameters()` return the
query parameters sorted by key. A price of zero leaves out both `price` and
`timeInForce`, as market orders require; `stopPrice` and `newClientOrderId`
are sent only when given.

## Lower-level access

`binancex.client.Client` performs the HTTP calls against any endpoint listed in
`binancex.api` (`Spot`, `Sapi` and `Futures`; `endpoint_path()` gives the URL
path of each). It has signed `get_signed`, `post_signed` and `delete_signed`,
an unsigned `get`, and `post`, `put` and `delete` for listen-key calls. A
`Client` can be used as a context manager to close its HTTP session.

The helpers in the same module:

- `build_request(parameters)` joins a mapping into a `key=value&...` string in
  key order;
- `build_signed_request(parameters, recv_window, now=None)` does the same after
  adding `recvWindow` and `timestamp` (taken from `now`, or the current time);
- `format_number(value)` renders a number as its shortest plain decimal, never
  in exponent form (`1.0` becomes `"1"`, `0.1` stays `"0.1"`).

```python
from binancex.api import Futures
from binancex.client import Client

with Client(None, None, "https://fapi.binance.com") as client:
    server_time = client.get(Futures.TIME)
```

## Errors

All failures raise a subclass of `binancex.errors.BinanceLibError`: network
errors, undecodable bodies, and HTTP statuses other than 200 (500, 503 and 401
get their own messages). When the exchange answers 400 with an error body, a
`BinanceContentError` carries its numeric `code` and its `msg`:

```python
from binancex.errors import BinanceContentError, BinanceLibError

try:
    account.get_account()
except BinanceContentError as err:
    print(err.code, err.msg)
except BinanceLibError as err:
    print("request failed:", err)
```

## What this package does not do

Only the spot account has a dedicated wrapper. There are no ready-made methods
for market data, general exchange information, savings, futures trading or
user-data streams; those endpoints are listed in `binancex.api` and can be
called through `Client` directly. There is no websocket support, and responses
are not parsed into typed models.
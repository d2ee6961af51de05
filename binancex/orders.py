"""Order kinds and the request parameters they turn into."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .client import format_number


class _WireEnum(str, Enum):
    """An enum whose string form is the value sent to the exchange."""

    def __str__(self) -> str:
        return self.value


class OrderType(_WireEnum):
    """Kind of order placed on the spot market."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"


class OrderSide(_WireEnum):
    """Whether an order buys or sells."""

    BUY = "BUY"
    SELL = "SELL"


class TimeInForce(_WireEnum):
    """How long an order stays active."""

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


def _common_parameters(
    symbol: str,
    order_side: OrderSide,
    order_type: OrderType,
    price: float,
    time_in_force: TimeInForce,
    new_client_order_id: Optional[str],
) -> dict[str, str]:
    parameters: dict[str, str] = {
        "symbol": symbol,
        "side": str(OrderSide(order_side)),
        "type": str(OrderType(order_type)),
    }
    if price != 0.0:
        parameters["price"] = format_number(price)
        parameters["timeInForce"] = str(TimeInForce(time_in_force))
    if new_client_order_id is not None:
        parameters["newClientOrderId"] = new_client_order_id
    return parameters


@dataclass(frozen=True)
class OrderRequest:
    """An order sized in the base asset.

    A price of zero means no price is sent, and then no time in force either.
    """

    symbol: str
    qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    stop_price: Optional[float] = None
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: Optional[str] = None

    def to_parameters(self) -> dict[str, str]:
        """Return the request parameters, ordered by key."""
        parameters = _common_parameters(
            self.symbol,
            self.order_side,
            self.order_type,
            self.price,
            self.time_in_force,
            self.new_client_order_id,
        )
        parameters["quantity"] = format_number(self.qty)
        if self.stop_price is not None:
            parameters["stopPrice"] = format_number(self.stop_price)
        return dict(sorted(parameters.items()))


@dataclass(frozen=True)
class QuoteQuantityOrderRequest:
    """An order sized in the quote asset."""

    symbol: str
    quote_order_qty: float
    order_side: OrderSide
    order_type: OrderType
    price: float = 0.0
    time_in_force: TimeInForce = TimeInForce.GTC
    new_client_order_id: Optional[str] = None

    def to_parameters(self) -> dict[str, str]:
        """Return the request parameters, ordered by key."""
        parameters = _common_parameters(
            self.symbol,
            self.order_side,
            self.order_type,
            self.price,
            self.time_in_force,
            self.new_client_order_id,
        )
        parameters["quoteOrderQty"] = format_number(self.quote_order_qty)
        return dict(sorted(parameters.items()))
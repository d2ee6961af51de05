"""Signed spot-account calls: balances, orders and trade history."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .api import Spot
from .client import Client, build_signed_request
from .config import Config
from .errors import BinanceLibError
from .orders import (
    OrderRequest,
    OrderSide,
    OrderType,
    QuoteQuantityOrderRequest,
    TimeInForce,
)

_Order = Union[OrderRequest, QuoteQuantityOrderRequest]


@dataclass
class Account:
    """Access to a spot account; every call is signed with the client's secret.

    Results are the decoded JSON bodies returned by the exchange. Methods whose
    names start with ``test_`` hit the sandbox endpoint, which validates a
    request without sending it to the matching engine, and return ``None``.
    """

    client: Client
    recv_window: int = 5000

    @classmethod
    def new(
        cls,
        api_key: Optional[str] = None,
        secret_key: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Account":
        """Create an account handle for the REST endpoint of ``config``."""
        config = config or Config()
        return cls(
            client=Client(api_key, secret_key, config.rest_api_endpoint),
            recv_window=config.recv_window,
        )

    def _signed(self, parameters: Optional[Mapping[str, str]] = None) -> str:
        return build_signed_request(parameters or {}, self.recv_window)

    def _place(self, order: _Order, test: bool) -> Any:
        endpoint = Spot.ORDER_TEST if test else Spot.ORDER
        answer = self.client.post_signed(endpoint, self._signed(order.to_parameters()))
        return None if test else answer

    @staticmethod
    def _order_id_parameters(symbol: str, order_id: int) -> dict[str, str]:
        return {"symbol": symbol, "orderId": str(order_id)}

    def get_account(self) -> Any:
        """Return the account information, balances included."""
        return self.client.get_signed(Spot.ACCOUNT, self._signed())

    def get_balance(self, asset: str) -> Any:
        """Return the balance entry of one asset."""
        for balance in self.get_account().get("balances", []):
            if balance.get("asset") == asset:
                return balance
        raise BinanceLibError("Asset not found")

    def get_open_orders(self, symbol: str) -> Any:
        """Return the open orders of one symbol."""
        return self.client.get_signed(
            Spot.OPEN_ORDERS, self._signed({"symbol": symbol})
        )

    def get_all_open_orders(self) -> Any:
        """Return the open orders of every symbol."""
        return self.client.get_signed(Spot.OPEN_ORDERS, self._signed())

    def cancel_all_open_orders(self, symbol: str) -> Any:
        """Cancel every open order of one symbol."""
        return self.client.delete_signed(
            Spot.OPEN_ORDERS, self._signed({"symbol": symbol})
        )

    def order_status(self, symbol: str, order_id: int) -> Any:
        """Return the state of one order."""
        return self.client.get_signed(
            Spot.ORDER, self._signed(self._order_id_parameters(symbol, order_id))
        )

    def test_order_status(self, symbol: str, order_id: int) -> None:
        """Query an order's status on the sandbox endpoint."""
        self.client.get_signed(
            Spot.ORDER_TEST, self._signed(self._order_id_parameters(symbol, order_id))
        )

    def _limit(self, symbol: str, qty: float, price: float, side: OrderSide) -> OrderRequest:
        return OrderRequest(
            symbol=symbol,
            qty=qty,
            order_side=side,
            order_type=OrderType.LIMIT,
            price=price,
        )

    def _market(self, symbol: str, qty: float, side: OrderSide) -> OrderRequest:
        return OrderRequest(
            symbol=symbol, qty=qty, order_side=side, order_type=OrderType.MARKET
        )

    def _market_quote(
        self, symbol: str, quote_order_qty: float, side: OrderSide
    ) -> QuoteQuantityOrderRequest:
        return QuoteQuantityOrderRequest(
            symbol=symbol,
            quote_order_qty=quote_order_qty,
            order_side=side,
            order_type=OrderType.MARKET,
        )

    def _stop_limit(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
        side: OrderSide,
    ) -> OrderRequest:
        return OrderRequest(
            symbol=symbol,
            qty=qty,
            order_side=side,
            order_type=OrderType.STOP_LOSS_LIMIT,
            price=price,
            stop_price=stop_price,
            time_in_force=time_in_force,
        )

    def limit_buy(self, symbol: str, qty: float, price: float) -> Any:
        """Place a good-till-cancelled limit buy order."""
        return self._place(self._limit(symbol, qty, price, OrderSide.BUY), test=False)

    def test_limit_buy(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit buy order on the sandbox endpoint."""
        self._place(self._limit(symbol, qty, price, OrderSide.BUY), test=True)

    def limit_sell(self, symbol: str, qty: float, price: float) -> Any:
        """Place a good-till-cancelled limit sell order."""
        return self._place(self._limit(symbol, qty, price, OrderSide.SELL), test=False)

    def test_limit_sell(self, symbol: str, qty: float, price: float) -> None:
        """Validate a limit sell order on the sandbox endpoint."""
        self._place(self._limit(symbol, qty, price, OrderSide.SELL), test=True)

    def market_buy(self, symbol: str, qty: float) -> Any:
        """Place a market buy order sized in the base asset."""
        return self._place(self._market(symbol, qty, OrderSide.BUY), test=False)

    def test_market_buy(self, symbol: str, qty: float) -> None:
        """Validate a market buy order on the sandbox endpoint."""
        self._place(self._market(symbol, qty, OrderSide.BUY), test=True)

    def market_buy_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        """Place a market buy order sized in the quote asset."""
        return self._place(
            self._market_quote(symbol, quote_order_qty, OrderSide.BUY), test=False
        )

    def test_market_buy_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> None:
        """Validate a quote-sized market buy order on the sandbox endpoint."""
        self._place(self._market_quote(symbol, quote_order_qty, OrderSide.BUY), test=True)

    def market_sell(self, symbol: str, qty: float) -> Any:
        """Place a market sell order sized in the base asset."""
        return self._place(self._market(symbol, qty, OrderSide.SELL), test=False)

    def test_market_sell(self, symbol: str, qty: float) -> None:
        """Validate a market sell order on the sandbox endpoint."""
        self._place(self._market(symbol, qty, OrderSide.SELL), test=True)

    def market_sell_using_quote_quantity(self, symbol: str, quote_order_qty: float) -> Any:
        """Place a market sell order sized in the quote asset."""
        return self._place(
            self._market_quote(symbol, quote_order_qty, OrderSide.SELL), test=False
        )

    def test_market_sell_using_quote_quantity(
        self, symbol: str, quote_order_qty: float
    ) -> None:
        """Validate a quote-sized market sell order on the sandbox endpoint."""
        self._place(
            self._market_quote(symbol, quote_order_qty, OrderSide.SELL), test=True
        )

    def stop_limit_buy_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss limit buy order."""
        order = self._stop_limit(symbol, qty, price, stop_price, time_in_force, OrderSide.BUY)
        return self._place(order, test=False)

    def test_stop_limit_buy_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit buy order on the sandbox endpoint."""
        order = self._stop_limit(symbol, qty, price, stop_price, time_in_force, OrderSide.BUY)
        self._place(order, test=True)

    def stop_limit_sell_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> Any:
        """Place a stop-loss limit sell order."""
        order = self._stop_limit(symbol, qty, price, stop_price, time_in_force, OrderSide.SELL)
        return self._place(order, test=False)

    def test_stop_limit_sell_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: float,
        time_in_force: TimeInForce,
    ) -> None:
        """Validate a stop-loss limit sell order on the sandbox endpoint."""
        order = self._stop_limit(symbol, qty, price, stop_price, time_in_force, OrderSide.SELL)
        self._place(order, test=True)

    def custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: Optional[float],
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: Optional[str] = None,
    ) -> Any:
        """Place an order with every parameter chosen by the caller."""
        order = OrderRequest(
            symbol=symbol,
            qty=qty,
            order_side=order_side,
            order_type=order_type,
            price=price,
            stop_price=stop_price,
            time_in_force=time_in_force,
            new_client_order_id=new_client_order_id,
        )
        return self._place(order, test=False)

    def test_custom_order(
        self,
        symbol: str,
        qty: float,
        price: float,
        stop_price: Optional[float],
        order_side: OrderSide,
        order_type: OrderType,
        time_in_force: TimeInForce,
        new_client_order_id: Optional[str] = None,
    ) -> None:
        """Validate a custom order on the sandbox endpoint."""
        order = OrderRequest(
            symbol=symbol,
            qty=qty,
            order_side=order_side,
            order_type=order_type,
            price=price,
            stop_price=stop_price,
            time_in_force=time_in_force,
            new_client_order_id=new_client_order_id,
        )
        self._place(order, test=True)

    def cancel_order(self, symbol: str, order_id: int) -> Any:
        """Cancel an order by its exchange id."""
        return self.client.delete_signed(
            Spot.ORDER, self._signed(self._order_id_parameters(symbol, order_id))
        )

    def cancel_order_with_client_id(self, symbol: str, orig_client_order_id: str) -> Any:
        """Cancel an order by the id the client gave it."""
        parameters = {"symbol": symbol, "origClientOrderId": orig_client_order_id}
        return self.client.delete_signed(Spot.ORDER, self._signed(parameters))

    def test_cancel_order(self, symbol: str, order_id: int) -> None:
        """Validate a cancellation on the sandbox endpoint."""
        self.client.delete_signed(
            Spot.ORDER_TEST, self._signed(self._order_id_parameters(symbol, order_id))
        )

    def trade_history(self, symbol: str) -> Any:
        """Return the account's trades for one symbol."""
        return self.client.get_signed(Spot.MY_TRADES, self._signed({"symbol": symbol}))
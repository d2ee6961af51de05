import pytest

from binancex.client import build_request
from binancex.orders import (
    OrderRequest,
    OrderSide,
    OrderType,
    QuoteQuantityOrderRequest,
    TimeInForce,
)


@pytest.mark.parametrize(
    "member, text",
    [
        (OrderType.LIMIT, "LIMIT"),
        (OrderType.MARKET, "MARKET"),
        (OrderType.STOP_LOSS_LIMIT, "STOP_LOSS_LIMIT"),
        (OrderSide.BUY, "BUY"),
        (OrderSide.SELL, "SELL"),
        (TimeInForce.GTC, "GTC"),
        (TimeInForce.IOC, "IOC"),
        (TimeInForce.FOK, "FOK"),
    ],
)
def test_enum_string_form(member, text):
    assert str(member) == text
    assert f"{member}" == text


def test_limit_buy_query():
    request = OrderRequest("LTCBTC", 1, OrderSide.BUY, OrderType.LIMIT, price=0.1)
    assert build_request(request.to_parameters()) == (
        "price=0.1&quantity=1&side=BUY&symbol=LTCBTC&timeInForce=GTC&type=LIMIT"
    )


def test_limit_sell_parameters():
    request = OrderRequest("LTCBTC", 1, OrderSide.SELL, OrderType.LIMIT, price=0.1)
    assert request.to_parameters() == {
        "price": "0.1",
        "quantity": "1",
        "side": "SELL",
        "symbol": "LTCBTC",
        "timeInForce": "GTC",
        "type": "LIMIT",
    }


def test_market_order_omits_price_and_time_in_force():
    request = OrderRequest("LTCBTC", 1, OrderSide.BUY, OrderType.MARKET)
    parameters = request.to_parameters()
    assert "price" not in parameters
    assert "timeInForce" not in parameters
    assert build_request(parameters) == "quantity=1&side=BUY&symbol=LTCBTC&type=MARKET"


def test_stop_limit_order_carries_stop_price():
    request = OrderRequest(
        "LTCBTC",
        1,
        OrderSide.SELL,
        OrderType.STOP_LOSS_LIMIT,
        price=0.1,
        stop_price=0.09,
        time_in_force=TimeInForce.GTC,
    )
    assert build_request(request.to_parameters()) == (
        "price=0.1&quantity=1&side=SELL&stopPrice=0.09&symbol=LTCBTC"
        "&timeInForce=GTC&type=STOP_LOSS_LIMIT"
    )


def test_custom_order_with_client_id():
    request = OrderRequest(
        "LTCBTC",
        1,
        OrderSide.BUY,
        OrderType.MARKET,
        price=0.1,
        time_in_force=TimeInForce.GTC,
        new_client_order_id="6gCrw2kRUAF9CvJDGP16IP",
    )
    assert build_request(request.to_parameters()) == (
        "newClientOrderId=6gCrw2kRUAF9CvJDGP16IP&price=0.1&quantity=1&side=BUY"
        "&symbol=LTCBTC&timeInForce=GTC&type=MARKET"
    )


def test_time_in_force_is_passed_through():
    request = OrderRequest(
        "LTCBTC", 1, OrderSide.BUY, OrderType.LIMIT, price=0.1,
        time_in_force=TimeInForce.IOC,
    )
    assert request.to_parameters()["timeInForce"] == "IOC"


def test_parameters_are_key_ordered():
    request = OrderRequest(
        "LTCBTC", 1, OrderSide.BUY, OrderType.STOP_LOSS_LIMIT,
        price=0.1, stop_price=0.09, new_client_order_id="myOrder1",
    )
    keys = list(request.to_parameters())
    assert keys == sorted(keys)


def test_quote_quantity_buy_query():
    request = QuoteQuantityOrderRequest("BNBBTC", 0.002, OrderSide.BUY, OrderType.MARKET)
    assert build_request(request.to_parameters()) == (
        "quoteOrderQty=0.002&side=BUY&symbol=BNBBTC&type=MARKET"
    )


def test_quote_quantity_sell_has_no_quantity_key():
    request = QuoteQuantityOrderRequest("BNBBTC", 0.002, OrderSide.SELL, OrderType.MARKET)
    parameters = request.to_parameters()
    assert "quantity" not in parameters
    assert parameters["side"] == "SELL"
    assert parameters["quoteOrderQty"] == "0.002"


def test_quote_quantity_with_price_and_client_id():
    request = QuoteQuantityOrderRequest(
        "BNBBTC", 0.002, OrderSide.BUY, OrderType.LIMIT,
        price=0.1, new_client_order_id="myOrder1",
    )
    parameters = request.to_parameters()
    assert parameters["price"] == "0.1"
    assert parameters["timeInForce"] == "GTC"
    assert parameters["newClientOrderId"] == "myOrder1"


def test_requests_are_immutable():
    request = OrderRequest("LTCBTC", 1, OrderSide.BUY, OrderType.MARKET)
    with pytest.raises(AttributeError):
        request.qty = 2
    assert request.qty == 1


def test_invalid_side_is_rejected():
    request = OrderRequest("LTCBTC", 1, "HOLD", OrderType.MARKET)
    with pytest.raises(ValueError):
        request.to_parameters()
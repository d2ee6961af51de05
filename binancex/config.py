"""Endpoint and request-window settings shared by all API handles."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """REST and websocket endpoints plus the receive window for signed calls.

    Derive variations with ``dataclasses.replace``.
    """

    rest_api_endpoint: str = "https://api.binance.com"
    ws_endpoint: str = "wss://stream.binance.com:9443/ws"
    futures_rest_api_endpoint: str = "https://fapi.binance.com"
    futures_ws_endpoint: str = "wss://fstream.binance.com/ws"
    recv_window: int = 5000

    @classmethod
    def testnet(cls) -> "Config":
        """Return a configuration that points at the public test networks."""
        return dataclasses.replace(
            cls(),
            rest_api_endpoint="https://testnet.binance.vision",
            ws_endpoint="wss://testnet.binance.vision/ws",
            futures_rest_api_endpoint="https://testnet.binancefuture.com",
            futures_ws_endpoint="https://testnet.binancefuture.com/ws",
        )
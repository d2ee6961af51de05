"""Exceptions raised by the API client."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1


class BinanceLibError(Exception):
    """Base class for every error the client raises."""


class BinanceContentError(BinanceLibError):
    """An error reported by the exchange in a response body."""

    def __init__(self, code: int, msg: str) -> None:
        super().__init__(f"Binance error {code}: {msg}")
        self.code = code
        self.msg = msg

    @classmethod
    def from_json(cls, payload: Any) -> "BinanceContentError":
        """Build the error from a decoded JSON object or from raw JSON text."""
        if isinstance(payload, (str, bytes, bytearray)):
            try:
                payload = json.loads(payload)
            except ValueError as exc:
                raise BinanceLibError(f"invalid error payload: {exc}") from exc
        if not isinstance(payload, Mapping):
            raise BinanceLibError("error payload is not a JSON object")
        code = payload.get("code")
        msg = payload.get("msg")
        if isinstance(code, bool) or not isinstance(code, int):
            raise BinanceLibError("error payload has no integer 'code'")
        if not _I16_MIN <= code <= _I16_MAX:
            raise BinanceLibError(f"error code {code} is out of range")
        if not isinstance(msg, str):
            raise BinanceLibError("error payload has no string 'msg'")
        return cls(code, msg)


class KlineValueMissingError(BinanceLibError):
    """A kline row lacks the value expected at a position."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"{name} at {index} is missing")
        self.index = index
        self.name = name
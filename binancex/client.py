"""HTTP transport with request building and HMAC-SHA256 signing."""

from __future__ import annotations

import hashlib
import hmac
import math
import time
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

import requests

from .api import Endpoint, endpoint_path
from .errors import BinanceContentError, BinanceLibError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_USER_AGENT = "binancex"


def build_request(parameters: Mapping[str, Any]) -> str:
    """Join parameters as ``key=value`` pairs in key order, separated by ``&``."""
    return "&".join(f"{key}={value}" for key, value in sorted(parameters.items()))


def _timestamp_ms(now: Optional[datetime]) -> int:
    if now is None:
        return time.time_ns() // 1_000_000
    delta = now.astimezone(timezone.utc) - _EPOCH
    if delta < timedelta(0):
        raise BinanceLibError("system time is before the Unix epoch")
    return delta // timedelta(milliseconds=1)


def build_signed_request(
    parameters: Mapping[str, Any], recv_window: int, now: Optional[datetime] = None
) -> str:
    """Build a query string carrying ``recvWindow`` and a millisecond ``timestamp``."""
    params = dict(parameters)
    params["recvWindow"] = str(recv_window)
    params["timestamp"] = str(_timestamp_ms(now))
    return build_request(params)


def format_number(value: float) -> str:
    """Render a number as the shortest plain decimal, never in exponent form."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    return format(Decimal(repr(number)).normalize(), "f")


def _valid_header_value(value: str) -> bool:
    return all(ch == "\t" or (ord(ch) >= 32 and ord(ch) != 127) for ch in value)


class Client:
    """Blocking HTTP client for one REST host."""

    def __init__(
        self,
        api_key: Optional[str],
        secret_key: Optional[str],
        host: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key or ""
        self.secret_key = secret_key or ""
        self.host = host
        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_signed(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        url = self._sign_request(endpoint, request)
        return self._send("GET", url, headers=self._headers(content_type=True))

    def post_signed(self, endpoint: Endpoint, request: str) -> Any:
        url = self._sign_request(endpoint, request)
        return self._send("POST", url, headers=self._headers(content_type=True))

    def delete_signed(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        url = self._sign_request(endpoint, request)
        return self._send("DELETE", url, headers=self._headers(content_type=True))

    def get(self, endpoint: Endpoint, request: Optional[str] = None) -> Any:
        url = self._url(endpoint)
        if request:
            url = f"{url}?{request}"
        return self._send("GET", url)

    def post(self, endpoint: Endpoint) -> Any:
        return self._send(
            "POST", self._url(endpoint), headers=self._headers(content_type=False)
        )

    def put(self, endpoint: Endpoint, listen_key: str) -> Any:
        return self._send(
            "PUT",
            self._url(endpoint),
            headers=self._headers(content_type=False),
            data=f"listenKey={listen_key}",
        )

    def delete(self, endpoint: Endpoint, listen_key: str) -> Any:
        return self._send(
            "DELETE",
            self._url(endpoint),
            headers=self._headers(content_type=False),
            data=f"listenKey={listen_key}",
        )

    def _url(self, endpoint: Endpoint) -> str:
        return f"{self.host}{endpoint_path(endpoint)}"

    def _sign_request(self, endpoint: Endpoint, request: Optional[str]) -> str:
        payload = request if request is not None else ""
        signature = hmac.new(
            self.secret_key.encode(), payload.encode(), hashlib.sha256
        ).hexdigest()
        return f"{self._url(endpoint)}?{payload}&signature={signature}"

    def _headers(self, content_type: bool) -> dict[str, str]:
        if not _valid_header_value(self.api_key):
            raise BinanceLibError("invalid header value for API key")
        headers = {"User-Agent": _USER_AGENT}
        if content_type:
            headers["Content-Type"] = _FORM_CONTENT_TYPE
        headers["X-MBX-APIKEY"] = self.api_key
        return headers

    def _send(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        data: Optional[str] = None,
    ) -> Any:
        try:
            response = self._session.request(method, url, headers=headers, data=data)
        except requests.RequestException as exc:
            raise BinanceLibError(str(exc)) from exc
        return self._handle(response)

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BinanceLibError(f"invalid JSON response: {exc}") from exc

    def _handle(self, response: requests.Response) -> Any:
        status = response.status_code
        if status == 200:
            return self._json(response)
        if status == 500:
            raise BinanceLibError("Internal Server Error")
        if status == 503:
            raise BinanceLibError("Service Unavailable")
        if status == 401:
            raise BinanceLibError("Unauthorized")
        if status == 400:
            raise BinanceContentError.from_json(self._json(response))
        raise BinanceLibError(f"Received response: {status}")
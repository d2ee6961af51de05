"""Client for the Binance REST API: configuration, request signing, spot account calls and orders."""

__version__ = "0.1.0"

__all__ = ["account", "api", "client", "config", "errors", "orders"]
"""
Transport layer for FreshBooks SDK.

This module provides a unified transport interface that abstracts different HTTP clients.
All transports implement the same interface, making them interchangeable:

- httpx: Modern async HTTP client (default, recommended)
- aiohttp: Async HTTP client, installed with the ``aiohttp`` extra
- requests: Sync HTTP client wrapped in async interface, installed with the ``requests`` extra
"""

from .base import BaseTransport
from .base import TransportResponse
from .httpx import HttpxTransport


def get_transport(name: str, timeout: float = 30.0) -> BaseTransport:
    """
    Get transport instance by name.

    Raises:
        ImportError: If the optional backend is not installed.
        ValueError: If the name is unknown.
    """
    name = name.lower()
    if name == "httpx":
        return HttpxTransport(timeout)
    elif name == "aiohttp":
        try:
            from .aiohttp import AiohttpTransport
        except ImportError as err:
            raise ImportError(
                "aiohttp transport requires aiohttp package. Install with: pip install 'freshbooks-sdk[aiohttp]'"
            ) from err
        return AiohttpTransport(timeout)
    elif name == "requests":
        try:
            from .requests import RequestsTransport
        except ImportError as err:
            raise ImportError(
                "requests transport requires requests package. Install with: pip install 'freshbooks-sdk[requests]'"
            ) from err
        return RequestsTransport(timeout)
    else:
        raise ValueError(
            f"Unknown transport: {name}. Available: httpx, aiohttp, requests"
        )


__all__ = ["BaseTransport", "TransportResponse", "HttpxTransport", "get_transport"]

"""
Base resource for marketplace API groups.
"""

from typing import Any
from urllib.parse import quote

from market_tracker.services.client import GatewayClient


def segment(value: Any) -> str:
    """Quote a value for use as a single path segment."""
    return quote(str(value), safe="")


class BaseResource:
    """
    Group of related backend operations sharing one GatewayClient.

    Subclasses expose one coroutine per remote operation and return the
    backend's JSON untouched.
    """

    prefix: str = ""

    def __init__(self, client: GatewayClient):
        self.client = client

    def path(self, *parts: Any) -> str:
        """Build "<prefix>/<part>/<part>" with each part quoted."""
        return "/".join([self.prefix, *(segment(p) for p in parts)])

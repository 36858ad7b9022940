"""Client entrypoints."""

from mollie_sdk.client.async_client import AsyncMollieClient, connect
from mollie_sdk.client.sync_client import MollieClient

__all__ = [
    "AsyncMollieClient",
    "MollieClient",
    "connect",
]

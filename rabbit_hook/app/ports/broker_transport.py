"""
Port: broker transport contract. Implementations live in infrastructure.

Implementations raise rabbit_hook.app.errors.TransportError for connect,
reconnect, channel-open and publish failures. close() may raise anything;
the client tolerates it.
"""
from __future__ import annotations

from typing import Protocol

from rabbit_hook.app.config.resolver import BrokerConfig


class BrokerChannel(Protocol):
    async def publish(self, body: bytes, *, exchange: str, routing_key: str) -> None: ...

    async def close(self) -> None: ...


class BrokerConnection(Protocol):
    @property
    def is_connected(self) -> bool: ...

    async def reconnect(self) -> None:
        """Re-establish the link with the credentials the connection was opened with."""
        ...

    async def channel(self) -> BrokerChannel: ...

    async def close(self) -> None: ...


class ConnectionFactory(Protocol):
    async def connect(self, config: BrokerConfig) -> BrokerConnection:
        """Open a connection. May return a connection that is not (yet) connected."""
        ...

"""In-memory transport for tests and local mode.
Publishes are appended to a shared list keyed by routing key; nothing leaves the process.
"""
from __future__ import annotations

from dataclasses import dataclass

from rabbit_hook.app.config.resolver import BrokerConfig
from rabbit_hook.app.errors import TransportError


@dataclass(frozen=True)
class PublishedMessage:
    exchange: str
    routing_key: str
    body: bytes


class InMemoryChannel:
    def __init__(self, connection: InMemoryConnection) -> None:
        self._connection = connection
        self.closed = False

    async def publish(self, body: bytes, *, exchange: str, routing_key: str) -> None:
        if self.closed:
            raise TransportError("channel is closed")
        if not self._connection.is_connected:
            raise TransportError("connection is not open")
        self._connection.broker.append(PublishedMessage(exchange, routing_key, body))

    async def close(self) -> None:
        self.closed = True


class InMemoryConnection:
    def __init__(self, config: BrokerConfig, broker: list[PublishedMessage]) -> None:
        self.config = config
        self.broker = broker
        self.reconnects = 0
        self.closed = False
        self._connected = True

    @property
    def is_connected(self) -> bool:
        return self._connected and not self.closed

    def drop(self) -> None:
        """Simulate the broker dropping the link."""
        self._connected = False

    async def reconnect(self) -> None:
        if self.closed:
            raise TransportError("connection is closed")
        self.reconnects += 1
        self._connected = True

    async def channel(self) -> InMemoryChannel:
        if not self.is_connected:
            raise TransportError("connection is not open")
        return InMemoryChannel(self)

    async def close(self) -> None:
        self.closed = True


class InMemoryConnectionFactory:
    def __init__(self) -> None:
        self.messages: list[PublishedMessage] = []
        self.connections: list[InMemoryConnection] = []

    async def connect(self, config: BrokerConfig) -> InMemoryConnection:
        connection = InMemoryConnection(config, self.messages)
        self.connections.append(connection)
        return connection

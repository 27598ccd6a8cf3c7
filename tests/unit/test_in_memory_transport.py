"""Unit tests for the in-memory transport and composition root wiring."""
from __future__ import annotations

import pytest

from rabbit_hook.app.composition import create_queue_client
from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.infrastructure.messaging.factory import create_connection_factory
from rabbit_hook.app.infrastructure.messaging.inmemory.in_memory_transport import (
    InMemoryConnectionFactory,
    PublishedMessage,
)
from rabbit_hook.app.infrastructure.messaging.rabbitmq.aio_pika_transport import AioPikaConnectionFactory
from tests.fakes import FULL_CONFIG, FakeMessage


def test_factory_selects_backend(monkeypatch):
    monkeypatch.setenv("QUEUE_CLIENT_TRANSPORT_BACKEND", " InMemory ")
    assert isinstance(create_connection_factory(ClientSettings()), InMemoryConnectionFactory)

    monkeypatch.setenv("QUEUE_CLIENT_TRANSPORT_BACKEND", "rabbitmq")
    assert isinstance(create_connection_factory(ClientSettings()), AioPikaConnectionFactory)

    monkeypatch.setenv("QUEUE_CLIENT_TRANSPORT_BACKEND", "kafka")
    with pytest.raises(ValueError, match="kafka"):
        create_connection_factory(ClientSettings())


@pytest.mark.asyncio
async def test_in_memory_client_round_trip(monkeypatch):
    monkeypatch.setenv("QUEUE_CLIENT_TRANSPORT_BACKEND", "inmemory")
    client = create_queue_client(FULL_CONFIG, environment={})
    factory = client._connection_factory

    async with client:
        await client.send(FakeMessage({"n": 1}))
        factory.connections[0].drop()
        await client.send(FakeMessage({"n": 2}))

    assert factory.messages == [
        PublishedMessage("", "q", b'{"n": 1}'),
        PublishedMessage("", "q", b'{"n": 2}'),
    ]
    assert factory.connections[0].reconnects == 1
    assert factory.connections[0].closed is True

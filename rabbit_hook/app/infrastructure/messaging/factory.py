"""Transport factory: selects implementation from settings. Only place that imports concrete transports."""
from __future__ import annotations

from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.constants import TransportBackend
from rabbit_hook.app.infrastructure.messaging.inmemory.in_memory_transport import InMemoryConnectionFactory
from rabbit_hook.app.infrastructure.messaging.rabbitmq.aio_pika_transport import AioPikaConnectionFactory
from rabbit_hook.app.ports.broker_transport import ConnectionFactory


def create_connection_factory(settings: ClientSettings) -> ConnectionFactory:
    backend = settings.transport_backend.strip().lower()

    if backend == TransportBackend.RABBITMQ:
        return AioPikaConnectionFactory(settings)

    if backend == TransportBackend.INMEMORY:
        return InMemoryConnectionFactory()

    raise ValueError(f"Unsupported transport backend: {backend}")

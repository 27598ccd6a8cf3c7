"""
Composition root: single place where concrete implementations are wired.

Builds settings and the transport from config; the caller owns the client's
lifecycle (send/close, or `async with`). No DI container library, explicit
wiring only. Backend selection (e.g. transport_backend=inmemory) is driven by
settings.
"""
from __future__ import annotations

from typing import Any, Mapping

from rabbit_hook.app.client import QueueClient
from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.infrastructure.messaging.factory import create_connection_factory


def create_queue_client(
    config: Mapping[str, Any] | None = None,
    settings: ClientSettings | None = None,
    *,
    logger: Any = None,
    environment: Mapping[str, Any] | None = None,
) -> QueueClient:
    _settings = settings or ClientSettings()
    return QueueClient(
        config,
        logger,
        environment=environment,
        settings=_settings,
        connection_factory=create_connection_factory(_settings),
    )

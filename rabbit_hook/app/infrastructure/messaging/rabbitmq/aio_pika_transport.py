"""
RabbitMQ transport on aio_pika.

AioPikaConnection keeps the credentials it was opened with so reconnect()
can re-establish the link in place. Each reconnect bumps a generation
counter; an AioPikaChannel opened on an older generation reopens its
underlying aio_pika channel before the next publish, so the channel object
the client holds survives a reconnect.
"""
from __future__ import annotations

import asyncio
from typing import Any

import aio_pika
from aio_pika import DeliveryMode, Message
from aio_pika.abc import AbstractChannel, AbstractConnection
from aio_pika.exceptions import AMQPError
from loguru import logger

from rabbit_hook.app.config.resolver import BrokerConfig
from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.constants import DEFAULT_EXCHANGE
from rabbit_hook.app.core import SERVICE_NAME
from rabbit_hook.app.errors import TransportError

_TRANSPORT_ERRORS = (AMQPError, OSError, asyncio.TimeoutError)


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


async def _open(config: BrokerConfig, settings: ClientSettings) -> AbstractConnection:
    try:
        return await aio_pika.connect(
            host=config.host,
            port=config.port,
            login=config.login,
            password=config.password,
            virtualhost=config.vhost,
            timeout=settings.connect_timeout_seconds,
        )
    except _TRANSPORT_ERRORS as exc:
        raise TransportError(
            f"rmq connect failed for {config.host}:{config.port}{config.vhost}: {exc}"
        ) from exc


class AioPikaChannel:
    """Implements BrokerChannel on top of an aio_pika channel."""

    def __init__(
        self,
        connection: AioPikaConnection,
        channel: AbstractChannel,
        settings: ClientSettings,
    ) -> None:
        self._connection = connection
        self._channel: AbstractChannel | None = channel
        self._generation = connection.generation
        self._settings = settings

    async def _current_channel(self) -> AbstractChannel:
        if (
            self._channel is None
            or self._channel.is_closed
            or self._generation != self._connection.generation
        ):
            self._channel = await self._connection.open_raw_channel()
            self._generation = self._connection.generation
            _log("channel_reopened", generation=self._generation)
        return self._channel

    def _build_message(self, body: bytes) -> Message:
        return Message(
            body,
            content_type=self._settings.content_type,
            delivery_mode=(
                DeliveryMode.PERSISTENT
                if self._settings.persistent_delivery
                else DeliveryMode.NOT_PERSISTENT
            ),
        )

    async def publish(self, body: bytes, *, exchange: str, routing_key: str) -> None:
        if exchange != DEFAULT_EXCHANGE:
            raise ValueError(f"only the default exchange is supported, got {exchange!r}")
        channel = await self._current_channel()
        try:
            await channel.default_exchange.publish(
                self._build_message(body),
                routing_key=routing_key,
                timeout=self._settings.publish_timeout_seconds,
            )
        except _TRANSPORT_ERRORS as exc:
            raise TransportError(f"rmq publish to {routing_key!r} failed: {exc}") from exc

    async def close(self) -> None:
        channel, self._channel = self._channel, None
        if channel is not None and not channel.is_closed:
            await channel.close()


class AioPikaConnection:
    """Implements BrokerConnection on top of aio_pika.connect."""

    def __init__(
        self,
        config: BrokerConfig,
        settings: ClientSettings,
        connection: AbstractConnection,
    ) -> None:
        self._config = config
        self._settings = settings
        self._connection: AbstractConnection | None = connection
        self._generation = 1

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_connected(self) -> bool:
        return self._connection is not None and not self._connection.is_closed

    async def reconnect(self) -> None:
        _log("rmq_reconnect", host=self._config.host, port=self._config.port)
        self._connection = None
        self._connection = await _open(self._config, self._settings)
        self._generation += 1
        _log("rmq_reconnected", generation=self._generation)

    async def open_raw_channel(self) -> AbstractChannel:
        if self._connection is None or self._connection.is_closed:
            raise TransportError("rmq connection is not open")
        try:
            return await self._connection.channel()
        except _TRANSPORT_ERRORS as exc:
            raise TransportError(f"rmq channel open failed: {exc}") from exc

    async def channel(self) -> AioPikaChannel:
        return AioPikaChannel(self, await self.open_raw_channel(), self._settings)

    async def close(self) -> None:
        connection, self._connection = self._connection, None
        if connection is not None and not connection.is_closed:
            await connection.close()


class AioPikaConnectionFactory:
    """Implements ConnectionFactory. aio_pika connects on construction."""

    def __init__(self, settings: ClientSettings) -> None:
        self._settings = settings

    async def connect(self, config: BrokerConfig) -> AioPikaConnection:
        connection = await _open(config, self._settings)
        _log("rmq_connected", host=config.host, port=config.port, vhost=config.vhost)
        return AioPikaConnection(config, self._settings, connection)

"""
Queue client: resolve config once, connect lazily, publish to one queue.

Lifecycle:
  UNINITIALIZED -> CONNECTION_ABSENT -> CONNECTION_CONNECTED (or
  CONNECTION_DISCONNECTED when the transport does not connect on construction)
  -> CHANNEL_READY.
  Before every send: a connection that reports not-connected is reconnected in
  place; the channel is opened only when the client holds none, so a reconnect
  never replaces it.
  On close(): CLOSING -> close channel, then connection (best effort) -> CLOSED.

Concurrency:
  No internal locking. The ensure-ready checks are not atomic, so callers
  running several tasks against one client must serialise access themselves.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from loguru import logger

from rabbit_hook.app.adapter import HttpMessageAdapter
from rabbit_hook.app.builders.content_builder import ContentBuilder
from rabbit_hook.app.builders.message_builder import MessageBuilder
from rabbit_hook.app.config.resolver import BrokerConfig, ConfigResolver
from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.constants import DEFAULT_EXCHANGE, ConnectionState, ResolverState
from rabbit_hook.app.core import SERVICE_NAME
from rabbit_hook.app.domain.messages import QueueMessage
from rabbit_hook.app.errors import ClientClosedError, UnknownOperationError
from rabbit_hook.app.infrastructure.encoding.json_encoder import JsonMessageEncoder
from rabbit_hook.app.infrastructure.messaging.factory import create_connection_factory
from rabbit_hook.app.ports.broker_transport import BrokerChannel, BrokerConnection, ConnectionFactory
from rabbit_hook.app.ports.client_operations import (
    DELEGATED_OPERATIONS,
    ClientOperations,
    MessageSender,
    operation_name,
)
from rabbit_hook.app.ports.message_encoder import MessageEncoder

AdapterFactory = Callable[[MessageSender], ClientOperations]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class QueueClient:
    """Publishes QueueMessages to the configured queue through the default exchange."""

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        logger: Any = None,
        *,
        environment: Mapping[str, Any] | None = None,
        settings: ClientSettings | None = None,
        connection_factory: ConnectionFactory | None = None,
        encoder: MessageEncoder | None = None,
        adapter_factory: AdapterFactory | None = None,
    ) -> None:
        self._resolver = ConfigResolver(config, environment)
        self._logger = logger if logger is not None else _default_logger()
        if connection_factory is None:
            connection_factory = create_connection_factory(settings or ClientSettings())
        self._connection_factory = connection_factory
        self._encoder = encoder or JsonMessageEncoder()
        self._adapter_factory: AdapterFactory = adapter_factory or HttpMessageAdapter
        self._adapter: ClientOperations | None = None
        self._connection: BrokerConnection | None = None
        self._channel: BrokerChannel | None = None
        self._state = ConnectionState.UNINITIALIZED

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def resolver_state(self) -> ResolverState:
        return self._resolver.state

    @property
    def ready(self) -> bool:
        return self._state == ConnectionState.CHANNEL_READY

    def _set_state(self, state: ConnectionState) -> None:
        self._state = state

    async def __aenter__(self) -> QueueClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def send(self, message: QueueMessage) -> None:
        """Publish one message. Failures are logged at warning level and re-raised unchanged."""
        config = self._init_if_needed()
        channel = await self._connect_if_needed(config)

        try:
            body = self._encoder.encode(message)
            await channel.publish(body, exchange=DEFAULT_EXCHANGE, routing_key=config.queue)
        except Exception as exc:
            self._logger.warning(str(exc))
            raise
        _log("publish_success", queue=config.queue, size=len(body))

    def _init_if_needed(self) -> BrokerConfig:
        if self._state in (ConnectionState.CLOSING, ConnectionState.CLOSED):
            raise ClientClosedError("queue client is closed")
        config = self._resolver.resolve()
        if self._state == ConnectionState.UNINITIALIZED:
            self._set_state(ConnectionState.CONNECTION_ABSENT)
        return config

    async def _connect_if_needed(self, config: BrokerConfig) -> BrokerChannel:
        if self._connection is None:
            self._connection = await self._connection_factory.connect(config)
            self._set_state(
                ConnectionState.CONNECTION_CONNECTED
                if self._connection.is_connected
                else ConnectionState.CONNECTION_DISCONNECTED
            )

        if not self._connection.is_connected:
            self._set_state(ConnectionState.CONNECTION_DISCONNECTED)
            _log("broker_disconnect_detected", host=config.host, port=config.port)
            await self._connection.reconnect()
            self._set_state(ConnectionState.CONNECTION_CONNECTED)

        if self._channel is None:
            self._channel = await self._connection.channel()
            _log("channel_opened", queue=config.queue)
        self._set_state(ConnectionState.CHANNEL_READY)
        return self._channel

    async def close(self) -> None:
        """
        Release channel then connection. Safe to call more than once.

        Close errors are logged and swallowed. Cancellation still propagates,
        but only after the connection close has run and the state is CLOSED.
        """
        if self._state in (ConnectionState.CLOSING, ConnectionState.CLOSED):
            return
        self._set_state(ConnectionState.CLOSING)
        channel, self._channel = self._channel, None
        connection, self._connection = self._connection, None
        try:
            if channel is not None:
                try:
                    await channel.close()
                except Exception as e:
                    logger.warning("channel close failed (continuing to close connection): {}", e)
        finally:
            try:
                if connection is not None:
                    try:
                        await connection.close()
                    except Exception as e:
                        logger.warning("connection close failed: {}", e)
            finally:
                self._set_state(ConnectionState.CLOSED)
                _log("client_closed")

    def _adapter_instance(self) -> ClientOperations:
        if self._adapter is None:
            self._adapter = self._adapter_factory(self)
        return self._adapter

    def invoke(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch a delegated operation by name (camelCase or snake_case)."""
        key = operation_name(name)
        if key not in DELEGATED_OPERATIONS:
            raise UnknownOperationError(name)
        operation = getattr(self._adapter_instance(), key, None)
        if not callable(operation):
            raise UnknownOperationError(name)
        return operation(*args, **kwargs)

    def message_builder(self) -> MessageBuilder:
        return self._adapter_instance().message_builder()

    def content_builder(self) -> ContentBuilder:
        return self._adapter_instance().content_builder()

    def send_http_get_empty(self, uri: str, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_get_empty(uri, id)

    def send_http_post_empty(self, uri: str, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_post_empty(uri, id)

    def send_http_put_empty(self, uri: str, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_put_empty(uri, id)

    def send_http_delete_empty(self, uri: str, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_delete_empty(uri, id)

    def send_http_get_json(self, uri: str, data: Any, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_get_json(uri, data, id)

    def send_http_post_json(self, uri: str, data: Any, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_post_json(uri, data, id)

    def send_http_put_json(self, uri: str, data: Any, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_put_json(uri, data, id)

    def send_http_delete_json(self, uri: str, data: Any, id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_delete_json(uri, data, id)

    def send_http_get_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_get_form(uri, data, id)

    def send_http_post_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_post_form(uri, data, id)

    def send_http_put_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_put_form(uri, data, id)

    def send_http_delete_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> Awaitable[None]:
        return self._adapter_instance().send_http_delete_form(uri, data, id)


def _default_logger() -> Any:
    # Disabled for the rabbit_hook namespace until the application enables it.
    return logger.bind(service_name=SERVICE_NAME)

"""Publishing client for RabbitMQ: lazy connection, one queue, guaranteed teardown."""
from loguru import logger

from rabbit_hook.app.client import QueueClient
from rabbit_hook.app.composition import create_queue_client
from rabbit_hook.app.config.resolver import BrokerConfig, resolve_config
from rabbit_hook.app.config.settings import ClientSettings
from rabbit_hook.app.domain.messages import HttpMethod, HttpRequestMessage, MessageContent, QueueMessage
from rabbit_hook.app.errors import (
    ClientClosedError,
    ConfigError,
    QueueClientError,
    TransportError,
    UnknownOperationError,
)

# Library convention for loguru: silent until the application opts in.
logger.disable("rabbit_hook")

__all__ = [
    "BrokerConfig",
    "ClientClosedError",
    "ClientSettings",
    "ConfigError",
    "HttpMethod",
    "HttpRequestMessage",
    "MessageContent",
    "QueueClient",
    "QueueClientError",
    "QueueMessage",
    "TransportError",
    "UnknownOperationError",
    "create_queue_client",
    "resolve_config",
]

"""Client-level constants shared across modules."""
from __future__ import annotations

from enum import Enum

CONFIG_ENVIRONMENT = "environment"

CONFIG_HOST = "host"
CONFIG_PORT = "port"
CONFIG_LOGIN = "login"
CONFIG_PASSWORD = "password"
CONFIG_QUEUE = "queue"
CONFIG_VHOST = "vhost"

# Resolution order matters: the first unresolved field is the one reported.
ENV_NAMES: dict[str, str] = {
    CONFIG_HOST: "RABBITMQ_HOST",
    CONFIG_PORT: "RABBITMQ_PORT",
    CONFIG_LOGIN: "RABBITMQ_LOGIN",
    CONFIG_PASSWORD: "RABBITMQ_PASSWORD",
    CONFIG_QUEUE: "RABBITMQ_QUEUE",
    CONFIG_VHOST: "RABBITMQ_VHOST",
}

REQUIRED_FIELDS: tuple[str, ...] = tuple(ENV_NAMES)

DEFAULT_EXCHANGE = ""


class ResolverState(str, Enum):
    FRESH = "FRESH"
    RESOLVED = "RESOLVED"


class ConnectionState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    CONNECTION_ABSENT = "CONNECTION_ABSENT"
    CONNECTION_DISCONNECTED = "CONNECTION_DISCONNECTED"
    CONNECTION_CONNECTED = "CONNECTION_CONNECTED"
    CHANNEL_READY = "CHANNEL_READY"
    CLOSING = "CLOSING"
    CLOSED = "CLOSED"


class TransportBackend:
    RABBITMQ = "rabbitmq"
    INMEMORY = "inmemory"

"""Error taxonomy for the queue client."""
from __future__ import annotations


class QueueClientError(Exception):
    """Base for every error raised by rabbit_hook."""


class ConfigError(QueueClientError):
    """A required broker setting is missing (or unusable) in both config and environment."""

    def __init__(self, field: str, reason: str = "required") -> None:
        self.field = field
        self.reason = reason
        super().__init__(f'Config parameter "{field}" is {reason}')


class TransportError(QueueClientError):
    """Connect, reconnect, channel-open or publish failed at the broker layer."""


class ClientClosedError(TransportError):
    """The client was closed; it does not reopen its connection."""


class UnknownOperationError(QueueClientError):
    """Raised when a delegated operation name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unknown method "{name}"')

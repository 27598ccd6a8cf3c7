"""Domain messages handed to the queue client."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueueMessage(Protocol):
    """Anything the client can publish. The client never inspects the payload."""

    def to_dict(self) -> dict[str, Any]: ...


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class MessageContent:
    """Body plus its content type. An empty body has content_type None."""

    content_type: str | None
    body: str


EMPTY_CONTENT = MessageContent(content_type=None, body="")


@dataclass(frozen=True)
class HttpRequestMessage:
    """An HTTP-shaped intent: the consumer on the other side performs the request."""

    id: str
    method: HttpMethod
    uri: str
    content: MessageContent = EMPTY_CONTENT
    headers: dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    def __post_init__(self) -> None:
        if not isinstance(self.uri, str) or not self.uri:
            raise TypeError("message.uri must be a non-empty str")
        if not isinstance(self.method, HttpMethod):
            raise TypeError("message.method must be an HttpMethod")

    def to_dict(self) -> dict[str, Any]:
        headers = dict(self.headers)
        if self.content.content_type is not None:
            headers.setdefault("Content-Type", self.content.content_type)
        return {
            "id": self.id,
            "type": "http",
            "created_at": self.created_at.isoformat(),
            "request": {
                "method": self.method.value,
                "uri": self.uri,
                "headers": headers,
                "body": self.content.body,
            },
        }

"""Port: convenience operations the client forwards to its adapter."""
from __future__ import annotations

import re
from typing import Any, Mapping, Protocol

from rabbit_hook.app.builders.content_builder import ContentBuilder
from rabbit_hook.app.builders.message_builder import MessageBuilder
from rabbit_hook.app.domain.messages import QueueMessage


class MessageSender(Protocol):
    async def send(self, message: QueueMessage) -> None: ...


class ClientOperations(Protocol):
    def message_builder(self) -> MessageBuilder: ...
    def content_builder(self) -> ContentBuilder: ...

    async def send_http_get_empty(self, uri: str, id: str | None = None) -> None: ...
    async def send_http_post_empty(self, uri: str, id: str | None = None) -> None: ...
    async def send_http_put_empty(self, uri: str, id: str | None = None) -> None: ...
    async def send_http_delete_empty(self, uri: str, id: str | None = None) -> None: ...

    async def send_http_get_json(self, uri: str, data: Any, id: str | None = None) -> None: ...
    async def send_http_post_json(self, uri: str, data: Any, id: str | None = None) -> None: ...
    async def send_http_put_json(self, uri: str, data: Any, id: str | None = None) -> None: ...
    async def send_http_delete_json(self, uri: str, data: Any, id: str | None = None) -> None: ...

    async def send_http_get_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None: ...
    async def send_http_post_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None: ...
    async def send_http_put_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None: ...
    async def send_http_delete_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None: ...


DELEGATED_OPERATIONS: frozenset[str] = frozenset(
    ["message_builder", "content_builder"]
    + [
        f"send_http_{verb}_{kind}"
        for verb in ("get", "post", "put", "delete")
        for kind in ("empty", "json", "form")
    ]
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def operation_name(name: str) -> str:
    """Normalise sendHttpPostJson / send_http_post_json to the registry key."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()

"""Default ClientOperations implementation: builds HTTP-shaped messages and sends them."""
from __future__ import annotations

from typing import Any, Mapping

from rabbit_hook.app.builders.content_builder import ContentBuilder
from rabbit_hook.app.builders.message_builder import MessageBuilder
from rabbit_hook.app.domain.messages import HttpMethod, MessageContent
from rabbit_hook.app.ports.client_operations import MessageSender


class HttpMessageAdapter:
    def __init__(self, sender: MessageSender) -> None:
        self._sender = sender
        self._content = ContentBuilder()

    def message_builder(self) -> MessageBuilder:
        return MessageBuilder()

    def content_builder(self) -> ContentBuilder:
        return ContentBuilder()

    async def _send_http(
        self,
        method: HttpMethod,
        uri: str,
        content: MessageContent,
        message_id: str | None,
    ) -> None:
        message = (
            self.message_builder()
            .with_id(message_id)
            .http(method, uri)
            .content(content)
            .build()
        )
        await self._sender.send(message)

    async def send_http_get_empty(self, uri: str, id: str | None = None) -> None:
        await self._send_http(HttpMethod.GET, uri, self._content.empty(), id)

    async def send_http_post_empty(self, uri: str, id: str | None = None) -> None:
        await self._send_http(HttpMethod.POST, uri, self._content.empty(), id)

    async def send_http_put_empty(self, uri: str, id: str | None = None) -> None:
        await self._send_http(HttpMethod.PUT, uri, self._content.empty(), id)

    async def send_http_delete_empty(self, uri: str, id: str | None = None) -> None:
        await self._send_http(HttpMethod.DELETE, uri, self._content.empty(), id)

    async def send_http_get_json(self, uri: str, data: Any, id: str | None = None) -> None:
        await self._send_http(HttpMethod.GET, uri, self._content.json(data), id)

    async def send_http_post_json(self, uri: str, data: Any, id: str | None = None) -> None:
        await self._send_http(HttpMethod.POST, uri, self._content.json(data), id)

    async def send_http_put_json(self, uri: str, data: Any, id: str | None = None) -> None:
        await self._send_http(HttpMethod.PUT, uri, self._content.json(data), id)

    async def send_http_delete_json(self, uri: str, data: Any, id: str | None = None) -> None:
        await self._send_http(HttpMethod.DELETE, uri, self._content.json(data), id)

    async def send_http_get_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None:
        await self._send_http(HttpMethod.GET, uri, self._content.form(data), id)

    async def send_http_post_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None:
        await self._send_http(HttpMethod.POST, uri, self._content.form(data), id)

    async def send_http_put_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None:
        await self._send_http(HttpMethod.PUT, uri, self._content.form(data), id)

    async def send_http_delete_form(self, uri: str, data: Mapping[str, Any], id: str | None = None) -> None:
        await self._send_http(HttpMethod.DELETE, uri, self._content.form(data), id)

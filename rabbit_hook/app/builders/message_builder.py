"""Fluent builder for HttpRequestMessage."""
from __future__ import annotations

import uuid

from rabbit_hook.app.domain.messages import (
    EMPTY_CONTENT,
    HttpMethod,
    HttpRequestMessage,
    MessageContent,
)


class MessageBuilder:
    """
    builder.http(HttpMethod.POST, "https://example.com/hook").content(c).build()

    Each call returns the builder; build() may be called more than once and
    yields a new id each time unless with_id() pinned one.
    """

    def __init__(self) -> None:
        self._id: str | None = None
        self._method: HttpMethod | None = None
        self._uri: str | None = None
        self._content: MessageContent = EMPTY_CONTENT
        self._headers: dict[str, str] = {}

    def with_id(self, message_id: str | None) -> MessageBuilder:
        self._id = message_id
        return self

    def http(self, method: HttpMethod | str, uri: str) -> MessageBuilder:
        self._method = HttpMethod(method.upper()) if isinstance(method, str) else method
        self._uri = uri
        return self

    def content(self, content: MessageContent) -> MessageBuilder:
        self._content = content
        return self

    def header(self, name: str, value: str) -> MessageBuilder:
        self._headers[name] = value
        return self

    def build(self) -> HttpRequestMessage:
        if self._method is None or not self._uri:
            raise ValueError("http method and uri are required")
        return HttpRequestMessage(
            id=self._id or str(uuid.uuid4()),
            method=self._method,
            uri=self._uri,
            content=self._content,
            headers=dict(self._headers),
        )

"""Unit tests for content/message builders and HttpRequestMessage."""
from __future__ import annotations

import pytest

from rabbit_hook.app.builders.content_builder import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, ContentBuilder
from rabbit_hook.app.builders.message_builder import MessageBuilder
from rabbit_hook.app.domain.messages import EMPTY_CONTENT, HttpMethod, HttpRequestMessage, MessageContent


def test_content_builder_kinds():
    builder = ContentBuilder()
    assert builder.empty() is EMPTY_CONTENT
    assert builder.json({"a": [1, 2]}) == MessageContent(JSON_CONTENT_TYPE, '{"a": [1, 2]}')
    assert builder.form({"q": "a b", "n": 1}) == MessageContent(FORM_CONTENT_TYPE, "q=a+b&n=1")


def test_form_requires_mapping():
    with pytest.raises(TypeError):
        ContentBuilder().form([("a", 1)])


def test_message_builder_builds_http_message():
    message = (
        MessageBuilder()
        .with_id("fixed")
        .http("put", "https://example.com/r/1")
        .content(ContentBuilder().json({"x": 1}))
        .header("X-Trace", "t-1")
        .build()
    )
    assert isinstance(message, HttpRequestMessage)
    assert message.id == "fixed"
    assert message.method is HttpMethod.PUT
    assert message.to_dict()["request"]["headers"] == {"X-Trace": "t-1", "Content-Type": JSON_CONTENT_TYPE}


def test_message_builder_generates_ids():
    builder = MessageBuilder().http(HttpMethod.GET, "https://example.com")
    assert builder.build().id != builder.build().id


def test_message_builder_requires_method_and_uri():
    with pytest.raises(ValueError):
        MessageBuilder().build()


def test_explicit_content_type_header_is_kept():
    message = HttpRequestMessage(
        id="1",
        method=HttpMethod.POST,
        uri="https://example.com",
        content=MessageContent(JSON_CONTENT_TYPE, "{}"),
        headers={"Content-Type": "application/vnd.custom+json"},
    )
    assert message.to_dict()["request"]["headers"]["Content-Type"] == "application/vnd.custom+json"


def test_http_message_rejects_empty_uri():
    with pytest.raises(TypeError):
        HttpRequestMessage(id="1", method=HttpMethod.GET, uri="")

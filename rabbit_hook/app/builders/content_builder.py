"""Builds MessageContent bodies for HTTP-shaped messages."""
from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import urlencode

from rabbit_hook.app.domain.messages import EMPTY_CONTENT, MessageContent

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ContentBuilder:
    def empty(self) -> MessageContent:
        return EMPTY_CONTENT

    def json(self, data: Any) -> MessageContent:
        return MessageContent(content_type=JSON_CONTENT_TYPE, body=json.dumps(data, ensure_ascii=False))

    def form(self, data: Mapping[str, Any]) -> MessageContent:
        if not isinstance(data, Mapping):
            raise TypeError("form data must be a mapping")
        return MessageContent(content_type=FORM_CONTENT_TYPE, body=urlencode(data, doseq=True))

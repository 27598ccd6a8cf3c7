"""JSON encoder for QueueMessage payloads."""
from __future__ import annotations

import json

from rabbit_hook.app.domain.messages import QueueMessage


class JsonMessageEncoder:
    """Implements MessageEncoder. Raises TypeError for values json cannot serialise."""

    def __init__(self, *, ensure_ascii: bool = False) -> None:
        self._ensure_ascii = ensure_ascii

    def encode(self, message: QueueMessage) -> bytes:
        return json.dumps(message.to_dict(), ensure_ascii=self._ensure_ascii).encode()

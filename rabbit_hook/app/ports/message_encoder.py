"""Port: turn a QueueMessage into a wire payload."""
from __future__ import annotations

from typing import Protocol

from rabbit_hook.app.domain.messages import QueueMessage


class MessageEncoder(Protocol):
    def encode(self, message: QueueMessage) -> bytes: ...

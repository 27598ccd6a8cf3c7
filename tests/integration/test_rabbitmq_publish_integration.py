"""
Publish through a real broker and read the message back.
Skipped unless RABBITMQ_HOST (and friends) point at a reachable RabbitMQ.
"""
from __future__ import annotations

import json
import os
import uuid

import pytest

from rabbit_hook.app.client import QueueClient
from rabbit_hook.app.config.resolver import resolve_config

pytestmark = pytest.mark.skipif(
    not os.environ.get("RABBITMQ_HOST"),
    reason="RABBITMQ_HOST not set; no broker available",
)


def _config() -> dict[str, str]:
    return {
        "environment": {
            "RABBITMQ_PORT": "5672",
            "RABBITMQ_LOGIN": "guest",
            "RABBITMQ_PASSWORD": "guest",
            "RABBITMQ_VHOST": "/",
            **os.environ,
            "RABBITMQ_QUEUE": f"rabbit_hook_it_{uuid.uuid4().hex[:8]}",
        }
    }


@pytest.mark.asyncio
async def test_send_http_post_json_reaches_queue():
    import aio_pika

    config = _config()
    resolved = resolve_config(config)
    conn = await aio_pika.connect(
        host=resolved.host,
        port=resolved.port,
        login=resolved.login,
        password=resolved.password,
        virtualhost=resolved.vhost,
    )
    ch = await conn.channel()
    queue = await ch.declare_queue(resolved.queue, auto_delete=True)
    try:
        async with QueueClient(config) as client:
            await client.send_http_post_json("https://example.com/hook", {"ok": True}, id="it-1")

        incoming = await queue.get(fail=False, timeout=5)
        assert incoming is not None
        await incoming.ack()
        payload = json.loads(incoming.body)
        assert payload["id"] == "it-1"
        assert payload["request"]["method"] == "POST"
    finally:
        await ch.close()
        await conn.close()

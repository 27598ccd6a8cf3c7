from __future__ import annotations

import pytest

from rabbit_hook.app.client import QueueClient
from tests.fakes import FULL_CONFIG, FakeConnection, FakeConnectionFactory, RecordingLogger


@pytest.fixture()
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture()
def connection_factory(connection: FakeConnection) -> FakeConnectionFactory:
    return FakeConnectionFactory(connection)


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def client(
    connection_factory: FakeConnectionFactory,
    recording_logger: RecordingLogger,
) -> QueueClient:
    return QueueClient(
        FULL_CONFIG,
        recording_logger,
        environment={},
        connection_factory=connection_factory,
    )

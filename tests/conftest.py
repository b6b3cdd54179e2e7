"""Pytest configuration and fixtures."""

import pytest


class MockTransport:
    """In-memory transport recording everything sent."""

    def __init__(self, ack: bool = True):
        self._callbacks = []
        self.sent_messages = []
        self.connected = False
        self.ack = ack

    max_payload_bytes = 233

    def deliver(self, node_id: str, fragment: str, timeout: float = 30.0) -> bool:
        self.sent_messages.append((node_id, fragment))
        return self.ack

    def on_message(self, callback) -> None:
        self._callbacks.append(callback)

    def connect(self) -> None:
        self.connected = True

    def disconnect(self) -> None:
        self.connected = False

    def simulate_message(self, node_id: str, message: str) -> None:
        """Simulate receiving a message."""
        for callback in self._callbacks:
            callback(node_id, message)


@pytest.fixture
def mock_transport():
    """Transport that acknowledges every message."""
    return MockTransport()


@pytest.fixture
def multibyte_text():
    """Text mixing 1, 2, 3 and 4 byte UTF-8 characters."""
    return "Grüße aus Köln € 世界 🎉🚀 done"


@pytest.fixture
def failing_transport():
    """Transport that never receives an ACK."""
    return MockTransport(ack=False)

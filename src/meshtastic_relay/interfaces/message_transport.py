"""Abstract interface for delivering fragments to the mesh."""

from abc import ABC, abstractmethod
from typing import Callable


class MessageTransport(ABC):
    """Delivers already-formatted fragments and reports incoming text.

    Implementations expose ``max_payload_bytes``, the largest UTF-8 encoded
    fragment they can carry in one packet.
    """

    max_payload_bytes: int

    @abstractmethod
    def deliver(self, node_id: str, fragment: str, timeout: float = 30.0) -> bool:
        """Send one fragment and wait for its ACK, retrying once.

        Args:
            node_id: The destination node ID, or "^all" to broadcast.
            fragment: Text whose UTF-8 encoding fits max_payload_bytes.
            timeout: Seconds to wait for the ACK per attempt.

        Returns:
            True if the fragment was acknowledged.

        Raises:
            ValueError: If the fragment does not fit in one packet.
        """

    @abstractmethod
    def on_message(self, callback: Callable[[str, str], None]) -> None:
        """Register a callback receiving (node_id, text) for incoming messages."""

    @abstractmethod
    def connect(self) -> None:
        """Open the connection to the radio."""

    @abstractmethod
    def disconnect(self) -> None:
        """Close the connection, if open."""

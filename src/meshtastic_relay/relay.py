"""MessageRelay - moves text between local input and the mesh."""

import logging
from typing import Callable

from .interfaces import MessageTransport
from .core import MessageFormatter, remove_empty_newlines
from .config import Config

logger = logging.getLogger(__name__)


def formatter_from_config(config: Config) -> MessageFormatter:
    """Build the MessageFormatter described by config."""
    return MessageFormatter(
        max_message_size=config.max_message_size,
        max_line_length=config.max_line_length,
        clipping_message=config.clipping_message,
        split_max=config.split_max,
        mode=config.mode,
    )


class MessageRelay:
    """Sends text to the mesh in byte-limited fragments.

    Outgoing text is cut by a MessageFormatter; each fragment waits for an
    ACK (with one retry) before the next is sent so ordering is kept.
    Incoming mesh text is tidied and handed to a sink callback.
    """

    def __init__(
        self,
        transport: MessageTransport,
        config: Config | None = None,
        sink: Callable[[str, str], None] | None = None,
    ):
        """
        Initialize the relay.

        Args:
            transport: Transport for sending/receiving messages.
            config: Relay configuration (uses defaults if None).
            sink: Called with (node_id, text) for incoming messages.

        Raises:
            ConfigurationError: If config describes an unknown mode.
        """
        self.transport = transport
        self.config = config or Config()
        self.formatter = formatter_from_config(self.config)
        self.sink = sink

        self.transport.on_message(self._handle_message)

    def start(self) -> None:
        """Start the relay by connecting to transport."""
        logger.info("Starting relay...")
        self.transport.connect()
        logger.info("Relay connected")

    def stop(self) -> None:
        """Stop the relay by disconnecting transport."""
        logger.info("Stopping relay...")
        self.transport.disconnect()
        logger.info("Relay stopped")

    def relay(self, text: str, destination: str | None = None) -> int:
        """
        Format text and send every fragment to destination.

        Args:
            text: The outgoing message.
            destination: Node ID to send to (defaults to config.destination).

        Returns:
            Number of fragments that were not acknowledged.

        Raises:
            ConfigurationError: If text cannot be cut to the configured limits.
        """
        return self.send_fragments(self.formatter.format(text), destination)

    def send_fragments(self, fragments: list[str], destination: str | None = None) -> int:
        """
        Send already-formatted fragments in order, each waiting for its ACK.

        Args:
            fragments: Output of the relay's formatter.
            destination: Node ID to send to (defaults to config.destination).

        Returns:
            Number of fragments that were not acknowledged.
        """
        node_id = destination or self.config.destination
        if not fragments:
            logger.debug(f"[{node_id}] Nothing to send")
            return 0

        total = len(fragments)
        logger.info(f"[{node_id}] Sending {total} fragment(s)")
        failed = 0
        for i, fragment in enumerate(fragments, 1):
            preview = fragment[:50].replace("\n", " ")
            logger.debug(f"[{node_id}] Fragment {i}/{total} ({len(fragment.encode('utf-8'))} bytes): {preview}...")
            if self.transport.deliver(node_id, fragment, timeout=self.config.ack_timeout_seconds):
                logger.debug(f"[{node_id}] Fragment {i}/{total} delivered")
            else:
                failed += 1
                logger.warning(f"[{node_id}] Fragment {i}/{total} failed after retry")
        return failed

    def _handle_message(self, node_id: str, message: str) -> None:
        """
        Handle an incoming message from a node.

        Args:
            node_id: The sender's node ID.
            message: The message text.
        """
        text = remove_empty_newlines(message)
        logger.info(f"[{node_id}] Received: {text!r}")
        if text and self.sink is not None:
            self.sink(node_id, text)

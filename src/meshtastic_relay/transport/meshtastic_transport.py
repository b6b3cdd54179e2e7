"""Meshtastic radio transport for relay fragments."""

import logging
import threading
from typing import Callable
from pubsub import pub

from meshtastic import serial_interface, tcp_interface, ble_interface

from ..interfaces import MessageTransport

logger = logging.getLogger(__name__)

RECEIVE_TOPIC = "meshtastic.receive.text"

# DATA_PAYLOAD_LEN in the Meshtastic protobufs; sendText rejects anything longer.
MAX_PAYLOAD_BYTES = 233

# One retry after the first attempt.
ATTEMPTS = 2


class MeshtasticTransport(MessageTransport):
    """Delivers fragments over a Meshtastic radio (serial, BLE or TCP).

    Every fragment is checked against the packet payload limit before it
    leaves, then sent with wantAck and retried once if no ACK arrives.
    """

    def __init__(
        self,
        connection_type: str = "serial",
        device: str | None = None,
        max_payload_bytes: int = MAX_PAYLOAD_BYTES,
    ):
        """
        Args:
            connection_type: "serial", "ble", or "tcp".
            device: Serial port, BLE address or hostname. None auto-detects
                a serial port.
            max_payload_bytes: Largest encoded fragment accepted by deliver().
        """
        self.connection_type = connection_type
        self.device = device
        self.max_payload_bytes = max_payload_bytes
        self._interface = None
        self._callbacks: list[Callable[[str, str], None]] = []

    def _open_interface(self):
        if self.connection_type == "serial":
            return serial_interface.SerialInterface(devPath=self.device)
        if self.connection_type == "ble":
            return ble_interface.BLEInterface(address=self.device)
        if self.connection_type == "tcp":
            return tcp_interface.TCPInterface(hostname=self.device)
        raise ValueError(f"Unknown connection type: {self.connection_type}")

    def connect(self) -> None:
        """
        Open the radio interface and subscribe to incoming text.

        Raises:
            ValueError: If connection_type is unknown.
        """
        self._interface = self._open_interface()
        pub.subscribe(self._handle_receive, RECEIVE_TOPIC)
        logger.info(f"Connected via {self.connection_type}" + (f" ({self.device})" if self.device else ""))

    def disconnect(self) -> None:
        """Close the radio interface if it is open."""
        if self._interface is None:
            return

        pub.unsubscribe(self._handle_receive, RECEIVE_TOPIC)
        self._interface.close()
        self._interface = None
        logger.info("Disconnected")

    def deliver(self, node_id: str, fragment: str, timeout: float = 30.0) -> bool:
        """
        Send a fragment, waiting for its ACK and retrying once.

        Args:
            node_id: Destination node ID (e.g. "!abcd1234" or "^all").
            fragment: The text to send.
            timeout: Seconds to wait for the ACK per attempt.

        Returns:
            True if an ACK arrived on either attempt.

        Raises:
            ValueError: If the encoded fragment exceeds max_payload_bytes.
            RuntimeError: If not connected.
        """
        size = len(fragment.encode("utf-8"))
        if size > self.max_payload_bytes:
            raise ValueError(
                f"Fragment of {size} bytes exceeds the {self.max_payload_bytes} byte payload limit"
            )
        if self._interface is None:
            raise RuntimeError("Not connected. Call connect() first.")

        for attempt in range(1, ATTEMPTS + 1):
            if attempt > 1:
                logger.info(f"[{node_id}] Retrying fragment ({size} bytes)...")
            if self._send_and_wait_for_ack(node_id, fragment, timeout):
                return True
        return False

    def _send_and_wait_for_ack(self, node_id: str, fragment: str, timeout: float) -> bool:
        ack_event = threading.Event()
        acked = [False]

        # The meshtastic library only routes ACK/NAK packets to callbacks named onAckNak
        def onAckNak(packet):
            error_reason = packet.get("decoded", {}).get("routing", {}).get("errorReason", "NONE")
            if error_reason == "NONE":
                acked[0] = True
                logger.debug(f"[{node_id}] ACK received")
            else:
                logger.warning(f"[{node_id}] NAK received: {error_reason}")
            ack_event.set()

        self._interface.sendText(
            fragment,
            destinationId=node_id,
            wantAck=True,
            onResponse=onAckNak,
        )

        if not ack_event.wait(timeout=timeout):
            logger.warning(f"[{node_id}] ACK timeout after {timeout}s")
        return acked[0]

    def on_message(self, callback: Callable[[str, str], None]) -> None:
        """Register a callback receiving (node_id, text) for incoming text."""
        self._callbacks.append(callback)

    def _handle_receive(self, packet: dict, interface) -> None:
        """Pass a received text packet to every callback (pubsub listener)."""
        from_id = packet.get("fromId")
        text = packet.get("decoded", {}).get("text")

        if not (from_id and text):
            return

        for callback in self._callbacks:
            try:
                callback(from_id, text)
            except Exception:
                # One failing callback must not stop delivery to the others
                logger.exception(f"[{from_id}] Message callback failed")

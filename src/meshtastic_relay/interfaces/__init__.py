"""Abstract interfaces for the Meshtastic Relay."""

from .message_transport import MessageTransport

__all__ = ["MessageTransport"]

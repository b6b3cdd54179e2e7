"""Transport implementations for the Meshtastic Relay."""

from .meshtastic_transport import MAX_PAYLOAD_BYTES, MeshtasticTransport

__all__ = ["MAX_PAYLOAD_BYTES", "MeshtasticTransport"]

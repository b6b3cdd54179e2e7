"""Configuration handling for the Meshtastic Relay."""

from dataclasses import dataclass
from pathlib import Path
import yaml

from .core.markers import DEFAULT_CLIPPING_MESSAGE


@dataclass
class Config:
    """Configuration settings for the relay.

    Attributes:
        max_message_size: Maximum bytes per message sent to the mesh.
        max_line_length: Maximum bytes per line in "lines" mode (0 = unlimited).
        clipping_message: Marker appended to clipped messages.
        split_max: Maximum number of messages one input may be split into.
        mode: How text is cut up: "split", "lines" or "clip".
        destination: Destination node ID, "^all" to broadcast.
        connection_type: Meshtastic connection type (serial, ble, tcp).
        device: Device path, BLE address, or hostname.
        ack_timeout_seconds: How long to wait for an ACK per attempt.
    """

    max_message_size: int = 200
    max_line_length: int = 0
    clipping_message: str = DEFAULT_CLIPPING_MESSAGE
    split_max: int = 3
    mode: str = "split"
    destination: str = "^all"
    connection_type: str = "serial"
    device: str | None = None
    ack_timeout_seconds: float = 30.0


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    relay = data.get("relay", {})
    meshtastic = data.get("meshtastic", {})

    return Config(
        max_message_size=relay.get("max_message_size", Config.max_message_size),
        max_line_length=relay.get("max_line_length", Config.max_line_length),
        clipping_message=relay.get("clipping_message", Config.clipping_message),
        split_max=relay.get("split_max", Config.split_max),
        mode=relay.get("mode", Config.mode),
        destination=relay.get("destination", Config.destination),
        connection_type=meshtastic.get("connection_type", Config.connection_type),
        device=meshtastic.get("device", Config.device),
        ack_timeout_seconds=meshtastic.get("ack_timeout_seconds", Config.ack_timeout_seconds),
    )

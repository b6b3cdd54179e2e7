"""Tests for the configuration module."""

import pytest
import tempfile
from meshtastic_relay.config import Config, load_config
from meshtastic_relay.core import DEFAULT_CLIPPING_MESSAGE


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.max_message_size == 200
        assert config.max_line_length == 0
        assert config.clipping_message == " <clipped message>"
        assert config.split_max == 3
        assert config.mode == "split"
        assert config.destination == "^all"
        assert config.connection_type == "serial"
        assert config.device is None
        assert config.ack_timeout_seconds == 30.0

    def test_default_clipping_message_shared_with_core(self):
        """The default marker is the one the core falls back to."""
        assert Config().clipping_message == DEFAULT_CLIPPING_MESSAGE

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            max_message_size=120,
            mode="lines",
            connection_type="ble",
            device="AA:BB:CC:DD:EE:FF",
        )
        assert config.max_message_size == 120
        assert config.mode == "lines"
        assert config.connection_type == "ble"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
relay:
  max_message_size: 150
  max_line_length: 80
  clipping_message: " [...]"
  split_max: 5
  mode: lines
  destination: "!abcd1234"

meshtastic:
  connection_type: tcp
  device: 192.168.1.100
  ack_timeout_seconds: 10
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.max_message_size == 150
            assert config.max_line_length == 80
            assert config.clipping_message == " [...]"
            assert config.split_max == 5
            assert config.mode == "lines"
            assert config.destination == "!abcd1234"
            assert config.connection_type == "tcp"
            assert config.device == "192.168.1.100"
            assert config.ack_timeout_seconds == 10

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
relay:
  max_message_size: 100
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.max_message_size == 100
            assert config.split_max == 3
            assert config.connection_type == "serial"

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config == Config()

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

"""Tests for MessageRelay."""

import pytest
from unittest.mock import Mock
from meshtastic_relay.config import Config
from meshtastic_relay.core import ConfigurationError
from meshtastic_relay.relay import MessageRelay, formatter_from_config


class TestMessageRelay:
    """Tests for MessageRelay."""

    @pytest.fixture
    def config(self):
        return Config(max_message_size=10, clipping_message="_", split_max=3)

    def test_formatter_from_config(self, config):
        """The formatter mirrors the configured limits."""
        formatter = formatter_from_config(config)
        assert formatter.max_message_size == 10
        assert formatter.clipping_message == "_"
        assert formatter.split_max == 3
        assert formatter.mode == "split"

    def test_unknown_mode_rejected(self, mock_transport):
        with pytest.raises(ConfigurationError):
            MessageRelay(mock_transport, Config(mode="bogus"))

    def test_start_and_stop(self, mock_transport, config):
        """start/stop connect and disconnect the transport."""
        relay = MessageRelay(mock_transport, config)
        relay.start()
        assert mock_transport.connected is True
        relay.stop()
        assert mock_transport.connected is False

    def test_short_message_sent_once(self, mock_transport, config):
        relay = MessageRelay(mock_transport, config)
        assert relay.relay("hi") == 0
        assert mock_transport.sent_messages == [("^all", "hi")]

    def test_long_message_split_in_order(self, mock_transport, config):
        """Long text is sent as ordered fragments within the size limit."""
        relay = MessageRelay(mock_transport, config)
        relay.relay("abcdefghijklmnopqrstuvwxyz0123456789")
        sent = [message for _, message in mock_transport.sent_messages]
        assert sent == ["abcdefghij", "klmnopqrst", "uvwxyz012_"]

    def test_explicit_destination(self, mock_transport, config):
        relay = MessageRelay(mock_transport, config)
        relay.relay("hi", destination="!abcd1234")
        assert mock_transport.sent_messages == [("!abcd1234", "hi")]

    def test_blank_text_sends_nothing(self, mock_transport, config):
        relay = MessageRelay(mock_transport, config)
        assert relay.relay("  \n ") == 0
        assert mock_transport.sent_messages == []

    def test_failed_deliveries_counted(self, failing_transport, config):
        """Unacknowledged fragments are reported."""
        relay = MessageRelay(failing_transport, config)
        assert relay.relay("abcdefghijkl") == 2

    def test_incoming_message_goes_to_sink(self, mock_transport, config):
        """Incoming text is tidied and passed to the sink."""
        sink = Mock()
        MessageRelay(mock_transport, config, sink=sink)
        mock_transport.simulate_message("!abcd1234", "\nhello\n\n\nmesh\n")
        sink.assert_called_once_with("!abcd1234", "hello\nmesh")

    def test_incoming_blank_message_ignored(self, mock_transport, config):
        sink = Mock()
        MessageRelay(mock_transport, config, sink=sink)
        mock_transport.simulate_message("!abcd1234", "\n\n")
        sink.assert_not_called()

    def test_incoming_without_sink(self, mock_transport, config):
        """Incoming messages are only logged when no sink is set."""
        MessageRelay(mock_transport, config)
        mock_transport.simulate_message("!abcd1234", "hello")

    def test_send_fragments_sends_as_given(self, mock_transport, config):
        """Pre-formatted fragments are delivered in order without re-cutting."""
        relay = MessageRelay(mock_transport, config)
        assert relay.send_fragments(["abcd", "efgh"], destination="!abcd1234") == 0
        assert mock_transport.sent_messages == [("!abcd1234", "abcd"), ("!abcd1234", "efgh")]

    def test_send_fragments_empty(self, mock_transport, config):
        relay = MessageRelay(mock_transport, config)
        assert relay.send_fragments([]) == 0
        assert mock_transport.sent_messages == []

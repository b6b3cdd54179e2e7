"""Turn outgoing text into fragments that fit a destination's limits."""

from dataclasses import dataclass

from .clipper import clip_message
from .errors import ConfigurationError
from .line_splitter import get_sub_lines
from .markers import resolve_clipping_message
from .segmenter import clip_or_split_message

MODES = ("split", "lines", "clip")


@dataclass
class MessageFormatter:
    """Formats messages for a single destination.

    Attributes:
        max_message_size: Maximum bytes per fragment.
        max_line_length: Maximum bytes per line in "lines" mode (0 = unlimited).
        clipping_message: Marker for clipped content (empty = default).
        split_max: Maximum fragments per message (per line in "lines" mode).
        mode: "split" to segment the whole text, "lines" to send each line
            separately, "clip" to send a single clipped fragment.
    """

    max_message_size: int = 200
    max_line_length: int = 0
    clipping_message: str = ""
    split_max: int = 1
    mode: str = "split"

    def __post_init__(self):
        if self.mode not in MODES:
            raise ConfigurationError(f"Unknown mode: {self.mode!r} (expected one of {', '.join(MODES)})")
        self.clipping_message = resolve_clipping_message(self.clipping_message)

    def format(self, text: str) -> list[str]:
        """
        Split text into fragments ready to send.

        Args:
            text: The outgoing message.

        Returns:
            Fragments in order; empty if text has no content.
        """
        text = text.strip()
        if not text:
            return []

        if self.mode == "clip":
            return [clip_message(text, self.max_message_size, self.clipping_message)]

        if self.mode == "split":
            return clip_or_split_message(
                text, self.max_message_size, self.clipping_message, self.split_max
            )

        fragments = []
        for line in get_sub_lines(text, self.max_line_length, self.clipping_message):
            fragments.extend(
                clip_or_split_message(
                    line, self.max_message_size, self.clipping_message, self.split_max
                )
            )
        return fragments

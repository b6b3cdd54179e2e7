"""Core text segmentation for the Meshtastic Relay."""

from .clipper import clip_message
from .errors import ConfigurationError
from .formatter import MODES, MessageFormatter
from .line_splitter import get_sub_lines
from .markers import DEFAULT_CLIPPING_MESSAGE, resolve_clipping_message
from .newlines import remove_empty_newlines
from .rune_boundary import back_up_to_boundary
from .segmenter import clip_or_split_message

__all__ = [
    "back_up_to_boundary",
    "clip_message",
    "clip_or_split_message",
    "get_sub_lines",
    "remove_empty_newlines",
    "resolve_clipping_message",
    "ConfigurationError",
    "DEFAULT_CLIPPING_MESSAGE",
    "MODES",
    "MessageFormatter",
]

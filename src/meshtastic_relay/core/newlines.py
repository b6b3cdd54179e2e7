"""Blank line collapsing for incoming text."""

import re

_EMPTY_LINE_MATCHER = re.compile("\n+")


def remove_empty_newlines(message: str) -> str:
    """Collapse consecutive newlines into one and trim newlines at both ends."""
    return _EMPTY_LINE_MATCHER.sub("\n", message.strip("\n"))

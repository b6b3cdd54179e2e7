"""Clipping message defaults."""

DEFAULT_CLIPPING_MESSAGE = " <clipped message>"


def resolve_clipping_message(clipping_message: str | None) -> str:
    """Return the clipping message to use, falling back to the default if empty."""
    return clipping_message or DEFAULT_CLIPPING_MESSAGE

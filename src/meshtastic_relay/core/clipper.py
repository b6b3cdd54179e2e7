"""Clip a message to a byte budget without breaking characters."""

from .errors import ConfigurationError
from .markers import resolve_clipping_message
from .rune_boundary import back_up_to_boundary


def clip_encoded(encoded: bytes, length: int, marker: bytes) -> bytes:
    """
    Clip already-encoded text to length bytes, appending marker when clipped.

    Args:
        encoded: UTF-8 encoded text.
        length: Maximum byte length of the result.
        marker: Encoded clipping message, already resolved.

    Returns:
        The encoded text unchanged if it fits, otherwise a clipped copy
        ending in marker.

    Raises:
        ConfigurationError: If clipping is needed but length does not
            leave room for anything besides the marker.
    """
    if len(encoded) <= length:
        return encoded

    if length <= len(marker):
        raise ConfigurationError(
            f"Length {length} must be larger than the clipping message ({len(marker)} bytes)"
        )

    cut = back_up_to_boundary(encoded, length - len(marker))
    return encoded[:cut] + marker


def clip_message(text: str, length: int, clipping_message: str = "") -> str:
    """
    Clip text to at most length bytes (UTF-8) and mark the cut.

    Text that already fits is returned unchanged.

    Args:
        text: The message to clip.
        length: Maximum byte length of the result.
        clipping_message: Appended when text is clipped. Empty selects the
            default " <clipped message>".

    Returns:
        The possibly clipped message.
    """
    marker = resolve_clipping_message(clipping_message).encode("utf-8")
    return clip_encoded(text.encode("utf-8"), length, marker).decode("utf-8")

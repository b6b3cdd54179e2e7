"""Split a message into a bounded number of byte-limited parts."""

from .clipper import clip_encoded
from .errors import ConfigurationError
from .markers import resolve_clipping_message
from .rune_boundary import back_up_to_boundary


def clip_or_split_message(
    text: str,
    length: int,
    clipping_message: str = "",
    split_max: int = 1,
) -> list[str]:
    """
    Split text into at most split_max parts of at most length bytes each.

    Parts are cut on character boundaries. If the text does not fit in
    split_max parts, the last part is clipped and carries the clipping
    message.

    Args:
        text: The message to split.
        length: Maximum byte length of each part.
        clipping_message: Appended to the last part when it is clipped.
            Empty selects the default.
        split_max: Maximum number of parts.

    Returns:
        Between 1 and split_max parts, in order. Empty text yields a single
        empty part, [""]; callers that must not send blank messages (such
        as MessageFormatter) drop empty text before calling.

    Raises:
        ConfigurationError: If split_max is below 1 or length is too small
            to hold a character (or the clipping message).
    """
    if split_max < 1:
        raise ConfigurationError(f"split_max must be at least 1, got {split_max}")

    marker = resolve_clipping_message(clipping_message).encode("utf-8")
    remaining = text.encode("utf-8")
    parts: list[bytes] = []

    # parts + remaining always equals the original encoding.
    while len(parts) < split_max - 1 and len(remaining) > length:
        cut = back_up_to_boundary(remaining, length)
        if cut <= 0:
            raise ConfigurationError(f"Length {length} is too small to hold a single character")
        parts.append(remaining[:cut])
        remaining = remaining[cut:]

    parts.append(clip_encoded(remaining, length, marker))
    return [part.decode("utf-8") for part in parts]

"""Split multi-line messages into byte-limited lines."""

from .errors import ConfigurationError
from .markers import resolve_clipping_message
from .rune_boundary import back_up_to_boundary


def _split_long_line(line: str, max_line_length: int, marker: bytes) -> list[str]:
    """
    Cut a single line into pieces of at most max_line_length bytes.

    Every piece except the last ends with marker. Cuts may land inside
    words but never inside a character.
    """
    encoded = line.encode("utf-8")
    suffix = marker.decode("utf-8")
    limit = max_line_length - len(marker)
    pieces = []

    split_start = 0
    previous_start = 0
    offset = 0
    for char in line:
        if offset - split_start > limit:
            if not 0 < previous_start - split_start <= limit:
                raise ConfigurationError(
                    f"Line length {max_line_length} cannot hold a character and the clipping message"
                )
            pieces.append(encoded[split_start:previous_start].decode("utf-8") + suffix)
            split_start = previous_start
        previous_start = offset
        offset += len(char.encode("utf-8"))

    # The tail only overflows when its last character is wider than the marker.
    while len(encoded) - split_start > max_line_length:
        cut = back_up_to_boundary(encoded, split_start + limit)
        if cut <= split_start:
            raise ConfigurationError(
                f"Line length {max_line_length} cannot hold a character and the clipping message"
            )
        pieces.append(encoded[split_start:cut].decode("utf-8") + suffix)
        split_start = cut

    pieces.append(encoded[split_start:].decode("utf-8"))
    return pieces


def get_sub_lines(message: str, max_line_length: int, clipping_message: str = "") -> list[str]:
    """
    Split a message into its non-empty lines.

    If max_line_length is non-zero, lines longer than max_line_length bytes
    are cut into several pieces, each but the last ending with the clipping
    message.

    Args:
        message: The text to split.
        max_line_length: Maximum byte length per line, or 0 for no limit.
        clipping_message: Marks pieces that continue on the next line.
            Empty selects the default.

    Returns:
        Lines in their original order.

    Raises:
        ConfigurationError: If max_line_length is too small to hold a
            character plus the clipping message.
    """
    marker = resolve_clipping_message(clipping_message).encode("utf-8")

    lines = []
    for line in message.strip().split("\n"):
        # Skip blank lines so no empty messages get sent.
        if not line.strip():
            continue

        if max_line_length == 0 or len(line.encode("utf-8")) <= max_line_length:
            lines.append(line)
            continue

        lines.extend(_split_long_line(line, max_line_length, marker))
    return lines

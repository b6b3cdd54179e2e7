"""Locate UTF-8 character boundaries inside a byte buffer."""

import logging

logger = logging.getLogger(__name__)

# A valid UTF-8 sequence is at most 4 bytes long.
MAX_CHAR_WIDTH = 4


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def _ends_on_complete_char(buffer: bytes, end: int) -> bool:
    """Check whether buffer[:end] ends with a complete UTF-8 character."""
    if end <= 0:
        return True

    start = end - 1
    floor = max(end - MAX_CHAR_WIDTH, 0)
    while start > floor and _is_continuation(buffer[start]):
        start -= 1

    try:
        buffer[start:end].decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def back_up_to_boundary(buffer: bytes, offset: int) -> int:
    """
    Find the nearest character boundary at or before offset.

    Only bytes before offset are inspected. At most three bytes are given up;
    if no boundary is found within that window the buffer is not valid UTF-8
    and offset - 3 is returned as a best-effort floor.

    Args:
        buffer: UTF-8 encoded text.
        offset: Byte offset to back up from.

    Returns:
        The largest index <= offset such that buffer[:index] holds only
        complete characters.
    """
    offset = min(offset, len(buffer))
    for candidate in range(offset, offset - MAX_CHAR_WIDTH, -1):
        if candidate <= 0:
            return 0
        if _ends_on_complete_char(buffer, candidate):
            return candidate

    logger.debug(f"No character boundary near offset {offset}, input is not valid UTF-8")
    return offset - (MAX_CHAR_WIDTH - 1)

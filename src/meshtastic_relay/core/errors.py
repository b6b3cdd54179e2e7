"""Errors raised by the segmentation core."""


class ConfigurationError(ValueError):
    """Raised when length limits cannot be satisfied.

    Typical causes are a budget that is not larger than the clipping
    message, or a budget too narrow to hold a single character.
    """

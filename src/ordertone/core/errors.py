"""Common ordertone-specific exceptions."""

class OrderToneValueError(ValueError):
    """Raised when ordertone detects invalid user-provided data."""


__all__ = ["OrderToneValueError"]

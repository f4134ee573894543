"""Core utilities shared across ordertone modules."""

from .errors import OrderToneValueError

__all__ = ["OrderToneValueError"]

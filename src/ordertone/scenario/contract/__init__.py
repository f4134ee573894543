"""Order contract models (Pydantic schemas, validators)."""

from .models import Order

__all__ = ["Order"]

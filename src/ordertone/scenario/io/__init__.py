"""Order file I/O."""

from .loaders import ORDER_COLUMNS, orders_to_frame, read_csv, read_orders, write_orders

__all__ = ["ORDER_COLUMNS", "orders_to_frame", "read_csv", "read_orders", "write_orders"]

"""Command-line interface for ordertone."""

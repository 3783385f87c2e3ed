"""Diagnostics package.

Light-weight self-checks and listings, runnable through the CLI.
"""

__all__ = ["pretty_month", "round_trip"]

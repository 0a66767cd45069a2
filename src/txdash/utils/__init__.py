"""Utility functions for txdash."""

from txdash.utils.amount_format import format_amount, parse_amount

__all__ = ["format_amount", "parse_amount"]

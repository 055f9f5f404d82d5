"""Utility functions for ecodamage."""

from ecodamage.utils.amount_parser import parse_amount, parse_non_negative_amount

__all__ = ["parse_amount", "parse_non_negative_amount"]

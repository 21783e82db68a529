"""Normalizers for converting displayed table text to canonical values."""

from .market_cap import clean_text, parse_market_cap, parse_number

__all__ = ["clean_text", "parse_market_cap", "parse_number"]

"""Parsing of CCI listing wikitext."""

from .listing_parser import parse_listing, parse_diff_token, parse_byte_delta, entry_spans, diff_tokens

__all__ = [
    "parse_listing",
    "parse_diff_token",
    "parse_byte_delta",
    "entry_spans",
    "diff_tokens"
]

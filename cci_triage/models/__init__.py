"""Data model for parsed listings and per-diff decisions."""

from .listing import DiffReference, PageEntry, Listing, DiffDecision, MINOR, REVIEW, UNDETERMINED

__all__ = [
    "DiffReference",
    "PageEntry",
    "Listing",
    "DiffDecision",
    "MINOR",
    "REVIEW",
    "UNDETERMINED"
]

"""Sources for listing text and diff content."""

from .base import DiffSource, ListingSource, StaticDiffSource, FileListing, StringListing
from .mediawiki import MediaWikiClient, WikiPageListing, extract_added_text

__all__ = [
    "DiffSource",
    "ListingSource",
    "StaticDiffSource",
    "FileListing",
    "StringListing",
    "MediaWikiClient",
    "WikiPageListing",
    "extract_added_text"
]

"""Collaborator interfaces for listing text and diff content, with offline implementations."""

from typing import Dict

import orjson

from ..errors import FetchError


class DiffSource:
    """Resolves the added text of a diff by revision id."""

    def fetch_added_text(self, rev_id: int) -> str:
        """Return the text added by the edit.

        Raises:
            FetchError: If the text cannot be resolved
        """
        raise NotImplementedError


class ListingSource:
    """Supplies raw CCI listing wikitext."""

    def read_listing(self) -> str:
        raise NotImplementedError


class StaticDiffSource(DiffSource):
    """Diff texts held in memory, keyed by revision id."""

    def __init__(self, texts: Dict[int, str]):
        self.texts = {int(k): v for k, v in texts.items()}

    def fetch_added_text(self, rev_id: int) -> str:
        if rev_id not in self.texts:
            raise FetchError(rev_id, "not found")
        return self.texts[rev_id]

    @classmethod
    def from_jsonl(cls, path: str) -> "StaticDiffSource":
        """Load {"rev_id": ..., "text": ...} records from a JSONL file."""
        texts = {}
        with open(path, "rb") as f:
            for line in f:
                if line.strip():
                    rec = orjson.loads(line)
                    texts[int(rec["rev_id"])] = rec.get("text") or ""
        return cls(texts)


class FileListing(ListingSource):
    """Listing wikitext read from a local file."""

    def __init__(self, path: str):
        self.path = path

    def read_listing(self) -> str:
        with open(self.path, encoding="utf-8") as f:
            return f.read()


class StringListing(ListingSource):
    """Listing wikitext given directly."""

    def __init__(self, text: str):
        self.text = text

    def read_listing(self) -> str:
        return self.text

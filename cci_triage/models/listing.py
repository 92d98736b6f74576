"""Listing data structures produced by the parser and consumed by the analyzer."""

from dataclasses import dataclass, asdict
from typing import Iterator, Optional, Tuple


@dataclass(frozen=True)
class DiffReference:
    """One historical edit listed on a CCI page.

    Attributes:
        rev_id: Revision id of the edit
        token: Raw diff-link markup, echoed back unchanged in reports
        page_title: Title of the page the edit was made to
        byte_delta: Signed size change from the link label, if present
    """
    rev_id: int
    token: str
    page_title: str
    byte_delta: Optional[int] = None


@dataclass(frozen=True)
class PageEntry:
    """A listed page and its diffs in order of appearance."""
    title: str
    diffs: Tuple[DiffReference, ...]
    edit_count: Optional[int] = None
    is_new_page: bool = False


@dataclass(frozen=True)
class Listing:
    """Ordered page entries parsed from one CCI listing."""
    pages: Tuple[PageEntry, ...] = ()

    def diffs(self) -> Iterator[DiffReference]:
        for page in self.pages:
            yield from page.diffs

    def __len__(self) -> int:
        return len(self.pages)


# Decision statuses
MINOR = "minor"
REVIEW = "review"
UNDETERMINED = "undetermined"


@dataclass
class DiffDecision:
    """Outcome of classifying one diff during an analysis run."""
    rev_id: int
    page_title: str
    token: str
    status: str
    byte_delta: Optional[int] = None
    filtered_text: str = ""
    error: Optional[str] = None

    @property
    def is_minor(self) -> bool:
        return self.status == MINOR

    def to_record(self) -> dict:
        return asdict(self)

"""Classification orchestrator - apply a filter and a culling function to every listed diff."""

from typing import Callable, Dict, List, Optional

from .errors import FetchError
from .models import DiffDecision, Listing, MINOR, REVIEW, UNDETERMINED
from .parsing import parse_listing
from .sources import DiffSource, ListingSource
from .text_processing import identity


class CCIAnalyzer:
    """Finds the diffs of a CCI listing that do not need manual review.

    Usage:
        analyzer = CCIAnalyzer(MediaWikiClient("en.wikipedia.org"))
        analyzer.set_filtering_function(standard_filter)
        analyzer.set_culling_function(partial(word_count_cull, threshold=9))
        analyzer.load_string(listing_text)
        analyzer.analyze_diffs()
        minor = analyzer.get_minor_edits()

    The filter and culling function can be swapped between runs; each
    analyze_diffs() call recomputes the result from the loaded listing.
    """

    def __init__(self, diff_source: DiffSource):
        self.diff_source = diff_source
        self.filtering_function: Callable[[str], str] = identity
        self.culling_function: Optional[Callable[[str], bool]] = None
        self.listing: Optional[Listing] = None
        self.diff_texts: Dict[int, str] = {}
        self.failed_diffs: Dict[int, str] = {}
        self.decisions: List[DiffDecision] = []
        self._minor_edits: List[str] = []

    def set_filtering_function(self, func: Optional[Callable[[str], str]]):
        """Install the filtering function; None restores the identity filter."""
        self.filtering_function = func or identity

    def set_culling_function(self, func: Optional[Callable[[str], bool]]):
        """Install the culling function. Without one, nothing is culled."""
        self.culling_function = func

    def load(self, listing_source: ListingSource) -> Listing:
        """Read a listing from a source and load it.

        Raises:
            ParseError: If the listing has no recognizable page entries
        """
        return self.load_string(listing_source.read_listing())

    def load_string(self, text: str) -> Listing:
        """Parse listing wikitext and resolve the added text of every diff.

        Diffs whose text cannot be fetched are recorded in failed_diffs and
        are never reported as minor.

        Args:
            text: Raw listing wikitext

        Returns:
            The parsed listing

        Raises:
            ParseError: If the listing has no recognizable page entries
        """
        listing = parse_listing(text)
        texts: Dict[int, str] = {}
        failed: Dict[int, str] = {}
        for ref in listing.diffs():
            try:
                texts[ref.rev_id] = self.diff_source.fetch_added_text(ref.rev_id)
            except FetchError as e:
                failed[ref.rev_id] = e.message
                print(f"[load] Could not fetch diff {ref.rev_id} ({ref.page_title}): {e.message}")

        self.listing = listing
        self.diff_texts = texts
        self.failed_diffs = failed
        self.decisions = []
        self._minor_edits = []
        num_diffs = sum(len(p.diffs) for p in listing.pages)
        print(f"[load] Loaded {len(listing):,} pages, {num_diffs:,} diffs ({len(failed):,} failed).")
        return listing

    def analyze_diffs(self) -> List[str]:
        """Classify every loaded diff with the active filter and culling function.

        Returns:
            Diff tokens judged minor, in listing order
        """
        decisions = []
        minor = []
        if self.listing is not None:
            for ref in self.listing.diffs():
                if ref.rev_id not in self.diff_texts:
                    decisions.append(DiffDecision(
                        rev_id=ref.rev_id,
                        page_title=ref.page_title,
                        token=ref.token,
                        status=UNDETERMINED,
                        byte_delta=ref.byte_delta,
                        error=self.failed_diffs.get(ref.rev_id),
                    ))
                    continue
                filtered = self.filtering_function(self.diff_texts[ref.rev_id])
                is_minor = self.culling_function is not None and bool(self.culling_function(filtered))
                decisions.append(DiffDecision(
                    rev_id=ref.rev_id,
                    page_title=ref.page_title,
                    token=ref.token,
                    status=MINOR if is_minor else REVIEW,
                    byte_delta=ref.byte_delta,
                    filtered_text=filtered,
                ))
                if is_minor:
                    minor.append(ref.token)

        self.decisions = decisions
        self._minor_edits = minor
        return list(minor)

    def get_minor_edits(self) -> List[str]:
        """Return the diff tokens judged minor by the last analysis."""
        return list(self._minor_edits)

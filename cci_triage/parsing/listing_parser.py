"""Listing parser - turn CCI listing wikitext into pages and diff references.

A listing entry looks like:

    *'''N''' [[:Page title]] (2 edits): [[Special:Diff/476809081|(+460)]][[Special:Diff/446793589|(+205)]]

Entries are found as a token stream, so entries run together on one line
still parse. An entry ends at the next heading or at the end of its line,
whichever comes first. Entries without any diff token are skipped.
"""

import re
from typing import List, Optional, Set, Tuple

from ..errors import MalformedDiffLine, ParseError
from ..models import DiffReference, Listing, PageEntry

_heading_re = re.compile(
    r"(?:[*#]+[ \t]*)?(?P<new>'''N'''[ \t]*)?\[\[:(?P<title>[^\[\]|]+)(?:\|[^\[\]]*)?\]\][ \t]*\((?P<count>\d+)[ \t]+edits?\)[ \t]*:?",
    re.I)
_diff_re = re.compile(r"\[\[Special:Diff/(?P<rev>\d+)(?:\|(?P<label>[^\[\]]*))?\]\]", re.I)
_delta_re = re.compile(r"\(\s*([+\-−]?)\s*(\d[\d,]*)\s*\)")


def parse_byte_delta(label: Optional[str]) -> Optional[int]:
    """Read a signed byte delta such as "(+460)" or "(−1,024)" from a link label.

    Returns:
        The delta, or None if the label has none
    """
    if not label:
        return None
    m = _delta_re.search(label)
    if not m:
        return None
    value = int(m.group(2).replace(",", ""))
    return -value if m.group(1) in ("-", "−") else value


def parse_diff_token(token: str, page_title: str) -> DiffReference:
    """Build a DiffReference from a single [[Special:Diff/...]] token.

    Raises:
        MalformedDiffLine: If the token is not a diff link
    """
    m = _diff_re.fullmatch(token.strip())
    if not m:
        raise MalformedDiffLine(f"Not a diff token: {token!r}")
    return DiffReference(
        rev_id=int(m.group("rev")),
        token=m.group(0),
        page_title=page_title,
        byte_delta=parse_byte_delta(m.group("label")),
    )


def _parse_entry(heading: re.Match, body: str, seen: Set[int]) -> PageEntry:
    title = heading.group("title").strip()
    diffs = []
    for m in _diff_re.finditer(body):
        ref = parse_diff_token(m.group(0), title)
        if ref.rev_id in seen:
            continue
        seen.add(ref.rev_id)
        diffs.append(ref)
    if not diffs:
        raise MalformedDiffLine(f"No diffs listed for [[:{title}]]")
    return PageEntry(
        title=title,
        diffs=tuple(diffs),
        edit_count=int(heading.group("count")),
        is_new_page=bool(heading.group("new")),
    )


def entry_spans(text: str) -> List[Tuple[re.Match, int]]:
    """Locate listing entries.

    Args:
        text: Raw listing wikitext

    Returns:
        (heading match, end of entry) pairs in order of appearance. The entry
        runs from the heading start, list marker included, to its end.
    """
    headings = list(_heading_re.finditer(text))
    spans = []
    for i, heading in enumerate(headings):
        end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
        line_end = text.find("\n", heading.end(), end)
        spans.append((heading, end if line_end == -1 else line_end))
    return spans


def diff_tokens(text: str) -> List[str]:
    """Return the raw diff-link tokens in text, in order."""
    return [m.group(0) for m in _diff_re.finditer(text)]


def parse_listing(text: str) -> Listing:
    """Parse CCI listing wikitext.

    Args:
        text: Raw listing wikitext

    Returns:
        Listing with pages and diffs in order of appearance

    Raises:
        ParseError: If no page entry with at least one diff is found
    """
    text = text or ""
    pages = []
    seen: Set[int] = set()
    for heading, end in entry_spans(text):
        try:
            pages.append(_parse_entry(heading, text[heading.end():end], seen))
        except MalformedDiffLine:
            continue
    if not pages:
        raise ParseError("No recognizable page entries in listing")
    return Listing(pages=tuple(pages))

"""Filtering functions that strip structural wikitext noise from diff text."""

import re
from typing import Callable, Optional, Tuple

FilterFunction = Callable[[str], str]

# Compiled regex patterns for performance
_ref_open_re = re.compile(r"<ref(?=[\s>/])", re.I)
_ref_close_re = re.compile(r"</ref\s*>", re.I)
_external_link_re = re.compile(r"\[https?://[^\s\[\]<>]+(?:[ \t][^\[\]\n]*)?\]", re.I)
_comment_re = re.compile(r"<!--.*?-->", re.S)


def _to_fixed_point(func: FilterFunction, text: str) -> str:
    """Apply func until the text stops changing.

    A removal can join two fragments into a new removable construct, so a
    single pass is not idempotent on its own.
    """
    while True:
        result = func(text)
        if result == text:
            return result
        text = result


def _scan_opening_tag(text: str, start: int) -> Optional[Tuple[int, bool]]:
    """Scan the <ref ...> tag starting at start.

    Args:
        text: Text being scanned
        start: Index of the '<' of the tag

    Returns:
        Tuple of (index just past '>', is_self_closing), or None if the tag
        never closes
    """
    quote = None
    i = start + len("<ref")
    while i < len(text):
        c = text[i]
        if quote:
            if c == quote:
                quote = None
        elif c in "\"'" and text[start:i].rstrip().endswith("="):
            quote = c
        elif c == ">":
            return i + 1, text[start:i].rstrip().endswith("/")
        i += 1
    return None


def _remove_references_once(text: str) -> str:
    out = []
    copied = 0
    match = _ref_open_re.search(text)
    while match:
        start = match.start()
        tag = _scan_opening_tag(text, start)
        if tag is None:
            match = _ref_open_re.search(text, start + 1)
            continue
        end, self_closing = tag
        if self_closing:
            out.append(text[copied:start])
            copied = end
            match = _ref_open_re.search(text, end)
            continue
        close = _ref_close_re.search(text, end)
        following = _ref_open_re.search(text, end)
        if close is None or (following and following.start() < close.start()):
            # Unbalanced, leave the opening tag where it is
            match = following
            continue
        out.append(text[copied:start])
        copied = close.end()
        match = _ref_open_re.search(text, copied)
    out.append(text[copied:])
    return "".join(out)


def remove_references(text: str) -> str:
    """Remove <ref>...</ref> spans and self-closing <ref .../> tags.

    Opening tags without a matching close are left untouched. Text around a
    removed span is not altered.

    Args:
        text: Raw diff text

    Returns:
        Text with reference tags removed
    """
    return _to_fixed_point(_remove_references_once, text)


def remove_external_links(text: str) -> str:
    """Remove bracketed external links, including their labels.

    Args:
        text: Raw diff text

    Returns:
        Text with [http://... label] constructs removed
    """
    return _to_fixed_point(lambda t: _external_link_re.sub("", t), text)


def remove_comments(text: str) -> str:
    """Remove <!-- ... --> comments, including multi-line ones.

    Args:
        text: Raw diff text

    Returns:
        Text with HTML comments removed
    """
    return _to_fixed_point(lambda t: _comment_re.sub("", t), text)


def identity(text: str) -> str:
    """Default filtering function."""
    return text


def compose_filters(*funcs: FilterFunction) -> FilterFunction:
    """Chain filtering functions, applied left to right.

    Args:
        *funcs: Filtering functions in application order

    Returns:
        A single filtering function
    """
    if not funcs:
        return identity

    def composed(text: str) -> str:
        for func in funcs:
            text = func(text)
        return text

    composed.filters = funcs
    return composed


FILTERS = {
    "comments": remove_comments,
    "references": remove_references,
    "links": remove_external_links,
}

standard_filter = compose_filters(remove_comments, remove_references, remove_external_links)


def filter_by_names(names) -> FilterFunction:
    """Build a composed filter from FILTERS names.

    Raises:
        ValueError: If a name is unknown
    """
    unknown = [n for n in names if n not in FILTERS]
    if unknown:
        raise ValueError(f"Unknown filters: {', '.join(unknown)}")
    return compose_filters(*(FILTERS[n] for n in names))

"""Culling functions that decide whether a filtered diff can skip manual review."""

import re
from functools import partial
from typing import Callable, Optional

from nltk.tokenize import WhitespaceTokenizer

from ..config import DEFAULT_WORD_THRESHOLD
from .wikitext import remove_comments, remove_references

CullingFunction = Callable[[str], bool]

_tokenizer = WhitespaceTokenizer()

# Templates, tags and headings that never carry prose
_BENIGN_TEMPLATES = [
    r"article for deletion(?:/dated)?",
    r"afdx?",
    r"proposed deletion(?:/dated)?",
    r"reflist",
    r"refimprove",
    r"more citations needed",
    r"unreferenced",
    r"citation needed",
    r"cn",
    r"fact",
    r"clarify",
    r"dead link",
    r"orphan",
    r"uncategorized",
    r"clear",
    r"defaultsort",
    r"stub",
    r"[\w -]+-stub",
]
_benign_template_re = re.compile(
    r"\{\{\s*(?:" + "|".join(_BENIGN_TEMPLATES) + r")\s*(?:[|:/][^{}]*)?\}\}", re.I)
_category_re = re.compile(r"\[\[\s*category\s*:[^\[\]]*\]\]", re.I)
_appendix_heading_re = re.compile(
    r"^\s*(=+)\s*(?:references|notes|footnotes|sources|bibliography|external links|see also|further reading)\s*\1\s*$",
    re.I | re.M)
_references_tag_re = re.compile(r"<references\s*/>|<references\s*>\s*</references\s*>", re.I)

_wikilink = r"\[\[(?!\s*(?:file|image)\s*:)[^\[\]\n]+\]\]"
_external_link = r"\[https?://[^\s\[\]<>]+(?:[ \t][^\[\]\n]*)?\]"
_link_item_re = re.compile(r"^[*#]+\s*(?:" + _wikilink + "|" + _external_link + r")\s*$", re.I)

_file_embed_re = re.compile(r"\[\[\s*(?:file|image)\s*:[^\[\]|]*((?:\|[^\[\]|]*)*)\]\]", re.I)
_LAYOUT_KEYWORDS = {
    "thumb", "thumbnail", "frame", "framed", "frameless", "border",
    "left", "right", "center", "centre", "none", "upright",
    "baseline", "middle", "sub", "super", "top", "text-top", "bottom", "text-bottom",
}
_size_re = re.compile(r"^(?:\d+|\d*x\d+)\s*px$", re.I)
_layout_param_re = re.compile(r"^(?:upright\s*=\s*[\d.]*|(?:link|class|lang)\s*=.*|page\s*=\s*\d+)$", re.I)


def _has_content(text: str) -> bool:
    return any(c.isalnum() for c in text)


def count_words(text: str) -> int:
    """Count words, ignoring tokens that are only punctuation or markup remnants.

    Args:
        text: Filtered diff text

    Returns:
        Number of tokens containing at least one letter or digit
    """
    return sum(1 for tok in _tokenizer.tokenize(text) if _has_content(tok))


def word_count_cull(text: str, threshold: int) -> bool:
    """Cull diffs with at most `threshold` words.

    Args:
        text: Filtered diff text
        threshold: Largest word count still considered minor

    Returns:
        True if the diff is minor
    """
    return count_words(text) <= threshold


def strip_benign(text: str) -> str:
    """Remove comments, references, maintenance templates, categories and appendix headings."""
    text = remove_references(remove_comments(text))
    text = _benign_template_re.sub("", text)
    text = _category_re.sub("", text)
    text = _references_tag_re.sub("", text)
    return _appendix_heading_re.sub("", text)


def whitelist_cull(text: str) -> bool:
    """Cull diffs with nothing left once known-benign constructs are removed.

    The residue may only be whitespace, list markers or punctuation.
    """
    return not _has_content(strip_benign(text))


def list_item_cull(text: str) -> bool:
    """Cull blocks of list items that each hold exactly one link.

    A single link line is ambiguous (it may open a prose list) and is kept
    for review, as is any line with text outside the link.
    """
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    if len(lines) < 2:
        return False
    return all(_link_item_re.match(ln) for ln in lines)


def _is_layout_param(param: str) -> bool:
    param = param.strip()
    if not param:
        return True
    if param.lower() in _LAYOUT_KEYWORDS:
        return True
    return bool(_size_re.match(param) or _layout_param_re.match(param))


def file_addition_cull(text: str) -> bool:
    """Cull diffs that only embed files without captions.

    Captions and alt text are free prose, so any parameter that is not a
    layout option keeps the diff in review.
    """
    stripped = text.strip()
    matches = list(_file_embed_re.finditer(stripped))
    if not matches or _file_embed_re.sub("", stripped).strip():
        return False
    for m in matches:
        params = m.group(1).split("|")[1:]
        if not all(_is_layout_param(p) for p in params):
            return False
    return True


CULLING_FUNCTIONS = {
    "wordcount": word_count_cull,
    "whitelist": whitelist_cull,
    "listitem": list_item_cull,
    "file": file_addition_cull,
}


def make_culling_function(name: str, threshold: Optional[int] = None) -> CullingFunction:
    """Look up a culling function by name, binding the word threshold if needed.

    Args:
        name: Key of CULLING_FUNCTIONS
        threshold: Word threshold for "wordcount"

    Returns:
        A text -> bool culling function

    Raises:
        ValueError: If the name is unknown
    """
    if name not in CULLING_FUNCTIONS:
        raise ValueError(f"Unknown culling function: {name}")
    if name == "wordcount":
        return partial(word_count_cull, threshold=DEFAULT_WORD_THRESHOLD if threshold is None else threshold)
    return CULLING_FUNCTIONS[name]

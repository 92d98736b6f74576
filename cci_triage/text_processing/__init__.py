"""Text processing for diff triage: wikitext filters and culling functions."""

from .wikitext import (
    remove_references, remove_external_links, remove_comments,
    compose_filters, standard_filter, filter_by_names, identity, FILTERS
)
from .culling import (
    word_count_cull, whitelist_cull, list_item_cull, file_addition_cull,
    count_words, make_culling_function, CULLING_FUNCTIONS
)

__all__ = [
    "remove_references",
    "remove_external_links",
    "remove_comments",
    "compose_filters",
    "standard_filter",
    "filter_by_names",
    "identity",
    "FILTERS",
    "word_count_cull",
    "whitelist_cull",
    "list_item_cull",
    "file_addition_cull",
    "count_words",
    "make_culling_function",
    "CULLING_FUNCTIONS"
]

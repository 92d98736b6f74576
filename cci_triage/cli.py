"""Command-line interface for the CCI triage tool."""

import os
import argparse

from .config import (
    DEFAULT_WIKI, OUT_PREFIX, LOG_DIR, DEFAULT_CULLING_FUNCTION,
    DEFAULT_WORD_THRESHOLD, DEFAULT_FILTERS
)
from .analyzer import CCIAnalyzer
from .reporting import write_outputs
from .sources import FileListing, MediaWikiClient, StaticDiffSource, WikiPageListing
from .text_processing import CULLING_FUNCTIONS, FILTERS, filter_by_names, make_culling_function


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    ap = argparse.ArgumentParser("Cull minor diffs from a Contributor Copyright Investigation listing.")

    # Listing and diff sources
    listing = ap.add_mutually_exclusive_group(required=True)
    listing.add_argument("--page",
                         help="CCI listing page title on the wiki")
    listing.add_argument("--listing_file",
                         help="Local file holding the listing wikitext")
    ap.add_argument("--wiki", default=DEFAULT_WIKI,
                    help="Wiki domain to read pages and diffs from")
    ap.add_argument("--diffs_jsonl", default=None,
                    help="Read diff texts from a JSONL file of {rev_id, text} instead of the wiki")

    # Classification configuration
    ap.add_argument("--cull", default=DEFAULT_CULLING_FUNCTION, choices=sorted(CULLING_FUNCTIONS),
                    help="Culling function to apply")
    ap.add_argument("--threshold", type=int, default=DEFAULT_WORD_THRESHOLD,
                    help="Largest word count still culled (wordcount only)")
    ap.add_argument("--filters", default=",".join(DEFAULT_FILTERS),
                    help=f"Comma-separated filters applied in order, from: {', '.join(FILTERS)}; empty for none")

    # Output configuration
    ap.add_argument("--output_dir", default=".",
                    help="Output directory for artifacts")
    ap.add_argument("--out_prefix", default=OUT_PREFIX,
                    help="Prefix for output files")
    ap.add_argument("--log_dir", default=LOG_DIR,
                    help="Directory for log files")

    return ap


def process_arguments(args):
    """Process and validate command-line arguments.

    Args:
        args: Parsed argument namespace
    """
    args.output_dir = os.path.abspath(args.output_dir)
    args.filter_names = [n.strip() for n in args.filters.split(",") if n.strip()]

    from . import config
    config.LOG_DIR = os.path.abspath(args.log_dir)


def run_pipeline(args) -> CCIAnalyzer:
    """Load the listing, analyse it and write outputs.

    Args:
        args: Parsed and processed argument namespace

    Returns:
        The analyzer holding the results
    """
    client = MediaWikiClient(args.wiki)
    diff_source = StaticDiffSource.from_jsonl(args.diffs_jsonl) if args.diffs_jsonl else client
    if args.page:
        source = WikiPageListing(client, args.page)
    else:
        source = FileListing(args.listing_file)

    print(f"[load] Reading listing from {args.page or args.listing_file}")
    listing_text = source.read_listing()

    analyzer = CCIAnalyzer(diff_source)
    analyzer.set_filtering_function(filter_by_names(args.filter_names))
    analyzer.set_culling_function(make_culling_function(args.cull, args.threshold))
    analyzer.load_string(listing_text)

    print(f"[analyze] Culling with '{args.cull}' after filters: {', '.join(args.filter_names) or 'none'}")
    analyzer.analyze_diffs()
    write_outputs(analyzer, listing_text, args.output_dir, args.out_prefix)
    return analyzer


def main(argv=None):
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    process_arguments(args)
    try:
        filter_by_names(args.filter_names)
    except ValueError as e:
        parser.error(str(e))
    run_pipeline(args)

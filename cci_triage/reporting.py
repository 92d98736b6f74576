"""Reporting - write analysis decisions and a listing with minor diffs removed."""

import os
from typing import Dict, Iterable, List

import pandas as pd

from . import config
from .analyzer import CCIAnalyzer
from .models import DiffDecision
from .parsing import diff_tokens, entry_spans
from .utils.io_utils import ensure_output_dir, output_path
from .utils.logging import ensure_logdir, log_decisions, log_fetch_failures

DECISION_COLUMNS = ["rev_id", "page_title", "token", "status", "byte_delta", "filtered_text", "error"]


def prune_listing(text: str, minor_edits: Iterable[str]) -> str:
    """Remove culled diff tokens from listing wikitext.

    Works on the entries the parser finds, so entries run together on one
    line are pruned individually. An entry with no diff left is dropped,
    together with its line break when it filled a whole line. Text outside
    entries is kept as is.

    Args:
        text: Raw listing wikitext
        minor_edits: Diff tokens to remove

    Returns:
        The pruned listing
    """
    tokens = set(minor_edits)
    pruned = ""
    copied = 0
    for heading, end in entry_spans(text):
        start = heading.start()
        pruned += text[copied:start]
        copied = end
        entry = text[start:end]
        found = diff_tokens(text[heading.end():end])
        culled = [tok for tok in found if tok in tokens]
        if not culled:
            pruned += entry
        elif len(culled) < len(found):
            for tok in culled:
                entry = entry.replace(tok, "")
            pruned += entry
        elif start == 0 or text[start - 1] == "\n":
            # Whole line emptied
            if text.startswith("\n", end):
                copied = end + 1
            elif end == len(text) and pruned.endswith("\n"):
                pruned = pruned[:-1]
    return pruned + text[copied:]


def decisions_frame(decisions: List[DiffDecision]) -> pd.DataFrame:
    """Tabulate per-diff decisions.

    Returns:
        DataFrame with one row per diff, in listing order
    """
    df = pd.DataFrame([d.to_record() for d in decisions], columns=DECISION_COLUMNS)
    df["byte_delta"] = df["byte_delta"].astype("Int64")
    return df


def write_outputs(analyzer: CCIAnalyzer, listing_text: str, output_dir: str, out_prefix: str) -> Dict[str, str]:
    """Write logs and artifacts for the last analysis run.

    Artifacts:
        <prefix>_minor_edits.txt     # one culled diff token per line
        <prefix>_pruned.txt          # listing without the culled diffs
        <prefix>_decisions.parquet   # every decision
    Logs (config.LOG_DIR):
        01_decisions.jsonl, 02_fetch_failures.jsonl

    Returns:
        Mapping of artifact name to path
    """
    ensure_output_dir(output_dir)
    ensure_logdir(config.LOG_DIR)

    log_decisions(d.to_record() for d in analyzer.decisions)
    log_fetch_failures(analyzer.failed_diffs)

    minor = analyzer.get_minor_edits()
    paths = {
        "minor_edits": output_path(output_dir, out_prefix, "minor_edits.txt"),
        "pruned": output_path(output_dir, out_prefix, "pruned.txt"),
        "decisions": output_path(output_dir, out_prefix, "decisions.parquet"),
    }
    with open(paths["minor_edits"], "w", encoding="utf-8") as f:
        for tok in minor:
            f.write(tok + "\n")
    with open(paths["pruned"], "w", encoding="utf-8") as f:
        f.write(prune_listing(listing_text, minor))
    decisions_frame(analyzer.decisions).to_parquet(paths["decisions"], index=False)

    total = len(analyzer.decisions)
    print(f"[output] {len(minor):,} of {total:,} diffs culled as minor, "
          f"{len(analyzer.failed_diffs):,} undetermined.")
    print(f"[output] Artifacts: {', '.join(os.path.basename(p) for p in paths.values())} in {output_dir}")
    return paths

#!/usr/bin/env python3
"""
Triage a Contributor Copyright Investigation listing.

Stages:
  parse → fetch → filter → cull → report

Logs (default ./logs):
  01_decisions.jsonl       # one record per diff: minor / review / undetermined
  02_fetch_failures.jsonl  # diffs whose text could not be fetched

Artifacts (default ./):
  cci_minor_edits.txt
  cci_pruned.txt
  cci_decisions.parquet
"""

from cci_triage.cli import main

if __name__ == "__main__":
    main()

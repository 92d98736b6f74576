#!/usr/bin/env python3
"""
Quick utility to view triage decisions from the analysis logs.
Usage:
  python view_decisions.py [--status STATUS] [--log_dir DIR]

Statuses: minor, review, undetermined (default: all)
"""

import os
import sys
from collections import Counter

from cci_triage import config
from cci_triage.utils import read_jsonl


def view_decisions(log_dir: str, status: str = None) -> bool:
    """Print a summary of decisions and the diffs matching a status."""
    log_path = os.path.join(log_dir, config.DECISIONS_LOG)

    if not os.path.exists(log_path):
        print(f"❌ {log_path} not found.")
        print("Run: python cci_analyzer.py --page <CCI page>")
        return False

    logs = read_jsonl(log_path)
    if not logs:
        print("No decisions logged.")
        return True

    statuses = Counter(r.get("status") for r in logs)
    print(f"\n{'='*60}")
    print(f"📊 CCI TRIAGE - Diff Decisions")
    print(f"{'='*60}")
    print(f"Total diffs: {len(logs)}")
    for name, count in statuses.most_common():
        marker = " ← viewing" if name == status else ""
        print(f"  • {name}: {count} ({count/len(logs)*100:.1f}%){marker}")

    shown = [r for r in logs if status is None or r.get("status") == status]
    print(f"\n{'='*60}")
    print(f"Showing {'all' if status is None else status} diffs")
    print(f"{'='*60}\n")

    for i, r in enumerate(shown, 1):
        text = r.get("filtered_text") or r.get("error") or ""
        print(f"{i}. [{r.get('status')}] {r.get('token')} ON: {r.get('page_title', '')[:60]}")
        print(f"   Text: {text[:200]}")
        if len(text) > 200:
            print(f"   ... (truncated, {len(text)} chars total)")
        print()

    if not shown:
        print("No matching diffs found.")
    return True


if __name__ == "__main__":
    status = None
    log_dir = config.LOG_DIR
    if "--status" in sys.argv:
        idx = sys.argv.index("--status")
        if idx + 1 < len(sys.argv):
            status = sys.argv[idx + 1]
    if "--log_dir" in sys.argv:
        idx = sys.argv.index("--log_dir")
        if idx + 1 < len(sys.argv):
            log_dir = sys.argv[idx + 1]
    sys.exit(0 if view_decisions(log_dir, status) else 1)

"""JSONL audit logs for a triage run.

Two logs live under config.LOG_DIR and are rewritten on every run:

    01_decisions.jsonl        # one DiffDecision record per diff, listing order
    02_fetch_failures.jsonl   # {"rev_id", "error"} per diff left undetermined

view_decisions.py reads the first one back.
"""

import os
from typing import Dict, Iterable, List, Optional

import orjson

from .. import config


def ensure_logdir(path: Optional[str] = None):
    """Create the log directory (config.LOG_DIR unless given) if it is missing."""
    target = path or config.LOG_DIR
    if target:
        os.makedirs(target, exist_ok=True)


def write_jsonl(path: str, recs: Iterable[dict]) -> int:
    """Append records to a JSONL log.

    Returns:
        Number of records written
    """
    ensure_logdir(os.path.dirname(path) or ".")
    n = 0
    with open(path, "ab") as f:
        for r in recs:
            f.write(orjson.dumps(r))
            f.write(b"\n")
            n += 1
    return n


def reset_log(filename: str) -> Optional[str]:
    """Delete a run log so the new run starts it fresh.

    Args:
        filename: config.DECISIONS_LOG or config.FETCH_FAILURES_LOG

    Returns:
        Full path to the log, or None if logging is disabled (empty LOG_DIR)
    """
    if not config.LOG_DIR:
        return None
    path = os.path.join(config.LOG_DIR, filename)
    if os.path.exists(path):
        os.remove(path)
    return path


def log_decisions(records: Iterable[dict]) -> Optional[str]:
    """Replace the decision log with this run's per-diff records.

    Returns:
        Path of the decision log, or None if logging is disabled
    """
    path = reset_log(config.DECISIONS_LOG)
    if path:
        write_jsonl(path, records)
    return path


def log_fetch_failures(failed: Dict[int, str]) -> Optional[str]:
    """Replace the fetch-failure log.

    The log is only created when some diff could not be fetched, so its
    presence alone flags a run with undetermined diffs.

    Args:
        failed: rev_id -> error message

    Returns:
        Path of the log if one was written, else None
    """
    path = reset_log(config.FETCH_FAILURES_LOG)
    if not path or not failed:
        return None
    write_jsonl(path, ({"rev_id": rev_id, "error": err} for rev_id, err in failed.items()))
    return path


def read_jsonl(path: str) -> List[dict]:
    """Read a decision or fetch-failure log.

    Returns:
        List of records, empty if the log does not exist
    """
    if not os.path.exists(path):
        return []
    records = []
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                records.append(orjson.loads(line))
    return records

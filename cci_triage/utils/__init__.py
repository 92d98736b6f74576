"""Utility functions for audit logs and output paths."""

from .logging import (
    ensure_logdir,
    log_decisions,
    log_fetch_failures,
    read_jsonl,
    reset_log,
    write_jsonl,
)
from .io_utils import ensure_output_dir, output_path

__all__ = [
    "write_jsonl",
    "reset_log",
    "read_jsonl",
    "ensure_logdir",
    "log_decisions",
    "log_fetch_failures",
    "ensure_output_dir",
    "output_path"
]

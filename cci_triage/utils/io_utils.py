"""I/O utility functions."""

import os


def ensure_output_dir(path: str):
    """Ensure an output directory exists.

    Args:
        path: Directory path to create
    """
    os.makedirs(path, exist_ok=True)


def output_path(output_dir: str, out_prefix: str, suffix: str) -> str:
    """Build an output file path such as <output_dir>/<prefix>_minor_edits.txt."""
    return os.path.join(output_dir, f"{out_prefix}_{suffix}")

"""
CCI triage - cull minor diffs from Contributor Copyright Investigation listings.

A listing is parsed into pages and diffs, each diff's added text is fetched,
filtered and passed to a culling function:
  parse → fetch → filter → cull → report

Diffs judged minor can be skipped by a human reviewer.
"""

__version__ = "1.0.0"

"""Configuration constants and settings for the CCI triage tool."""

# Wiki configuration
DEFAULT_WIKI = "en.wikipedia.org"
API_PATH = "/w/api.php"
USER_AGENT = "cci-triage/1.0 (Contributor copyright investigation triage)"
REQUEST_TIMEOUT = 30  # Seconds per API request
MAXLAG = 5  # Back off when replication lag is higher than this

# Culling configuration
DEFAULT_CULLING_FUNCTION = "wordcount"
DEFAULT_WORD_THRESHOLD = 9
DEFAULT_FILTERS = ["comments", "references", "links"]

# Output configuration
OUT_PREFIX = "cci"
LOG_DIR = "logs"

# Log file names
DECISIONS_LOG = "01_decisions.jsonl"
FETCH_FAILURES_LOG = "02_fetch_failures.jsonl"

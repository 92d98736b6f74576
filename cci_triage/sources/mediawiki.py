"""MediaWiki API client for CCI listing pages and diff content."""

from typing import Any, Dict, Optional

import requests
from bs4 import BeautifulSoup

from ..config import API_PATH, DEFAULT_WIKI, MAXLAG, REQUEST_TIMEOUT, USER_AGENT
from ..errors import CCIError, FetchError
from .base import DiffSource, ListingSource

_ADDED_CLASS = "diff-addedline"
_DELETED_CLASS = "diff-deletedline"


def extract_added_text(diff_html: str) -> str:
    """Extract the added text from a MediaWiki diff table body.

    Lines that only exist on the new side are taken whole. For changed lines
    only the inserted fragments are kept, since the rest was already there.

    Args:
        diff_html: The <tr> rows returned by action=compare

    Returns:
        Added text, one line per diff row
    """
    soup = BeautifulSoup(f"<table>{diff_html}</table>", "html.parser")
    lines = []
    for row in soup.find_all("tr"):
        added = row.find("td", class_=_ADDED_CLASS)
        if added is None:
            continue
        if row.find("td", class_=_DELETED_CLASS) is not None:
            line = "".join(ins.get_text() for ins in added.find_all("ins"))
        else:
            line = added.get_text()
        if line.strip():
            lines.append(line)
    return "\n".join(lines)


class MediaWikiClient(DiffSource):
    """Read-only client for a MediaWiki action API."""

    def __init__(self, domain: str = DEFAULT_WIKI, session: Optional[requests.Session] = None,
                 timeout: float = REQUEST_TIMEOUT, maxlag: int = MAXLAG):
        self.domain = domain
        self.api_url = f"https://{domain}{API_PATH}"
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.timeout = timeout
        self.maxlag = maxlag

    def _get(self, params: Dict[str, Any]) -> Dict[str, Any]:
        query = {"format": "json", "formatversion": "2", "maxlag": self.maxlag}
        query.update(params)
        try:
            resp = self.session.get(self.api_url, params=query, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise CCIError(f"Request to {self.api_url} failed: {e}") from e
        if "error" in data:
            err = data["error"]
            raise CCIError(f"API error {err.get('code')}: {err.get('info')}")
        return data

    def page_text(self, title: str) -> str:
        """Fetch the current wikitext of a page.

        Raises:
            CCIError: If the request fails or the page does not exist
        """
        data = self._get({
            "action": "query",
            "prop": "revisions",
            "titles": title,
            "rvprop": "content",
            "rvslots": "main",
        })
        pages = data.get("query", {}).get("pages", [])
        if not pages or pages[0].get("missing") or not pages[0].get("revisions"):
            raise CCIError(f"Page not found: {title}")
        main = pages[0]["revisions"][0].get("slots", {}).get("main", {})
        if main.get("texthidden") or "content" not in main:
            raise CCIError(f"Page content hidden: {title}")
        return main["content"]

    def revision_text(self, rev_id: int) -> str:
        """Fetch the full wikitext of a revision."""
        try:
            data = self._get({
                "action": "query",
                "prop": "revisions",
                "revids": rev_id,
                "rvprop": "content",
                "rvslots": "main",
            })
        except CCIError as e:
            raise FetchError(rev_id, str(e)) from e
        query = data.get("query", {})
        if query.get("badrevids"):
            raise FetchError(rev_id, "no such revision")
        for page in query.get("pages", []):
            for rev in page.get("revisions", []):
                main = rev.get("slots", {}).get("main", {})
                if main.get("texthidden") or "content" not in main:
                    raise FetchError(rev_id, "revision content hidden")
                return main["content"]
        raise FetchError(rev_id, "revision content unavailable")

    def fetch_added_text(self, rev_id: int) -> str:
        """Fetch the text added by a revision relative to its parent.

        A page creation has no parent, so its whole content counts as added.

        Raises:
            FetchError: If the diff cannot be resolved
        """
        try:
            data = self._get({
                "action": "compare",
                "fromrev": rev_id,
                "torelative": "prev",
                "prop": "diff|ids",
            })
        except CCIError as e:
            raise FetchError(rev_id, str(e)) from e
        compare = data.get("compare", {})
        if "fromrevid" not in compare:
            return self.revision_text(rev_id)
        return extract_added_text(compare.get("body", ""))


class WikiPageListing(ListingSource):
    """Listing wikitext read from a CCI page on the wiki."""

    def __init__(self, client: MediaWikiClient, title: str):
        self.client = client
        self.title = title

    def read_listing(self) -> str:
        return self.client.page_text(self.title)

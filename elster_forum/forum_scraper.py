from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from elster_forum.field_extractor import extract_forum_summary
from elster_forum.http_client import HttpClient
from elster_forum.models import ForumSummary
from elster_forum.row_selector import select_forum_rows

logger = logging.getLogger(__name__)


class ElsterForumScraper:
    """
    Scraper for the sub-forum listing on the ELSTER forum index page.

    Scope:
    - Index page only: https://forum.elster.de/anwenderforum/
    - No pagination, no login, no thread pages.

    A failed fetch is reported as an empty page, so a run with network
    problems ends with zero summaries instead of an exception.
    """

    def __init__(self, forum_url: str, http: HttpClient):
        self.forum_url = forum_url
        self.http = http

    def fetch_index_html(self) -> str:
        """Fetch raw index HTML; returns "" when the request fails."""
        logger.info("Fetching forum index: url=%s", self.forum_url)
        try:
            return self.http.get_text(self.forum_url)
        except requests.RequestException as e:
            logger.error("Download failed, continuing with empty page: url=%s err=%s", self.forum_url, e)
            return ""

    def scrape(self) -> list[ForumSummary]:
        return self.parse_index_html(self.fetch_index_html())

    # -------------------------
    # Parsing (unit-test target)
    # -------------------------

    def parse_index_html(self, html: str) -> list[ForumSummary]:
        if not html.strip():
            return []

        soup = BeautifulSoup(html, "lxml")
        summaries = [extract_forum_summary(row) for row in select_forum_rows(soup)]
        logger.info("Parsed forum summaries: %s", len(summaries))
        return summaries

from __future__ import annotations

import requests

from elster_forum.forum_scraper import ElsterForumScraper
from elster_forum.http_client import HttpClient, HttpConfig

FORUM_URL = "https://forum.elster.de/anwenderforum/"

INDEX_HTML = """
<html><body>
  <table class="forums">
    <tr><th>Forum</th><th>Themen</th><th>Beiträge</th><th>Letzter Beitrag</th></tr>
    <tr>
      <td><a href="forumdisplay.php?f=10">Allgemein</a><br>Fragen und Antworten
          Themen: 120 Letzter Beitrag: Steuererklärung 2023 von Hans M. heute</td>
      <td>120</td>
      <td>450</td>
      <td>von Hans M.</td>
    </tr>
    <tr>
      <td><a href="forumdisplay.php?f=11">Lohnsteuer</a> Arbeitnehmer</td>
      <td>1.234</td>
      <td>9.876</td>
      <td><a href="member.php?u=5">JaneDoe</a></td>
    </tr>
  </table>
</body></html>
"""


def _config() -> HttpConfig:
    return HttpConfig(
        timeout_sec=1.0,
        delay_sec=0.0,
        max_retries=0,
        backoff_base_sec=0.0,
        backoff_max_sec=0.0,
        user_agent="test",
    )


class _DummyHttp(HttpClient):
    def __init__(self, html: str):
        super().__init__(_config())
        self.html = html
        self.requested: list[str] = []

    def get_text(self, url: str) -> str:
        self.requested.append(url)
        return self.html


class _FailingSession(requests.Session):
    def get(self, url, **kwargs):
        raise requests.ConnectionError(f"unreachable: {url}")


def test_scrape_returns_summaries_in_row_order():
    http = _DummyHttp(INDEX_HTML)
    scraper = ElsterForumScraper(FORUM_URL, http)

    summaries = scraper.scrape()

    assert http.requested == [FORUM_URL]
    assert [s.name for s in summaries] == ["Allgemein", "Lohnsteuer"]

    first, second = summaries
    assert first.description == "Fragen und Antworten"
    assert first.last_thread_title == "Steuererklärung 2023"
    assert first.last_author == "Hans"

    assert second.topic_count == 1234
    assert second.post_count == 9876
    assert second.last_thread_title is None
    assert second.last_author == "JaneDoe"


def test_fetch_failure_yields_empty_result():
    http = HttpClient(_config(), session=_FailingSession())
    scraper = ElsterForumScraper(FORUM_URL, http)

    assert scraper.fetch_index_html() == ""
    assert scraper.scrape() == []


def test_blank_html_yields_empty_result():
    scraper = ElsterForumScraper(FORUM_URL, _DummyHttp(""))
    assert scraper.parse_index_html("   \n") == []


def test_page_without_forum_rows_yields_empty_result():
    scraper = ElsterForumScraper(FORUM_URL, _DummyHttp(""))
    html = "<html><body><table><tr><td>Wartung</td></tr></table></body></html>"
    assert scraper.parse_index_html(html) == []

from __future__ import annotations

import logging
from pathlib import Path

from elster_forum.forum_scraper import ElsterForumScraper
from elster_forum.http_client import HttpClient, HttpConfig
from elster_forum.settings import load_settings
from elster_forum.sinks import ConsoleSink, JsonFileSink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


def main() -> None:
    s = load_settings()

    http = HttpClient(
        HttpConfig(
            timeout_sec=s.request_timeout_sec,
            delay_sec=s.request_delay_sec,
            max_retries=s.max_retries,
            backoff_base_sec=s.backoff_base_sec,
            backoff_max_sec=s.backoff_max_sec,
            user_agent=s.user_agent,
        )
    )

    scraper = ElsterForumScraper(forum_url=s.forum_url, http=http)

    html = scraper.fetch_index_html()
    summaries = scraper.parse_index_html(html)

    # Page arrived but nothing matched: the layout probably changed.
    if not summaries and html and s.dump_html_on_empty:
        Path(s.dump_html_path).write_text(html, encoding="utf-8")
        logger.warning("No forum rows parsed. Dumped HTML to: %s", s.dump_html_path)

    logger.info("Extracted forums: %s", len(summaries))

    if s.print_summary:
        ConsoleSink().write(summaries)

    if s.output_path:
        JsonFileSink(s.output_path).write(summaries)


if __name__ == "__main__":
    main()
